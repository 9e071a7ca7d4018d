"""Adapt ONNX protobuf nodes into exchange-graph nodes.

ONNX NodeProto carries the same open attribute map as the exchange format
(strings, integer lists, float lists, tensors), so TensorFlow-style nodes can
be built and serialized with ``onnx.helper`` and read back through here.
"""

__docformat__ = "restructuredtext"
__all__ = ["node_from_onnx", "payload_from_onnx"]

import warnings
from collections.abc import Callable, Iterable

from onnx import AttributeProto, NodeProto, TensorProto

from tfimport.graph.types import (
    AttributeValue,
    ElementType,
    GraphNode,
    ShapeDescriptor,
    TensorPayload,
)
from tfimport.presets import SHAPE_ATTRS

# ONNX dtype to exchange-format element type mapping
_ONNX_TO_ELEMENT_TYPE = {
    1: ElementType.DT_FLOAT,  # FLOAT
    2: ElementType.DT_UINT8,  # UINT8
    3: ElementType.DT_INT8,  # INT8
    5: ElementType.DT_INT16,  # INT16
    6: ElementType.DT_INT32,  # INT32
    7: ElementType.DT_INT64,  # INT64
    8: ElementType.DT_STRING,  # STRING
    9: ElementType.DT_BOOL,  # BOOL
    10: ElementType.DT_HALF,  # FLOAT16
    11: ElementType.DT_DOUBLE,  # DOUBLE
}


def _onnx_dtype_to_element_type(onnx_dtype: int, stacklevel: int) -> ElementType:
    """Convert ONNX dtype code to element type.

    :param onnx_dtype: ONNX data type code
    :param stacklevel: Warning stacklevel pointing at the public caller
    :return: Element type, DT_INVALID if there is no counterpart
    """
    element_type = _ONNX_TO_ELEMENT_TYPE.get(onnx_dtype)
    if element_type is None:
        warnings.warn(
            f"ONNX data type {onnx_dtype} has no element type counterpart; using DT_INVALID",
            UserWarning,
            stacklevel=stacklevel,
        )
        return ElementType.DT_INVALID
    return element_type


def _payload_from_onnx(tensor: TensorProto, stacklevel: int) -> TensorPayload:
    return TensorPayload(
        dtype=_onnx_dtype_to_element_type(tensor.data_type, stacklevel + 1),
        shape=ShapeDescriptor(tuple(tensor.dims)),
        content=bytes(tensor.raw_data) if tensor.raw_data else None,
        float_val=tuple(tensor.float_data),
        double_val=tuple(tensor.double_data),
        int_val=tuple(tensor.int32_data),
        int64_val=tuple(tensor.int64_data),
    )


def payload_from_onnx(tensor: TensorProto) -> TensorPayload:
    """Convert an ONNX TensorProto into a tensor payload.

    Raw data and typed value lists are carried over as-is; no decoding happens.

    :param tensor: ONNX tensor
    :return: Tensor payload
    """
    return _payload_from_onnx(tensor, stacklevel=3)


# Attribute type converters
CONVERT_ATTR_MAP: dict[int, Callable[[AttributeProto], AttributeValue]] = {
    1: lambda x: AttributeValue.of_float(x.f),  # FLOAT
    2: lambda x: AttributeValue.of_int(x.i),  # INT
    3: lambda x: AttributeValue.of_bytes(x.s),  # STRING
    6: lambda x: AttributeValue.of_floats(x.floats),  # FLOATS
    7: lambda x: AttributeValue.of_ints(x.ints),  # INTS
}


def _convert_attr(attr: AttributeProto, shape_attrs: Iterable[str]) -> AttributeValue:
    """Convert a single ONNX attribute.

    :param attr: ONNX attribute
    :param shape_attrs: Names of integer-list attributes holding shapes
    :return: Attribute value
    """
    if attr.type == AttributeProto.INTS and attr.name in shape_attrs:
        return AttributeValue.of_shape(tuple(attr.ints))
    if attr.type == AttributeProto.TENSOR:
        return AttributeValue.of_tensor(_payload_from_onnx(attr.t, stacklevel=4))
    convert = CONVERT_ATTR_MAP.get(attr.type)
    if convert is None:
        raise NotImplementedError(
            f"Attribute {attr.name} with type {attr.type} is not supported"
        )
    return convert(attr)


def node_from_onnx(node: NodeProto, shape_attrs: Iterable[str] = SHAPE_ATTRS) -> GraphNode:
    """Convert an ONNX NodeProto into a graph node.

    :param node: ONNX node
    :param shape_attrs: Names of integer-list attributes to read as shape descriptors
    :return: Graph node with converted attributes
    """
    shape_attrs = frozenset(shape_attrs)
    attrs: dict[str, AttributeValue] = {}
    for attr in node.attribute:
        attrs[attr.name] = _convert_attr(attr, shape_attrs)
    return GraphNode(
        name=node.name,
        op=node.op_type,
        attr=attrs,
        inputs=tuple(node.input),
    )
