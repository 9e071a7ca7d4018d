"""Constant payload extraction.

Only constant-producing operators (``CONSTANT_OPS``) are read; any other node
yields None even when it happens to carry a "value" attribute.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "get_raw_payload_bytes",
    "get_scalar_value",
    "get_value_tensor",
    "is_constant_op",
]

import numpy as np
import torch

from tfimport.graph.types import ElementType, GraphNode, TensorPayload
from tfimport.presets import ATTR_VALUE, CONSTANT_OPS

# Wire byte order is little-endian
_ELEMENT_TYPE_TO_NUMPY: dict[ElementType, str] = {
    ElementType.DT_FLOAT: "<f4",
    ElementType.DT_DOUBLE: "<f8",
    ElementType.DT_HALF: "<f2",
    ElementType.DT_INT8: "i1",
    ElementType.DT_INT16: "<i2",
    ElementType.DT_INT32: "<i4",
    ElementType.DT_INT64: "<i8",
    ElementType.DT_UINT8: "u1",
    ElementType.DT_BOOL: "?",
}

_NARROW_INT_TYPES = frozenset(
    {ElementType.DT_INT8, ElementType.DT_INT16, ElementType.DT_INT32, ElementType.DT_UINT8}
)


def is_constant_op(node: GraphNode) -> bool:
    return node.op in CONSTANT_OPS


def _get_const_tensor(node: GraphNode) -> TensorPayload | None:
    if not is_constant_op(node):
        return None
    attr = node.get_attr(ATTR_VALUE)
    return attr.as_tensor() if attr is not None else None


def get_raw_payload_bytes(node: GraphNode) -> bytes | None:
    """Get the raw byte buffer of a constant node's value.

    :param node: Graph node
    :return: Raw tensor content, None for non-constant nodes or when the
        payload has no byte buffer
    """
    tensor = _get_const_tensor(node)
    if tensor is None:
        return None
    return tensor.content


def get_scalar_value(node: GraphNode) -> float | None:
    """Get the first stored value of a constant node as a float32-precision float.

    float64 values are narrowed and int8/int16/int32/uint8 values widened to
    float32. Other element types, and empty value lists, yield None.

    :param node: Graph node
    :return: Scalar value or None
    """
    tensor = _get_const_tensor(node)
    if tensor is None:
        return None

    if tensor.dtype == ElementType.DT_FLOAT:
        values = tensor.float_val
    elif tensor.dtype == ElementType.DT_DOUBLE:
        values = tensor.double_val
    elif tensor.dtype in _NARROW_INT_TYPES:
        values = tensor.int_val
    else:
        return None

    if not values:
        return None
    return float(np.float32(values[0]))


def _typed_values_to_numpy(tensor: TensorPayload, np_dtype: np.dtype) -> np.ndarray:
    """Decode the typed value list matching the tensor's element type.

    :param tensor: Tensor payload without raw content
    :param np_dtype: Target numpy dtype
    :return: Flat numpy array
    """
    if tensor.dtype == ElementType.DT_FLOAT:
        return np.asarray(tensor.float_val, dtype=np_dtype)
    if tensor.dtype == ElementType.DT_DOUBLE:
        return np.asarray(tensor.double_val, dtype=np_dtype)
    if tensor.dtype == ElementType.DT_INT64:
        return np.asarray(tensor.int64_val, dtype=np_dtype)
    if tensor.dtype == ElementType.DT_HALF:
        # float16 values are stored as their uint16 bit patterns
        return np.asarray(tensor.int_val, dtype=np.uint16).view(np.float16)
    return np.asarray(tensor.int_val, dtype=np_dtype)


def _payload_to_numpy(tensor: TensorPayload) -> np.ndarray:
    """Decode a tensor payload into a numpy array of its declared shape.

    Raw content is preferred over typed value lists. A single typed value is
    broadcast over the whole shape.

    :param tensor: Tensor payload
    :return: Numpy array in native byte order
    """
    np_dtype_str = _ELEMENT_TYPE_TO_NUMPY.get(tensor.dtype)
    if np_dtype_str is None:
        raise ValueError(f"Tensor element type {tensor.dtype.name} cannot be decoded")
    np_dtype = np.dtype(np_dtype_str)
    dims = tensor.shape.dims if tensor.shape is not None else ()
    count = int(np.prod(dims, dtype=np.int64))

    if tensor.content is not None:
        array = np.frombuffer(tensor.content, dtype=np_dtype)
    else:
        array = _typed_values_to_numpy(tensor, np_dtype)
        if array.size == 1 and count != 1:
            array = np.full(count, array[0], dtype=array.dtype)

    if array.size != count:
        raise ValueError(
            f"Tensor payload holds {array.size} elements but shape {dims} needs {count}"
        )
    return array.reshape(dims).astype(array.dtype.newbyteorder("="))


def get_value_tensor(node: GraphNode) -> torch.Tensor | None:
    """Materialize a constant node's value as a PyTorch tensor.

    :param node: Graph node
    :return: Tensor with the payload's dtype and shape, None for non-constant nodes
    """
    tensor = _get_const_tensor(node)
    if tensor is None:
        return None
    return torch.from_numpy(_payload_to_numpy(tensor))
