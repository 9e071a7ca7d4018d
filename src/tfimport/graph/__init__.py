"""Exchange-graph node model and protobuf adapters."""

__docformat__ = "restructuredtext"
__all__ = [
    "ActivationNeuronType",
    "AttributeKind",
    "AttributeValue",
    "ChannelLayout",
    "ElementType",
    "GraphNode",
    "KernelSize",
    "NormalizedShape",
    "ShapeDescriptor",
    "SpatialPair",
    "TensorPayload",
    "node_from_onnx",
    "payload_from_onnx",
]

from tfimport.graph.from_onnx import node_from_onnx, payload_from_onnx
from tfimport.graph.types import (
    ActivationNeuronType,
    AttributeKind,
    AttributeValue,
    ChannelLayout,
    ElementType,
    GraphNode,
    KernelSize,
    NormalizedShape,
    ShapeDescriptor,
    SpatialPair,
    TensorPayload,
)
