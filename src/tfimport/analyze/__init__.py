"""Attribute normalization.

Layout-aware accessors that turn raw node attributes into typed operator
parameters. All accessors are pure reads of a single node.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "ACTIVATION_OPS",
    "NodeParams",
    "build_graph_params",
    "build_node_params",
    "get_activation_neuron",
    "get_dilations",
    "get_ksize",
    "get_raw_payload_bytes",
    "get_scalar_value",
    "get_shape",
    "get_strides",
    "get_value_tensor",
    "is_constant_op",
    "pick_spatial_pair",
    "resolve_format",
]

from tfimport.analyze.activation import ACTIVATION_OPS, get_activation_neuron
from tfimport.analyze.builder import build_graph_params, build_node_params
from tfimport.analyze.constant import (
    get_raw_payload_bytes,
    get_scalar_value,
    get_value_tensor,
    is_constant_op,
)
from tfimport.analyze.geometry import get_dilations, get_ksize, get_strides, pick_spatial_pair
from tfimport.analyze.layout import resolve_format
from tfimport.analyze.shape import get_shape
from tfimport.analyze.types import NodeParams
