"""Collect normalized parameters for graph nodes.

Convenience layer for graph builders that want every accessor's result at
once. Each field comes straight from the corresponding pull accessor.
"""

__docformat__ = "restructuredtext"
__all__ = ["build_graph_params", "build_node_params"]

from collections.abc import Iterable

from tfimport.analyze.activation import get_activation_neuron
from tfimport.analyze.constant import get_raw_payload_bytes, get_scalar_value
from tfimport.analyze.geometry import get_dilations, get_ksize, get_strides
from tfimport.analyze.layout import resolve_format
from tfimport.analyze.shape import get_shape
from tfimport.analyze.types import NodeParams
from tfimport.graph.types import GraphNode


def build_node_params(node: GraphNode) -> NodeParams:
    """Extract all normalized parameters of a node.

    :param node: Graph node
    :return: Parameter bundle
    """
    shape = get_shape(node)
    normalized_shape = None
    if shape is not None and shape.rank == 4:
        normalized_shape = shape.to_normalized_shape()

    return NodeParams(
        name=node.name,
        op=node.op,
        layout=resolve_format(node),
        strides=get_strides(node),
        dilations=get_dilations(node),
        ksize=get_ksize(node),
        shape=shape,
        normalized_shape=normalized_shape,
        activation=get_activation_neuron(node),
        scalar_value=get_scalar_value(node),
        raw_payload=get_raw_payload_bytes(node),
    )


def build_graph_params(nodes: Iterable[GraphNode]) -> dict[str, NodeParams]:
    """Extract parameters for a sequence of nodes.

    :param nodes: Graph nodes with unique names
    :return: Mapping from node name to parameter bundle, in input order
    """
    return {node.name: build_node_params(node) for node in nodes}
