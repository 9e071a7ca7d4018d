__docformat__ = "restructuredtext"
__version__ = "2026.1.0"
__all__ = [
    "GraphNode",
    "NodeParams",
    "build_graph_params",
    "build_node_params",
    "node_from_onnx",
]

from tfimport.analyze import NodeParams, build_graph_params, build_node_params
from tfimport.graph import GraphNode, node_from_onnx
