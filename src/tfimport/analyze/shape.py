"""Shape extraction for weight-carrying nodes."""

__docformat__ = "restructuredtext"
__all__ = ["get_shape"]

from tfimport.graph.types import GraphNode, ShapeDescriptor
from tfimport.presets import ATTR_SHAPE, ATTR_VALUE


def get_shape(node: GraphNode) -> ShapeDescriptor | None:
    """Get the shape of a node.

    An explicit "shape" attribute wins; otherwise the shape of the tensor stored
    in "value" is used (Const and VariableV2 style nodes).

    :param node: Graph node
    :return: Shape descriptor, None if neither attribute carries one
    """
    shape_attr = node.get_attr(ATTR_SHAPE)
    shape = shape_attr.as_shape() if shape_attr is not None else None
    if shape is not None:
        return shape

    value_attr = node.get_attr(ATTR_VALUE)
    tensor = value_attr.as_tensor() if value_attr is not None else None
    if tensor is None:
        return None
    return tensor.shape
