"""Channel layout resolution."""

__docformat__ = "restructuredtext"
__all__ = ["resolve_format"]

from tfimport.graph.types import ChannelLayout, GraphNode
from tfimport.presets import ATTR_DATA_FORMAT, FORMAT_NHWC


def resolve_format(node: GraphNode) -> ChannelLayout | None:
    """Determine the channel ordering declared by a node's data_format.

    :param node: Graph node
    :return: CHANNEL_LAST for "NHWC", CHANNEL_FIRST for any other format,
        None if data_format is missing or is not valid UTF-8
    """
    attr = node.get_attr(ATTR_DATA_FORMAT)
    raw = attr.as_bytes() if attr is not None else None
    if raw is None:
        return None
    try:
        data_format = raw.decode("utf-8")
    except UnicodeDecodeError:
        return None
    if data_format == FORMAT_NHWC:
        return ChannelLayout.CHANNEL_LAST
    return ChannelLayout.CHANNEL_FIRST
