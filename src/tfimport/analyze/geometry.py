"""Spatial geometry extraction (strides, dilations, pooling window).

Exchange graphs store these as 4-long integer lists where only the two
spatial entries matter. Which two depends on the declared layout:

==============  =========  =========
layout          x / width  y / height
==============  =========  =========
channel-last    list[2]    list[1]
channel-first   list[3]    list[2]
unspecified     list[1]    list[2]
==============  =========  =========

A node without data_format falls back to the channel-last spatial positions
(entries 1 and 2) but returns them in list order rather than swapped. This is
the established import default and is kept as is.

Lists too short for the picked indices raise ``IndexError``.
"""

__docformat__ = "restructuredtext"
__all__ = ["get_dilations", "get_ksize", "get_strides", "pick_spatial_pair"]

from collections.abc import Sequence

from tfimport.analyze.layout import resolve_format
from tfimport.graph.types import ChannelLayout, GraphNode, KernelSize, SpatialPair
from tfimport.presets import ATTR_DILATIONS, ATTR_KSIZE, ATTR_STRIDES

# (first, second) list indices per layout
_SPATIAL_INDICES: dict[ChannelLayout | None, tuple[int, int]] = {
    None: (1, 2),
    ChannelLayout.CHANNEL_LAST: (2, 1),
    ChannelLayout.CHANNEL_FIRST: (3, 2),
}


def pick_spatial_pair(values: Sequence[int], layout: ChannelLayout | None) -> tuple[int, int]:
    """Pick the two spatial entries of a 4-long attribute list.

    :param values: Integer list in the node's declared layout
    :param layout: Resolved layout, None if unspecified
    :return: (x, y) pair, i.e. (width, height)
    """
    first, second = _SPATIAL_INDICES[layout]
    return int(values[first]), int(values[second])


def _get_int_list(node: GraphNode, name: str) -> tuple[int, ...] | None:
    attr = node.get_attr(name)
    return attr.as_ints() if attr is not None else None


def get_strides(node: GraphNode) -> SpatialPair | None:
    """Extract convolution/pooling strides.

    :param node: Graph node
    :return: Strides, None if the node has no strides attribute
    """
    values = _get_int_list(node, ATTR_STRIDES)
    if values is None:
        return None
    return SpatialPair(*pick_spatial_pair(values, resolve_format(node)))


def get_dilations(node: GraphNode) -> SpatialPair | None:
    """Extract convolution dilations.

    :param node: Graph node
    :return: Dilations, None if the node has no dilations attribute
    """
    values = _get_int_list(node, ATTR_DILATIONS)
    if values is None:
        return None
    return SpatialPair(*pick_spatial_pair(values, resolve_format(node)))


def get_ksize(node: GraphNode) -> KernelSize | None:
    """Extract the pooling window size (MaxPool, AvgPool).

    :param node: Graph node
    :return: Window size, None if the node has no ksize attribute
    """
    values = _get_int_list(node, ATTR_KSIZE)
    if values is None:
        return None
    return KernelSize(*pick_spatial_pair(values, resolve_format(node)))
