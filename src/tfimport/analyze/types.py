"""Normalized per-node parameter bundle."""

__docformat__ = "restructuredtext"
__all__ = ["NodeParams"]

from dataclasses import dataclass

from tfimport.graph.types import (
    ActivationNeuronType,
    ChannelLayout,
    KernelSize,
    NormalizedShape,
    ShapeDescriptor,
    SpatialPair,
)


@dataclass(frozen=True)
class NodeParams:
    """Every normalized parameter this layer can extract from one node.

    Fields are None wherever the corresponding accessor found nothing. No
    operator-specific defaults are filled in.

    :param name: Node name
    :param op: Operator type tag
    :param layout: Declared channel layout
    :param strides: Strides (x, y)
    :param dilations: Dilations (x, y)
    :param ksize: Pooling window (width, height)
    :param shape: Raw shape descriptor
    :param normalized_shape: Kernel shape, only for 4-D shapes
    :param activation: Fused activation
    :param scalar_value: First stored constant value
    :param raw_payload: Raw constant bytes
    """

    name: str
    op: str
    layout: ChannelLayout | None
    strides: SpatialPair | None
    dilations: SpatialPair | None
    ksize: KernelSize | None
    shape: ShapeDescriptor | None
    normalized_shape: NormalizedShape | None
    activation: ActivationNeuronType
    scalar_value: float | None
    raw_payload: bytes | None
