"""Exchange-graph data model.

Immutable, already-deserialized views of exchange-graph nodes and their
loosely typed attribute maps. Nothing in this package mutates them.
"""

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
]

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, NamedTuple


class ElementType(IntEnum):
    """Numeric element type tag of a tensor payload (exchange-format numbering)."""

    DT_INVALID = 0
    DT_FLOAT = 1
    DT_DOUBLE = 2
    DT_INT32 = 3
    DT_UINT8 = 4
    DT_INT16 = 5
    DT_INT8 = 6
    DT_STRING = 7
    DT_INT64 = 9
    DT_BOOL = 10
    DT_HALF = 19


class ChannelLayout(Enum):
    """Channel ordering of a 4-D tensor layout.

    :cvar CHANNEL_LAST: NHWC
    :cvar CHANNEL_FIRST: NCHW (or any other declared format)
    """

    CHANNEL_LAST = "channel_last"
    CHANNEL_FIRST = "channel_first"


class ActivationNeuronType(Enum):
    """Fused activation function attached to a producing node."""

    NONE = "none"
    RELU = "relu"
    TANH = "tanh"
    SIGMOID = "sigmoid"


class SpatialPair(NamedTuple):
    """Horizontal/vertical pair used for strides and dilations."""

    x: int
    y: int


class KernelSize(NamedTuple):
    """Pooling window size."""

    width: int
    height: int


@dataclass(frozen=True)
class NormalizedShape:
    """Layout-independent kernel shape consumed by the graph builder.

    :param width: Kernel width
    :param height: Kernel height
    :param input_channels: Number of input channels
    :param output_channels: Number of output channels
    """

    width: int
    height: int
    input_channels: int
    output_channels: int


@dataclass(frozen=True)
class ShapeDescriptor:
    """Ordered dimension sizes of a tensor.

    Named accessors follow the native Conv2D kernel order
    (height, width, input channels, output channels) and assume four dims.
    Calling them on a shorter shape raises ``IndexError``; only ``is_bias``
    is meaningful for 1-D shapes.

    :param dims: Dimension sizes
    """

    dims: tuple[int, ...]

    @property
    def rank(self) -> int:
        return len(self.dims)

    @property
    def is_bias(self) -> bool:
        return len(self.dims) == 1

    @property
    def kernel_height(self) -> int:
        return self.dims[0]

    @property
    def kernel_width(self) -> int:
        return self.dims[1]

    @property
    def input_channels(self) -> int:
        return self.dims[2]

    @property
    def output_channels(self) -> int:
        return self.dims[3]

    @property
    def total_element_count(self) -> int:
        return self.output_channels * self.input_channels * self.kernel_width * self.kernel_height

    def to_normalized_shape(self) -> NormalizedShape:
        """Package the named kernel dimensions for the graph builder.

        :return: Normalized shape
        """
        return NormalizedShape(
            width=self.kernel_width,
            height=self.kernel_height,
            input_channels=self.input_channels,
            output_channels=self.output_channels,
        )


@dataclass(frozen=True)
class TensorPayload:
    """Tensor value embedded in an attribute.

    ``content`` and the typed value lists are alternative encodings of the same
    data; at most the list matching ``dtype`` is populated. Narrow integer types
    (int8, int16, int32, uint8) all live in ``int_val``.

    :param dtype: Declared element type
    :param shape: Tensor shape (None if not recorded)
    :param content: Raw little-endian byte buffer (None if not recorded)
    :param float_val: float32 values
    :param double_val: float64 values
    :param int_val: int8/int16/int32/uint8 values
    :param int64_val: int64 values
    """

    dtype: ElementType
    shape: ShapeDescriptor | None = None
    content: bytes | None = None
    float_val: tuple[float, ...] = ()
    double_val: tuple[float, ...] = ()
    int_val: tuple[int, ...] = ()
    int64_val: tuple[int, ...] = ()


class AttributeKind(Enum):
    """Populated variant of an :class:`AttributeValue`."""

    BYTES = "bytes"
    INT = "int"
    FLOAT = "float"
    INTS = "ints"
    FLOATS = "floats"
    TENSOR = "tensor"
    SHAPE = "shape"


@dataclass(frozen=True)
class AttributeValue:
    """Tagged union over the attribute value variants.

    Exactly one variant is populated. Accessors return None when the requested
    variant is not the populated one.

    :param kind: Populated variant
    :param value: Variant payload
    """

    kind: AttributeKind
    value: Any

    @classmethod
    def of_bytes(cls, value: bytes | str) -> "AttributeValue":
        if isinstance(value, str):
            value = value.encode("utf-8")
        return cls(AttributeKind.BYTES, bytes(value))

    @classmethod
    def of_int(cls, value: int) -> "AttributeValue":
        return cls(AttributeKind.INT, int(value))

    @classmethod
    def of_float(cls, value: float) -> "AttributeValue":
        return cls(AttributeKind.FLOAT, float(value))

    @classmethod
    def of_ints(cls, values) -> "AttributeValue":
        return cls(AttributeKind.INTS, tuple(int(v) for v in values))

    @classmethod
    def of_floats(cls, values) -> "AttributeValue":
        return cls(AttributeKind.FLOATS, tuple(float(v) for v in values))

    @classmethod
    def of_tensor(cls, tensor: TensorPayload) -> "AttributeValue":
        return cls(AttributeKind.TENSOR, tensor)

    @classmethod
    def of_shape(cls, shape: ShapeDescriptor | tuple[int, ...]) -> "AttributeValue":
        if not isinstance(shape, ShapeDescriptor):
            shape = ShapeDescriptor(tuple(int(d) for d in shape))
        return cls(AttributeKind.SHAPE, shape)

    def _match(self, kind: AttributeKind) -> Any:
        return self.value if self.kind is kind else None

    def as_bytes(self) -> bytes | None:
        return self._match(AttributeKind.BYTES)

    def as_int(self) -> int | None:
        return self._match(AttributeKind.INT)

    def as_float(self) -> float | None:
        return self._match(AttributeKind.FLOAT)

    def as_ints(self) -> tuple[int, ...] | None:
        return self._match(AttributeKind.INTS)

    def as_floats(self) -> tuple[float, ...] | None:
        return self._match(AttributeKind.FLOATS)

    def as_tensor(self) -> TensorPayload | None:
        return self._match(AttributeKind.TENSOR)

    def as_shape(self) -> ShapeDescriptor | None:
        return self._match(AttributeKind.SHAPE)


@dataclass(frozen=True)
class GraphNode:
    """Operator instance in the exchange graph.

    :param name: Node name
    :param op: Operator type tag (e.g., "Conv2D", "Const")
    :param attr: Attribute name to value mapping
    :param inputs: Input tensor names
    """

    name: str
    op: str
    attr: Mapping[str, AttributeValue] = field(default_factory=dict)
    inputs: tuple[str, ...] = ()

    # attr is a mapping, so nodes compare by value but cannot be hashed
    __hash__ = None

    def get_attr(self, name: str) -> AttributeValue | None:
        """Look up an attribute by name.

        :param name: Attribute name
        :return: Attribute value, or None if the key is not set
        """
        return self.attr.get(name)
