"""Recognized exchange-format vocabulary.

Attribute keys, layout literals and operator names that node attributes are
matched against. These strings must match the exchange format exactly.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "ATTR_DATA_FORMAT",
    "ATTR_DILATIONS",
    "ATTR_KSIZE",
    "ATTR_SHAPE",
    "ATTR_STRIDES",
    "ATTR_VALUE",
    "CONSTANT_OPS",
    "FORMAT_NHWC",
    "NEURON_ATTR",
    "OP_RELU",
    "OP_SIGMOID",
    "OP_TANH",
    "SHAPE_ATTRS",
]

ATTR_SHAPE = "shape"
ATTR_VALUE = "value"
ATTR_STRIDES = "strides"
ATTR_DILATIONS = "dilations"
ATTR_KSIZE = "ksize"
ATTR_DATA_FORMAT = "data_format"

# Any other decodable data_format is treated as channel-first
FORMAT_NHWC = "NHWC"

# Custom attribute carrying the op name of a fused activation
NEURON_ATTR = "neuron"

OP_RELU = "Relu"
OP_TANH = "Tanh"
OP_SIGMOID = "Sigmoid"

# Operators whose output is the tensor stored in their "value" attribute
CONSTANT_OPS = frozenset({"Const"})

# Integer-list attributes read as shape descriptors when adapting ONNX nodes
SHAPE_ATTRS = (ATTR_SHAPE,)
