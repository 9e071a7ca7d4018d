"""Fused activation lookup."""

__docformat__ = "restructuredtext"
__all__ = ["ACTIVATION_OPS", "get_activation_neuron"]

from tfimport.graph.types import ActivationNeuronType, GraphNode
from tfimport.presets import NEURON_ATTR, OP_RELU, OP_SIGMOID, OP_TANH

ACTIVATION_OPS: dict[str, ActivationNeuronType] = {
    OP_RELU: ActivationNeuronType.RELU,
    OP_TANH: ActivationNeuronType.TANH,
    OP_SIGMOID: ActivationNeuronType.SIGMOID,
}


def get_activation_neuron(node: GraphNode) -> ActivationNeuronType:
    """Read the fused activation recorded in the node's "neuron" attribute.

    :param node: Graph node
    :return: Activation type; NONE when the attribute is missing, not valid
        UTF-8, or names an unknown operator
    """
    attr = node.get_attr(NEURON_ATTR)
    raw = attr.as_bytes() if attr is not None else None
    if raw is None:
        return ActivationNeuronType.NONE
    try:
        op_name = raw.decode("utf-8")
    except UnicodeDecodeError:
        return ActivationNeuronType.NONE
    return ACTIVATION_OPS.get(op_name, ActivationNeuronType.NONE)
