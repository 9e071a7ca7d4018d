"""Shared pytest fixtures for tfimport unit tests."""

import onnx
import pytest

from tests.test_units.test_tfimport.fixtures.synthetic_nodes import SyntheticTFNodes


@pytest.fixture
def nodes():
    """Synthetic node factory."""
    return SyntheticTFNodes


@pytest.fixture
def conv_nhwc_node():
    """Conv2D node in NHWC layout with asymmetric strides and dilations."""
    return SyntheticTFNodes.create_conv2d_node(
        strides=(1, 2, 3, 1), data_format="NHWC", dilations=(1, 4, 5, 1), neuron="Relu"
    )


@pytest.fixture
def conv_nchw_node():
    """Conv2D node in NCHW layout."""
    return SyntheticTFNodes.create_conv2d_node(strides=(1, 2, 3, 1), data_format="NCHW")


@pytest.fixture
def conv_default_node():
    """Conv2D node without data_format."""
    return SyntheticTFNodes.create_conv2d_node(strides=(1, 2, 3, 1), dilations=(1, 4, 5, 1))


@pytest.fixture
def float_const_node():
    """Const node with a single float32 value."""
    return SyntheticTFNodes.create_const_node(onnx.TensorProto.FLOAT, [1], [3.5])


@pytest.fixture
def conv_weights():
    """Const node with raw float32 conv weights and the array it was built from."""
    return SyntheticTFNodes.create_conv_weights_node()
