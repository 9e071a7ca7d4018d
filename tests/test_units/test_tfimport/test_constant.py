"""Tests for constant payload extraction.

Test Coverage:
- TestConstantGate: only constant-producing operators are read
- TestRawPayloadBytes: raw buffer extraction
- TestScalarValue: per element type scalar extraction and narrowing
- TestValueTensor: tensor materialization from raw and typed values
"""

import numpy as np
import onnx
import pytest
import torch

from tfimport.analyze import (
    get_raw_payload_bytes,
    get_scalar_value,
    get_value_tensor,
    is_constant_op,
)
from tfimport.graph import AttributeValue, ElementType, GraphNode, ShapeDescriptor, TensorPayload


def _const(payload, op="Const"):
    return GraphNode(name="c", op=op, attr={"value": AttributeValue.of_tensor(payload)})


class TestConstantGate:
    """Test the constant-producing operator check."""

    def test_const_is_constant_op(self, float_const_node):
        """Test Const nodes are constant-producing."""
        assert is_constant_op(float_const_node)

    @pytest.mark.parametrize("op_type", ["VariableV2", "Identity", "const", "Placeholder"])
    def test_other_ops_are_not_constant(self, nodes, op_type):
        """Test membership is an exact op match."""
        node = nodes.create_const_node(onnx.TensorProto.FLOAT, [1], [3.5], op_type=op_type)
        assert not is_constant_op(node)
        assert get_scalar_value(node) is None
        assert get_raw_payload_bytes(node) is None
        assert get_value_tensor(node) is None

    def test_const_without_value_is_none(self, nodes):
        """Test a Const node lacking a value attribute gives None."""
        node = nodes.create_bare_node("Const")
        assert get_scalar_value(node) is None
        assert get_raw_payload_bytes(node) is None
        assert get_value_tensor(node) is None


class TestRawPayloadBytes:
    """Test get_raw_payload_bytes."""

    def test_raw_bytes_round_trip(self, conv_weights):
        """Test raw weight bytes are returned unchanged."""
        node, weights = conv_weights
        assert get_raw_payload_bytes(node) == weights.tobytes()

    def test_typed_values_only_gives_none(self, float_const_node):
        """Test payload without a raw buffer gives None."""
        assert get_raw_payload_bytes(float_const_node) is None


class TestScalarValue:
    """Test get_scalar_value."""

    def test_float_value(self, float_const_node):
        """Test float32 payload returns its first value."""
        assert get_scalar_value(float_const_node) == 3.5

    def test_first_of_many_values(self, nodes):
        """Test only the first stored value is returned."""
        node = nodes.create_const_node(onnx.TensorProto.FLOAT, [3], [0.25, 1.0, 2.0])
        assert get_scalar_value(node) == 0.25

    def test_double_is_narrowed_to_float32(self, nodes):
        """Test float64 values are narrowed to float32 precision."""
        node = nodes.create_const_node(onnx.TensorProto.DOUBLE, [1], [0.1])
        value = get_scalar_value(node)
        assert value == float(np.float32(0.1))
        assert value != 0.1
        assert value == pytest.approx(0.1)

    @pytest.mark.parametrize(
        ("data_type", "stored"),
        [
            (onnx.TensorProto.INT8, -7),
            (onnx.TensorProto.INT16, 1200),
            (onnx.TensorProto.INT32, 65536),
            (onnx.TensorProto.UINT8, 255),
        ],
    )
    def test_narrow_ints_are_widened(self, nodes, data_type, stored):
        """Test int8/int16/int32/uint8 values are returned as floats."""
        node = nodes.create_const_node(data_type, [1], [stored])
        value = get_scalar_value(node)
        assert isinstance(value, float)
        assert value == float(stored)

    def test_int64_gives_none(self, nodes):
        """Test int64 payloads are not read as scalars."""
        node = nodes.create_const_node(onnx.TensorProto.INT64, [1], [5])
        assert get_scalar_value(node) is None

    def test_empty_value_list_gives_none(self):
        """Test an empty typed list gives None rather than zero."""
        node = _const(TensorPayload(dtype=ElementType.DT_FLOAT, shape=ShapeDescriptor((0,))))
        assert get_scalar_value(node) is None

    def test_raw_only_payload_gives_none(self, conv_weights):
        """Test scalar extraction reads typed lists, not the raw buffer."""
        node, _ = conv_weights
        assert get_scalar_value(node) is None


class TestValueTensor:
    """Test get_value_tensor."""

    def test_raw_float_weights(self, conv_weights):
        """Test raw float32 bytes decode into a tensor of the stored shape."""
        node, weights = conv_weights
        tensor = get_value_tensor(node)
        assert tensor.dtype == torch.float32
        assert tuple(tensor.shape) == (3, 3, 8, 16)
        assert torch.equal(tensor, torch.from_numpy(weights))

    def test_typed_float_values(self, nodes):
        """Test typed float values are reshaped to the stored shape."""
        node = nodes.create_const_node(onnx.TensorProto.FLOAT, [2, 2], [1.0, 2.0, 3.0, 4.0])
        assert torch.equal(get_value_tensor(node), torch.tensor([[1.0, 2.0], [3.0, 4.0]]))

    def test_typed_int8_values(self, nodes):
        """Test int8 values keep their element type."""
        node = nodes.create_const_node(onnx.TensorProto.INT8, [2], [-1, 2])
        tensor = get_value_tensor(node)
        assert tensor.dtype == torch.int8
        assert tensor.tolist() == [-1, 2]

    def test_single_value_is_broadcast(self):
        """Test a single typed value fills the whole shape."""
        payload = TensorPayload(
            dtype=ElementType.DT_FLOAT, shape=ShapeDescriptor((2, 3)), float_val=(0.5,)
        )
        assert torch.equal(get_value_tensor(_const(payload)), torch.full((2, 3), 0.5))

    def test_element_count_mismatch_raises(self):
        """Test a payload that does not fill its shape raises ValueError."""
        payload = TensorPayload(
            dtype=ElementType.DT_FLOAT,
            shape=ShapeDescriptor((2, 2)),
            float_val=(1.0, 2.0, 3.0),
        )
        with pytest.raises(ValueError, match="elements"):
            get_value_tensor(_const(payload))

    def test_undecodable_element_type_raises(self):
        """Test string payloads cannot be materialized."""
        payload = TensorPayload(dtype=ElementType.DT_STRING, shape=ShapeDescriptor((1,)))
        with pytest.raises(ValueError, match="DT_STRING"):
            get_value_tensor(_const(payload))
