"""Tiny ONNX models written to ``tmp_path`` for the smoke-test suite."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import onnx
import pytest
from onnx import TensorProto, helper, numpy_helper

OPSET = 13
# old enough for any onnxruntime release we support
IR_VERSION = 8


def save_model(path: Path, nodes, inputs, outputs, initializers=()) -> Path:
    graph = helper.make_graph(
        nodes, "smoke", inputs, outputs, initializer=list(initializers)
    )
    model = helper.make_model(graph, opset_imports=[helper.make_opsetid("", OPSET)])
    model.ir_version = IR_VERSION
    onnx.save(model, str(path))
    return path


@pytest.fixture
def classifier_model(tmp_path) -> Path:
    """[1, 3, 224, 224] image in, [1, 1000] logits out."""
    weight = numpy_helper.from_array(np.full((3, 1000), 0.01, dtype=np.float32), "weight")
    bias = numpy_helper.from_array(np.zeros(1000, dtype=np.float32), "bias")
    nodes = [
        helper.make_node("GlobalAveragePool", ["input"], ["pooled"]),
        helper.make_node("Flatten", ["pooled"], ["flat"], axis=1),
        helper.make_node("Gemm", ["flat", "weight", "bias"], ["logits"]),
    ]
    return save_model(
        tmp_path / "classifier.onnx",
        nodes,
        [helper.make_tensor_value_info("input", TensorProto.FLOAT, [1, 3, 224, 224])],
        [helper.make_tensor_value_info("logits", TensorProto.FLOAT, [1, 1000])],
        [weight, bias],
    )


@pytest.fixture
def two_input_model(tmp_path) -> Path:
    return save_model(
        tmp_path / "two_inputs.onnx",
        [helper.make_node("Add", ["a", "b"], ["sum"])],
        [
            helper.make_tensor_value_info("a", TensorProto.FLOAT, [1, 4]),
            helper.make_tensor_value_info("b", TensorProto.FLOAT, [1, 4]),
        ],
        [helper.make_tensor_value_info("sum", TensorProto.FLOAT, [1, 4])],
    )


@pytest.fixture
def dynamic_batch_model(tmp_path) -> Path:
    return save_model(
        tmp_path / "dynamic.onnx",
        [helper.make_node("Relu", ["x"], ["y"])],
        [helper.make_tensor_value_info("x", TensorProto.FLOAT, ["batch", 4])],
        [helper.make_tensor_value_info("y", TensorProto.FLOAT, ["batch", 4])],
    )


@pytest.fixture
def int_input_model(tmp_path) -> Path:
    return save_model(
        tmp_path / "int_input.onnx",
        [helper.make_node("Identity", ["ids"], ["out"])],
        [helper.make_tensor_value_info("ids", TensorProto.INT64, [1, 4])],
        [helper.make_tensor_value_info("out", TensorProto.INT64, [1, 4])],
    )


@pytest.fixture
def corrupt_model(tmp_path) -> Path:
    path = tmp_path / "corrupt.onnx"
    path.write_bytes(b"this is not a protobuf model")
    return path


@pytest.fixture
def missing_model(tmp_path) -> Path:
    return tmp_path / "does_not_exist.ort"


@pytest.fixture
def int_output_model(tmp_path) -> Path:
    """Float scores in, int64 class index out."""
    return save_model(
        tmp_path / "int_output.onnx",
        [helper.make_node("ArgMax", ["scores"], ["label"], axis=1, keepdims=1)],
        [helper.make_tensor_value_info("scores", TensorProto.FLOAT, [1, 10])],
        [helper.make_tensor_value_info("label", TensorProto.INT64, [1, 1])],
    )
