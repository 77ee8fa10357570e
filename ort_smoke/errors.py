"""
Smoke Test Errors
=================
Failure kinds surfaced by the inference smoke test.
"""

from __future__ import annotations

from typing import Any


class SmokeTestError(Exception):
    """Base class for every known failure of the smoke test."""

    def __init__(self, message: str, stage: Any = None):
        super().__init__(message)
        self.stage = stage


class RuntimeCallError(SmokeTestError):
    """A call into ONNX Runtime raised; carries the runtime's own message."""

    def __init__(self, step: str, runtime_message: str, stage: Any = None):
        super().__init__(f"{step} failed: {runtime_message}", stage)
        self.step = step
        self.runtime_message = runtime_message


class ShapeContractError(SmokeTestError):
    """The model loaded fine but its interface is not one we support."""

    def __init__(
        self,
        message: str,
        input_count: int | None = None,
        output_count: int | None = None,
        stage: Any = None,
    ):
        super().__init__(message, stage)
        self.input_count = input_count
        self.output_count = output_count

    @classmethod
    def for_slot_counts(cls, input_count: int, output_count: int) -> "ShapeContractError":
        return cls(
            "This demo currently only supports ONNX/ORT models with a single "
            f"input and output layer. Found {input_count} input layer(s) and "
            f"{output_count} output layer(s).",
            input_count=input_count,
            output_count=output_count,
        )


class ResourceReleasedError(SmokeTestError):
    """A runtime object was used or released after it had been released."""
