"""
ORT Inference Smoke Test
========================
Validate an ONNX Runtime integration by loading one model and running it once.
"""

from .config import SmokeTestConfig
from .errors import (
    ResourceReleasedError,
    RuntimeCallError,
    ShapeContractError,
    SmokeTestError,
)
from .smoke_test import InferenceSmokeTest, SmokeTestReport, Stage, run_smoke_test
from .tensor_info import MemoryLocation, TensorDescriptor

__version__ = "1.0.0"
__all__ = [
    "SmokeTestConfig",
    "InferenceSmokeTest",
    "SmokeTestReport",
    "Stage",
    "run_smoke_test",
    "TensorDescriptor",
    "MemoryLocation",
    "SmokeTestError",
    "RuntimeCallError",
    "ShapeContractError",
    "ResourceReleasedError",
]
