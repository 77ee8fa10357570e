"""
Smoke Test Configuration
========================
Everything the pipeline needs to know before it touches the runtime.
"""

import os
from dataclasses import dataclass
from pathlib import Path

import onnxruntime as ort

# Where the converted model is expected when nothing else is given.
DEFAULT_MODEL_PATH = Path("/tmp/test/model.ort")

# CPU only; other execution providers are out of scope.
PROVIDERS = ("CPUExecutionProvider",)

GRAPH_OPTIMIZATION_LEVEL = ort.GraphOptimizationLevel.ORT_ENABLE_ALL

# ORT severities: 0=VERBOSE, 1=INFO, 2=WARNING, 3=ERROR, 4=FATAL
ORT_LOG_SEVERITY_ERROR = 3

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class SmokeTestConfig:
    """Inputs to a single smoke-test run."""

    model_path: Path = DEFAULT_MODEL_PATH
    log_severity_level: int = ORT_LOG_SEVERITY_ERROR
    intra_op_num_threads: int | None = None
    # ↳ None -> keep ORT default (0 = auto)
    inter_op_num_threads: int | None = None

    def __post_init__(self):
        # accept plain strings from callers and argparse
        object.__setattr__(self, "model_path", Path(self.model_path))
