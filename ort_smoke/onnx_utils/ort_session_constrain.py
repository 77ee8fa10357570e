"""
ONNX Session Constraint
=======================
Centralize ORT runtime/session creation so the smoke test always loads
models the same way: full graph optimization, CPU only, quiet logs.
"""

import logging
from contextlib import contextmanager

import onnxruntime as ort

from ..config import GRAPH_OPTIMIZATION_LEVEL, PROVIDERS, SmokeTestConfig
from ..errors import RuntimeCallError, SmokeTestError

logger = logging.getLogger(__name__)


@contextmanager
def guard_ort(step: str):
    """Turn any exception raised by an ORT call into a ``RuntimeCallError``.

    The runtime's own message is kept and the original exception chained.
    Our own errors and ``MemoryError`` pass through untouched.
    """
    try:
        yield
    except (SmokeTestError, MemoryError):
        raise
    except Exception as e:
        raise RuntimeCallError(step, str(e)) from e


def init_runtime(log_severity_level: int) -> dict:
    """
    Prepare the process-wide ORT environment.

    The Python binding creates the environment lazily; what we control is
    its default logger severity.

    Returns:
        Dictionary with runtime version and available providers
    """
    with guard_ort("Runtime initialization"):
        ort.set_default_logger_severity(log_severity_level)
        runtime = {
            "version": ort.get_version_string(),
            "device": ort.get_device(),
            "available_providers": ort.get_available_providers(),
        }

    if not set(PROVIDERS) <= set(runtime["available_providers"]):
        raise RuntimeCallError(
            "Runtime initialization",
            f"providers {list(PROVIDERS)} not available; "
            f"available_providers={sorted(runtime['available_providers'])}",
        )

    logger.debug(
        "ORT runtime %s (%s), available providers: %s",
        runtime["version"],
        runtime["device"],
        runtime["available_providers"],
    )
    return runtime


def build_session_options(config: SmokeTestConfig) -> ort.SessionOptions:
    """Create SessionOptions with the fixed smoke-test settings."""
    with guard_ort("Session options creation"):
        so = ort.SessionOptions()

        # Set just in case: ORT_ENABLE_ALL is the default for recent ORT versions.
        so.graph_optimization_level = GRAPH_OPTIMIZATION_LEVEL

        # One run on one input; no parallel branches worth scheduling.
        so.execution_mode = ort.ExecutionMode.ORT_SEQUENTIAL

        # Keep logs quiet (0=VERBOSE, 1=INFO, 2=WARNING, 3=ERROR, 4=FATAL).
        so.log_severity_level = config.log_severity_level

        if config.intra_op_num_threads is not None:
            so.intra_op_num_threads = int(config.intra_op_num_threads)
            # ↳ intra: parallelism within a single operator
        if config.inter_op_num_threads is not None:
            so.inter_op_num_threads = int(config.inter_op_num_threads)
            # ↳ inter: parallelism across independent operators/nodes

    logger.debug(
        "ORT options -> graph_opt=%s, exec_mode=%s, intra=%s, inter=%s, ort_log=%s",
        getattr(so.graph_optimization_level, "name", so.graph_optimization_level),
        getattr(so.execution_mode, "name", so.execution_mode),
        config.intra_op_num_threads if config.intra_op_num_threads is not None else "auto",
        config.inter_op_num_threads if config.inter_op_num_threads is not None else "auto",
        so.log_severity_level,
    )
    return so


def build_session(
    model_path: str, session_options: ort.SessionOptions
) -> ort.InferenceSession:
    """Load ``model_path`` on the CPU execution provider.

    Raises:
        RuntimeCallError: missing file, corrupt model, unsupported ops, ...
    """
    with guard_ort("Session creation"):
        session = ort.InferenceSession(
            str(model_path), sess_options=session_options, providers=list(PROVIDERS)
        )

    logger.debug("Providers selected: %s", session.get_providers())
    return session
