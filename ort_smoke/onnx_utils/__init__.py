"""
ONNX Runtime Utilities
======================
Utilities for consistent ONNX Runtime session management.
"""

from .ort_session_constrain import (
    build_session,
    build_session_options,
    guard_ort,
    init_runtime,
)
from .scoped import ReleaseLedger, ScopedHandle

__all__ = [
    "build_session",
    "build_session_options",
    "guard_ort",
    "init_runtime",
    "ReleaseLedger",
    "ScopedHandle",
]
