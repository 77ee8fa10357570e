"""
Scoped Runtime Handles
======================
Release-exactly-once wrappers for objects obtained from ONNX Runtime.

Python frees ORT objects when the last reference goes away, so releasing a
handle means dropping the only reference we hold. Handles are meant to be
registered on a ``contextlib.ExitStack`` so they go away LIFO on every
exit path.
"""

import logging
from typing import Generic, TypeVar

from ..errors import ResourceReleasedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReleaseLedger:
    """Records the order in which handles were released."""

    def __init__(self):
        self.released: list[str] = []

    def record(self, kind: str):
        self.released.append(kind)

    def count(self, kind: str) -> int:
        return self.released.count(kind)


class ScopedHandle(Generic[T]):
    """Owns one runtime object until ``release()`` is called."""

    def __init__(
        self,
        kind: str,
        obj: T,
        ledger: ReleaseLedger | None = None,
    ):
        self.kind = kind
        self._obj: T | None = obj
        self._released = False
        self._ledger = ledger

    @property
    def released(self) -> bool:
        return self._released

    @property
    def value(self) -> T:
        if self._released:
            raise ResourceReleasedError(f"{self.kind} used after release")
        return self._obj

    def release(self):
        if self._released:
            raise ResourceReleasedError(f"{self.kind} released twice")
        self._obj = None
        self._released = True
        if self._ledger is not None:
            self._ledger.record(self.kind)
        logger.debug("Released %s", self.kind)

    def __repr__(self):
        state = "released" if self._released else "live"
        return f"<ScopedHandle {self.kind} ({state})>"
