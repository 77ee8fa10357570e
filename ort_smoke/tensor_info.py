"""
Tensor Introspection
====================
Names, shapes and buffer sizes of a model's input/output slots.
"""

from dataclasses import dataclass
from math import prod
from typing import Any, Sequence

FLOAT_TENSOR_TYPE = "tensor(float)"
FLOAT_BYTES = 4

# What the native API reports for a dimension it cannot resolve.
DYNAMIC_DIM = -1


def normalize_shape(raw_shape: Sequence[Any] | None) -> tuple[int, ...]:
    """
    Turn an ORT ``NodeArg.shape`` into plain integers.

    Symbolic dimensions (e.g. ``'batch_size'``), ``None`` and negative
    values all become ``DYNAMIC_DIM``; fixed dimensions are kept.
    """
    if raw_shape is None:
        return ()
    return tuple(
        DYNAMIC_DIM if (isinstance(dim, str) or dim is None or dim < 0) else int(dim)
        for dim in raw_shape
    )


def element_count(shape: Sequence[int]) -> int:
    """Product of the dimensions; ``()`` is a scalar and holds one element."""
    return prod(shape)


def byte_count(shape: Sequence[int]) -> int:
    return element_count(shape) * FLOAT_BYTES


def format_shape(shape: Sequence[int]) -> str:
    return "{" + ", ".join(str(dim) for dim in shape) + "}"


@dataclass(frozen=True)
class TensorDescriptor:
    """Name and declared shape of one input or output slot."""

    name: str
    shape: tuple[int, ...]
    element_type: str = FLOAT_TENSOR_TYPE

    @classmethod
    def from_node_arg(cls, node_arg) -> "TensorDescriptor":
        return cls(
            name=node_arg.name,
            shape=normalize_shape(node_arg.shape),
            element_type=node_arg.type,
        )

    @property
    def is_dynamic(self) -> bool:
        return DYNAMIC_DIM in self.shape

    def concrete_shape(self) -> tuple[int, ...]:
        # placeholder data is built for a batch of one
        return tuple(1 if dim == DYNAMIC_DIM else dim for dim in self.shape)

    @property
    def element_count(self) -> int:
        return element_count(self.concrete_shape())

    @property
    def byte_count(self) -> int:
        return byte_count(self.concrete_shape())

    def describe(self, role: str) -> str:
        """One fragment of the detail line, e.g. ``input_layer="x", input_shape={1, 4} (...)``."""
        sizes = f"elem_c={self.element_count}, byte_c={self.byte_count}"
        if self.is_dynamic:
            sizes = f"run as {format_shape(self.concrete_shape())}, {sizes}"
        return (
            f'{role}_layer="{self.name}", {role}_shape={format_shape(self.shape)} ({sizes})'
        )


@dataclass(frozen=True)
class MemoryLocation:
    """Where a tensor's buffer lives; only the CPU is supported."""

    device_type: str = "cpu"
    device_id: int = 0
