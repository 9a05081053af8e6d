"""Properties of the machine being compiled for."""

from __future__ import annotations

from dataclasses import dataclass

from .typesystem import IntSize, IntType, UIntType


@dataclass(frozen=True)
class Target:
    """The native integer size and the target triplet."""

    int_size: IntSize
    triplet: str = ""

    @property
    def native_int_type(self) -> IntType:
        return IntType(self.int_size)

    @property
    def native_uint_type(self) -> UIntType:
        return UIntType(self.int_size)