# core_types.py

"""
Shared type definitions for the xoroshiro-streams project.

This module is intentionally small and dependency-free so it can be imported
from anywhere (generators/, utils/, main.py, tests) without risk of circular
imports.

Two protocols describe how the pieces fit together:

    SeedSequence      anything that can fill a range of a buffer with
                      32-bit words. Generators are seeded from one.
    UniformGenerator  anything producing uniform 64-bit values with
                      declared bounds. Consumers rescale from [MIN, MAX].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, MutableSequence, Optional, Protocol, runtime_checkable


# ---------- Basic aliases ----------

Word32 = int
Word64 = int

MASK32: int = 0xFFFFFFFF
MASK64: int = 0xFFFFFFFFFFFFFFFF


# ---------- Protocols ----------


@runtime_checkable
class SeedSequence(Protocol):
    """
    Source of 32-bit seed words.

    `generate` writes one word into every slot of buffer[start:end].
    `end=None` means the end of the buffer. The buffer may be a list or
    any other mutable sequence (e.g. a NumPy uint32 array).
    """

    def generate(
        self,
        buffer: MutableSequence[int],
        start: int = 0,
        end: Optional[int] = None,
    ) -> None:
        ...


class UniformGenerator(Protocol):
    """
    A generator of uniform 64-bit unsigned integers in [MIN, MAX].
    """

    RESULT_BITS: ClassVar[int]
    MIN: ClassVar[int]
    MAX: ClassVar[int]
    DEFAULT_SEED: ClassVar[int]

    def next(self) -> Word64:
        ...


# ---------- Core dataclasses ----------


@dataclass(frozen=True)
class CoreState:
    """
    The two state words of a CoreGenerator.

    (0, 0) is a valid value of this type but an absorbing state for the
    generator: it only ever outputs 0 from there.
    """

    s0: Word64
    s1: Word64

    def as_tuple(self) -> tuple[Word64, Word64]:
        return (self.s0, self.s1)
