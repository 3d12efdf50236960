# generators/words.py

"""
Fixed-width word helpers shared by the generators.

Python ints never overflow, so every generator step masks back down to
64 bits explicitly. Seed words are composed with shifts and ORs into a
temporary int before being assigned to generator state.
"""

from __future__ import annotations

import numbers
from typing import MutableSequence, Optional, Tuple

from core_types import MASK32, MASK64, Word32, Word64


def to_word64(value: object) -> Word64:
    """
    Reduce an integer seed to its unsigned 64-bit value.

    Negative ints wrap to their two's-complement value; NumPy integer
    scalars are accepted since they register as numbers.Integral.
    """
    if not isinstance(value, numbers.Integral):
        raise TypeError(
            f"seed must be an integer or a SeedSequence, got {type(value).__name__}"
        )
    return int(value) & MASK64


def rotl64(x: Word64, k: int) -> Word64:
    return ((x << k) & MASK64) | (x >> (64 - k))


def pack_words(lo: Word32, hi: Word32) -> Word64:
    """Compose two 32-bit words into one 64-bit word, low word first."""
    return (int(lo) & MASK32) | ((int(hi) & MASK32) << 32)


def resolve_range(
    buffer: MutableSequence[int],
    start: int = 0,
    end: Optional[int] = None,
) -> Tuple[int, int]:
    """
    Validate a [start, end) range against a buffer.

    Returns:
        (start, end) with `end=None` replaced by len(buffer).
    """
    size = len(buffer)
    if end is None:
        end = size
    if not 0 <= start <= end <= size:
        raise ValueError(
            f"invalid range [{start}, {end}) for a buffer of length {size}"
        )
    return start, end
