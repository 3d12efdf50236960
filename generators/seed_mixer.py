# generators/seed_mixer.py

"""
SeedMixer: a counter-based 64-bit mixing generator (splitmix64).

The state is a single 64-bit counter. Every draw adds GOLDEN_GAMMA to it
and runs the advanced counter through a two-round finalizer:

    z = state += GOLDEN_GAMMA
    z = (z ^ (z >> 30)) * MIX_MULTIPLIER_1
    z = (z ^ (z >> 27)) * MIX_MULTIPLIER_2
    return z ^ (z >> 31)

Because the increment is odd, the counter visits all 2^64 values before
repeating, so the period is exactly 2^64 and every state (including 0)
is fine.

SeedMixer is also a SeedSequence: `generate` splits each draw into its
low and high 32-bit halves, which is how CoreGenerator expands a single
64-bit seed into 128 bits of state.

Typical usage:

    mixer = SeedMixer(42)
    x = mixer.next()

    words = [0] * 4
    mixer.generate(words)
"""

from __future__ import annotations

from typing import MutableSequence, Optional

from config import GOLDEN_GAMMA, MIX_MULTIPLIER_1, MIX_MULTIPLIER_2
from core_types import MASK32, MASK64, SeedSequence, Word64
from generators.words import pack_words, resolve_range, to_word64
from utils.logging_utils import get_logger

logger = get_logger(__name__)


class SeedMixer:
    """
    splitmix64 generator. Not thread-safe; use one instance per thread.
    """

    RESULT_BITS = 64
    DEFAULT_SEED: Word64 = 0
    MIN: Word64 = 0
    MAX: Word64 = MASK64

    def __init__(self, seed=DEFAULT_SEED) -> None:
        self.state: Word64 = 0
        self.seed(seed)

    @classmethod
    def min(cls) -> Word64:
        return cls.MIN

    @classmethod
    def max(cls) -> Word64:
        return cls.MAX

    # ---------------------------------------------------------------
    # Seeding
    # ---------------------------------------------------------------

    def seed(self, value=DEFAULT_SEED) -> None:
        """
        Reset the state.

        Args:
            value:
                An integer, stored as the state directly (reduced modulo
                2^64, not mixed), or a SeedSequence, from which two 32-bit
                words are requested: low half then high half.
        """
        if isinstance(value, SeedSequence):
            words = [0, 0]
            value.generate(words, 0, 2)
            self.state = pack_words(words[0], words[1])
            logger.debug("SeedMixer seeded from sequence: state=%#018x", self.state)
            return
        self.state = to_word64(value)

    # ---------------------------------------------------------------
    # Drawing
    # ---------------------------------------------------------------

    def next(self) -> Word64:
        z = self.state = (self.state + GOLDEN_GAMMA) & MASK64
        z = ((z ^ (z >> 30)) * MIX_MULTIPLIER_1) & MASK64
        z = ((z ^ (z >> 27)) * MIX_MULTIPLIER_2) & MASK64
        return z ^ (z >> 31)

    __call__ = next

    def __iter__(self) -> "SeedMixer":
        return self

    def __next__(self) -> Word64:
        return self.next()

    def discard(self, n: int) -> None:
        """
        Advance the state as if next() had been called n times.
        """
        if n < 0:
            raise ValueError(f"discard count must be non-negative, got {n}")
        for _ in range(n):
            self.next()

    # ---------------------------------------------------------------
    # SeedSequence
    # ---------------------------------------------------------------

    def generate(
        self,
        buffer: MutableSequence[int],
        start: int = 0,
        end: Optional[int] = None,
    ) -> None:
        """
        Fill buffer[start:end] with 32-bit words from this stream.

        Each draw contributes its low half, then its high half. If only
        one slot is left, the high half of the last draw is dropped.
        """
        start, end = resolve_range(buffer, start, end)
        i = start
        while i < end:
            u = self.next()
            buffer[i] = u & MASK32
            i += 1
            if i == end:
                break
            buffer[i] = u >> 32
            i += 1

    def __repr__(self) -> str:
        return f"SeedMixer(state={self.state:#018x})"
