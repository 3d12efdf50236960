# generators/core_generator.py

"""
CoreGenerator: a 128-bit state, long-period generator (xoroshiro128+).

This is the default source of randomness in the project. Its state is a
pair of 64-bit words (s0, s1). One draw:

    result = s0 + s1                      (mod 2^64)
    s1 ^= s0
    s0 = rotl(s0, 55) ^ s1 ^ (s1 << 14)
    s1 = rotl(s1, 36)

Both new words are computed from the old pair before anything is written
back. The period is 2^128 - 1: every non-zero state appears exactly once
per cycle.

Known degenerate case: (0, 0) is an absorbing state. A generator whose
state is set directly to (0, 0) returns 0 forever. Seeding through
SeedMixer makes this practically unreachable, and no guard is applied
when the state is assigned directly.

Stream splitting:

    jump() advances the state by 2^64 draws in 128 steps. Handing a copy
    of the generator to a consumer and then jumping gives each consumer
    its own non-overlapping block of 2^64 values. See
    utils.rng.spawn_streams.
"""

from __future__ import annotations

from typing import Tuple, Union

from config import JUMP_POLYNOMIAL
from core_types import MASK64, CoreState, SeedSequence, Word64
from generators.seed_mixer import SeedMixer
from generators.words import pack_words, rotl64, to_word64
from utils.logging_utils import get_logger

logger = get_logger(__name__)


class CoreGenerator:
    """
    xoroshiro128+ generator. Not thread-safe; use one instance per thread
    and derive per-thread instances with jump().
    """

    RESULT_BITS = 64
    DEFAULT_SEED: Word64 = 1
    MIN: Word64 = 1
    MAX: Word64 = MASK64

    def __init__(self, seed=DEFAULT_SEED) -> None:
        self._s0: Word64 = 0
        self._s1: Word64 = 0
        self.seed(seed)

    @classmethod
    def from_state(cls, s0: int, s1: int) -> "CoreGenerator":
        """
        Build a generator with its state words set directly.

        No SeedMixer expansion happens here; (0, 0) is accepted.
        """
        gen = cls.__new__(cls)
        gen._s0 = to_word64(s0)
        gen._s1 = to_word64(s1)
        return gen

    @classmethod
    def min(cls) -> Word64:
        return cls.MIN

    @classmethod
    def max(cls) -> Word64:
        return cls.MAX

    # ---------------------------------------------------------------
    # State access (serialization / tests)
    # ---------------------------------------------------------------

    @property
    def state(self) -> CoreState:
        return CoreState(self._s0, self._s1)

    @state.setter
    def state(self, value: Union[CoreState, Tuple[int, int]]) -> None:
        if isinstance(value, CoreState):
            value = value.as_tuple()
        s0, s1 = value
        self._s0 = to_word64(s0)
        self._s1 = to_word64(s1)

    # ---------------------------------------------------------------
    # Seeding
    # ---------------------------------------------------------------

    def seed(self, value=DEFAULT_SEED) -> None:
        """
        Reset the state from a 64-bit seed or a SeedSequence.

        An integer seed is expanded by a transient SeedMixer(value); a
        sequence is used as given. Either way four 32-bit words are
        requested and packed as:

            s0 = w0 | w1 << 32
            s1 = w2 | w3 << 32
        """
        if not isinstance(value, SeedSequence):
            value = SeedMixer(to_word64(value))

        words = [0, 0, 0, 0]
        value.generate(words, 0, 4)
        self._s0 = pack_words(words[0], words[1])
        self._s1 = pack_words(words[2], words[3])
        logger.debug("CoreGenerator seeded: %r", self)

    # ---------------------------------------------------------------
    # Drawing
    # ---------------------------------------------------------------

    def next(self) -> Word64:
        s0 = self._s0
        s1 = self._s1
        result = (s0 + s1) & MASK64

        s1 ^= s0
        self._s0 = rotl64(s0, 55) ^ s1 ^ ((s1 << 14) & MASK64)
        self._s1 = rotl64(s1, 36)

        return result

    __call__ = next

    def __iter__(self) -> "CoreGenerator":
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

    def jump(self) -> None:
        """
        Advance the state as if next() had been called 2^64 times.

        For every bit of the jump polynomial the current state is xored
        into an accumulator when the bit is set, and the generator steps
        once regardless. After 128 steps the accumulator becomes the new
        state.
        """
        s0 = 0
        s1 = 0
        for half in JUMP_POLYNOMIAL:
            for b in range(64):
                if (half >> b) & 1:
                    s0 ^= self._s0
                    s1 ^= self._s1
                self.next()

        self._s0 = s0
        self._s1 = s1
        logger.debug("CoreGenerator jumped: %r", self)

    def __repr__(self) -> str:
        return f"CoreGenerator(s0={self._s0:#018x}, s1={self._s1:#018x})"
