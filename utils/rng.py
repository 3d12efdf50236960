# utils/rng.py

"""
Random number generator utilities.

CoreGenerator is the project's default source of randomness. This module
provides the helpers you should use to create and split it:

  - `make_rng` creates a (reproducibly seeded) CoreGenerator,
  - `spawn_streams` derives non-overlapping streams for parallel work
    by jumping, so each worker gets its own generator and nothing is
    shared between them,
  - `draw_array` collects draws into a NumPy uint64 array,
  - `NumpySeedSequence` lets a NumPy SeedSequence (entropy pool) seed
    either generator.
"""

from __future__ import annotations

import copy
from typing import List, MutableSequence, Optional

import numpy as np

from core_types import UniformGenerator
from generators.core_generator import CoreGenerator
from generators.words import resolve_range
from utils.logging_utils import get_logger

logger = get_logger(__name__)


class NumpySeedSequence:
    """
    SeedSequence adapter over numpy.random.SeedSequence.

    Each `generate` call asks NumPy for exactly as many uint32 words as the
    requested range holds. NumPy's generate_state does not advance, so
    the same entropy and the same range size always give the same words.
    """

    def __init__(self, entropy=None) -> None:
        if isinstance(entropy, np.random.SeedSequence):
            self.seed_seq = entropy
        else:
            self.seed_seq = np.random.SeedSequence(entropy)

    @property
    def entropy(self):
        return self.seed_seq.entropy

    def generate(
        self,
        buffer: MutableSequence[int],
        start: int = 0,
        end: Optional[int] = None,
    ) -> None:
        start, end = resolve_range(buffer, start, end)
        if start == end:
            return
        words = self.seed_seq.generate_state(end - start, dtype=np.uint32)
        for i, w in enumerate(words, start):
            buffer[i] = int(w)


def make_rng(seed: Optional[int] = None) -> CoreGenerator:
    """
    Create a CoreGenerator.

    Args:
        seed:
            If provided, used to seed the generator deterministically.
            If None, CoreGenerator.DEFAULT_SEED is used (there is no
            OS-entropy path here; use NumpySeedSequence() for that).

    Returns:
        CoreGenerator instance.
    """
    if seed is None:
        return CoreGenerator()
    return CoreGenerator(seed)


def spawn_streams(seed, n: int) -> List[CoreGenerator]:
    """
    Derive n independent generators from one seed.

    Stream 0 is the seeded generator itself; stream i is that generator
    jumped i times. Each stream may take up to 2^64 draws before running
    into the next one.

    Args:
        seed:
            Integer seed or SeedSequence for the base generator.
        n:
            Number of streams (may be 0).

    Returns:
        list of CoreGenerator, fully independent of each other.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    base = CoreGenerator(seed)
    streams: List[CoreGenerator] = []
    for i in range(n):
        if i > 0:
            base.jump()
        streams.append(copy.copy(base))

    logger.debug("Spawned %d stream(s) from seed %r", n, seed)
    return streams


def draw_array(gen: UniformGenerator, n: int) -> np.ndarray:
    """
    Draw the next n values of `gen` into a uint64 array.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return np.fromiter((gen.next() for _ in range(n)), dtype=np.uint64, count=n)
