# config.py

"""
Global configuration for the xoroshiro-streams project.

This module centralizes:
  - filesystem paths (only the log directory is used),
  - the algorithm constants shared by both generators,
  - defaults for the demo entry point in main.py.

The generator modules import their constants from here so the magic
numbers live in exactly one place.
"""

from __future__ import annotations

from pathlib import Path


# -------------------------------------------------------------------
# Core paths
# -------------------------------------------------------------------

# Root of the project (directory containing main.py, config.py, etc.)
PROJECT_ROOT: Path = Path(__file__).resolve().parent

# Directory for logs (only used if configure_root_logger writes to disk)
LOGS_DIR: Path = PROJECT_ROOT / "logs"


# -------------------------------------------------------------------
# Algorithm constants
# -------------------------------------------------------------------

# Odd increment of the SeedMixer counter (2^64 / golden ratio).
GOLDEN_GAMMA: int = 0x9E3779B97F4A7C15

# Multipliers of the two SeedMixer finalizer rounds.
MIX_MULTIPLIER_1: int = 0xBF58476D1CE4E5B9
MIX_MULTIPLIER_2: int = 0x94D049BB133111EB

# Jump polynomial for CoreGenerator, equivalent to 2^64 calls to next().
# Low half first; bits are consumed from bit 0 of each half upwards.
JUMP_POLYNOMIAL: tuple[int, int] = (0xBEAC0467EBA5FACB, 0xD86B048B86AA9922)


# -------------------------------------------------------------------
# Demo defaults (main.py)
# -------------------------------------------------------------------

# Seed used by main.py when --seed is not given
RANDOM_SEED: int = 1

# How many values main.py prints per stream
N_DRAWS: int = 10

# How many jumped streams main.py prints
N_STREAMS: int = 1
