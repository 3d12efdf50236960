# main.py

"""
Demo entry point for the xoroshiro-streams project.

Typical usage:

    # First 10 draws of CoreGenerator seeded with 1
    python main.py

    # Four jumped streams, 5 draws each
    python main.py --streams 4 --count 5 --seed 12345

    # The SeedMixer on its own
    python main.py --generator mixer --seed 0

Values are printed one per line as 16-digit hex.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from config import N_DRAWS, N_STREAMS, RANDOM_SEED
from generators.seed_mixer import SeedMixer
from utils.logging_utils import configure_root_logger, get_logger
from utils.rng import spawn_streams

logger = get_logger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print draws from xoroshiro128+ / splitmix64")

    parser.add_argument(
        "--generator",
        choices=["core", "mixer"],
        default="core",
        help="core = xoroshiro128+ (default), mixer = splitmix64",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help=f"64-bit seed (default from config.py: {RANDOM_SEED})",
    )

    parser.add_argument(
        "--count",
        type=int,
        default=N_DRAWS,
        help=f"Number of values to print per stream (default: {N_DRAWS})",
    )

    parser.add_argument(
        "--streams",
        type=int,
        default=N_STREAMS,
        help=f"Number of jumped streams, core generator only (default: {N_STREAMS})",
    )

    parser.add_argument(
        "--discard",
        type=int,
        default=0,
        help="Skip this many draws before printing.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG logging (seeding and jumps).",
    )

    args = parser.parse_args(argv)
    for name in ("count", "streams", "discard"):
        if getattr(args, name) < 0:
            parser.error(f"--{name} must be non-negative")
    if args.generator == "mixer" and args.streams != 1:
        parser.error("--streams is only supported for --generator core")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_root_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.generator == "mixer":
        generators = [SeedMixer(args.seed)]
    else:
        generators = spawn_streams(args.seed, args.streams)

    logger.info(
        "generator=%s seed=%d streams=%d count=%d",
        args.generator, args.seed, len(generators), args.count,
    )

    for idx, gen in enumerate(generators):
        gen.discard(args.discard)
        if len(generators) > 1:
            print(f"# stream {idx}")
        for _ in range(args.count):
            print(f"{gen.next():016x}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
