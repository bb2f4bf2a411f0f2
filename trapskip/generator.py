"""Random puzzle generator in the `.in` text format."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .models import Puzzle


@dataclass(slots=True)
class GeneratorConfig:
    min_traps: int = 1
    max_traps: int = 10
    max_damage: int = 20
    # None draws k uniformly from [0, n].
    k: Optional[int] = None


def generate_puzzle(n: int, k: int, rng: random.Random, max_damage: int = 20) -> Puzzle:
    damages = [rng.randint(0, max_damage) for _ in range(n)]
    return Puzzle.from_iterable(damages, k)


def generate_puzzles(count: int, config: GeneratorConfig, rng: random.Random) -> List[Puzzle]:
    if config.min_traps < 1 or config.max_traps < config.min_traps:
        raise ValueError(f"invalid trap range [{config.min_traps}, {config.max_traps}]")
    puzzles: List[Puzzle] = []
    for _ in range(count):
        n = rng.randint(config.min_traps, config.max_traps)
        k = rng.randint(0, n) if config.k is None else min(config.k, n)
        puzzles.append(generate_puzzle(n, k, rng, config.max_damage))
    return puzzles


def puzzles_to_text(puzzles: List[Puzzle]) -> str:
    lines = [str(len(puzzles))]
    for puzzle in puzzles:
        lines.append(f"{puzzle.n} {puzzle.k}")
        lines.append(" ".join(str(damage) for damage in puzzle.damages))
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Generate random trap-skip puzzle files")
    ap.add_argument("-c", "--count", type=int, default=1, help="Number of puzzles")
    ap.add_argument("--min-traps", type=int, default=1, help="Minimum trap count n")
    ap.add_argument("--max-traps", type=int, default=10, help="Maximum trap count n")
    ap.add_argument("--max-damage", type=int, default=20, help="Largest damage value")
    ap.add_argument("-k", type=int, help="Fixed skip budget (clamped to n); random when omitted")
    ap.add_argument("-o", "--output", help="Output file (default stdout)")
    ap.add_argument("--seed", type=int, help="Random seed")
    args = ap.parse_args(argv)

    config = GeneratorConfig(
        min_traps=args.min_traps,
        max_traps=args.max_traps,
        max_damage=args.max_damage,
        k=args.k,
    )
    try:
        puzzles = generate_puzzles(args.count, config, random.Random(args.seed))
    except ValueError as exc:
        print(f"Failed to generate puzzles: {exc}", file=sys.stderr)
        return 2

    text = puzzles_to_text(puzzles)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"Created {args.output} ({len(puzzles)} puzzles)", file=sys.stderr)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
