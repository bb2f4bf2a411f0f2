"""Legality checks for skip sets."""

from __future__ import annotations

from typing import Iterable, Set

from .models import Puzzle


class SkipSetValidationError(ValueError):
    """Raised when a skip set is not a legal answer for its puzzle."""


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise SkipSetValidationError(message)


def validate_skip_set(puzzle: Puzzle, skip_positions: Iterable[int]) -> None:
    """Validate a skip set and raise `SkipSetValidationError` on failure."""
    seen: Set[int] = set()
    for position in skip_positions:
        _require(
            isinstance(position, int) and not isinstance(position, bool),
            f"skip position {position!r} is not an integer",
        )
        _require(0 <= position < puzzle.n, f"skip position {position} outside [0, {puzzle.n})")
        _require(position not in seen, f"skip position {position} listed twice")
        seen.add(position)

    _require(len(seen) == puzzle.k, f"skip set has {len(seen)} positions, puzzle allows exactly {puzzle.k}")
