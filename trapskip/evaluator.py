"""Total damage of a puzzle under a fixed set of skipped positions."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from .models import Puzzle


def evaluate(puzzle: Puzzle, skip_positions: Iterable[int]) -> int:
    """Walk the traps in order, accumulating the bonus from earlier skips.

    The size of `skip_positions` is not checked; see
    `validation.validate_skip_set` for that.
    """
    skipped: AbstractSet[int]
    if isinstance(skip_positions, (set, frozenset)):
        skipped = skip_positions
    else:
        skipped = set(skip_positions)

    bonus = 0
    total = 0
    for position, damage in enumerate(puzzle.damages):
        if position in skipped:
            bonus += 1
        else:
            total += damage + bonus
    return total
