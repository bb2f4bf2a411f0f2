"""Exhaustive reference solver used to check the greedy solver."""

from __future__ import annotations

from itertools import combinations
from math import comb

from .evaluator import evaluate
from .models import Puzzle, SolverResult

MAX_SUBSETS = 2_000_000


class ReferenceSolverLimitError(ValueError):
    """Raised when a puzzle has too many skip sets to enumerate."""


def subset_count(puzzle: Puzzle) -> int:
    return comb(puzzle.n, puzzle.k)


def brute_force_result(puzzle: Puzzle, *, max_subsets: int = MAX_SUBSETS) -> SolverResult:
    """Evaluate every size-k skip set and keep the first minimum found."""
    total_subsets = subset_count(puzzle)
    if total_subsets > max_subsets:
        raise ReferenceSolverLimitError(
            f"{total_subsets} skip sets for n={puzzle.n}, k={puzzle.k} exceeds limit {max_subsets}"
        )

    best_positions: tuple[int, ...] | None = None
    best_total = 0
    for candidate in combinations(range(puzzle.n), puzzle.k):
        total = evaluate(puzzle, frozenset(candidate))
        if best_positions is None or total < best_total:
            best_positions = candidate
            best_total = total

    assert best_positions is not None
    return SolverResult(skip_positions=frozenset(best_positions), total_damage=best_total)


def brute_force_skip_set(puzzle: Puzzle, *, max_subsets: int = MAX_SUBSETS) -> frozenset[int]:
    return brute_force_result(puzzle, max_subsets=max_subsets).skip_positions


def brute_force(puzzle: Puzzle, *, max_subsets: int = MAX_SUBSETS) -> int:
    return brute_force_result(puzzle, max_subsets=max_subsets).total_damage
