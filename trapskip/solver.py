"""Greedy skip selection driven by a per-position score and a heap."""

from __future__ import annotations

import heapq
from typing import FrozenSet, Iterable, List, Tuple

from .evaluator import evaluate
from .models import Puzzle, SolverResult

# (-score, position): heapq is a min-heap, so the largest score pops first and
# the lower position wins ties.
ScoredPosition = Tuple[int, int]


def position_score(puzzle: Puzzle, position: int) -> int:
    """Damage saved by skipping `position` minus the bonus it adds to later traps."""
    return puzzle.damages[position] - puzzle.later_count(position)


def _scored_positions(puzzle: Puzzle) -> List[ScoredPosition]:
    # Inlined position_score, negated.
    last = puzzle.n - 1
    return [(last - position - damage, position) for position, damage in enumerate(puzzle.damages)]


def select_skip_positions(puzzle: Puzzle) -> FrozenSet[int]:
    heap = _scored_positions(puzzle)
    heapq.heapify(heap)
    selected = [heapq.heappop(heap)[1] for _ in range(puzzle.k)]
    return frozenset(selected)


def closed_form_damage(puzzle: Puzzle, skip_positions: Iterable[int]) -> int:
    """Total damage rewritten in terms of position scores.

    Every pair of skipped positions cancels one unit of bonus, so the total is
    the plain sum minus the skipped scores minus k*(k-1)/2. Only valid when
    `skip_positions` holds exactly `puzzle.k` distinct positions.
    """
    skipped = set(skip_positions)
    count = len(skipped)
    saved = sum(position_score(puzzle, position) for position in skipped)
    return sum(puzzle.damages) - saved - count * (count - 1) // 2


def solve_puzzle(puzzle: Puzzle) -> SolverResult:
    skip_positions = select_skip_positions(puzzle)
    return SolverResult(skip_positions=skip_positions, total_damage=evaluate(puzzle, skip_positions))


def solve(puzzle: Puzzle) -> int:
    return solve_puzzle(puzzle).total_damage
