"""Result formatting: one total per line, or a JSON payload."""

from __future__ import annotations

from typing import List, Sequence

from .models import Puzzle, SolverResult


def results_to_text(results: Sequence[SolverResult]) -> str:
    return "\n".join(str(result.total_damage) for result in results)


def text_to_totals(text: str) -> List[int]:
    totals: List[int] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            totals.append(int(line))
        except ValueError as exc:
            raise ValueError(f"invalid total line: {line!r}") from exc
    return totals


def results_to_dict(puzzles: Sequence[Puzzle], results: Sequence[SolverResult]) -> dict:
    return {
        "results": [
            {
                "n": puzzle.n,
                "k": puzzle.k,
                "skip_positions": list(result.sorted_positions()),
                "total_damage": result.total_damage,
            }
            for puzzle, result in zip(puzzles, results)
        ]
    }
