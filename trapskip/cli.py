"""Command-line interface for the trap-skip solver."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Callable, Dict, List

from .models import Puzzle, SolverResult
from .parser import PuzzleFormatError, load_puzzles, parse_puzzles_from_text
from .postprocess import results_to_dict, results_to_text
from .reference import MAX_SUBSETS, brute_force_result, subset_count
from .solver import solve_puzzle
from .solvers.milp_pulp import MilpSolverError, solve_milp
from .validation import SkipSetValidationError, validate_skip_set

SOLVERS: Dict[str, Callable[[Puzzle], SolverResult]] = {
    "greedy": solve_puzzle,
    "milp": solve_milp,
    "brute-force": brute_force_result,
}


def _check_result(puzzle: Puzzle, result: SolverResult) -> None:
    validate_skip_set(puzzle, result.skip_positions)
    if subset_count(puzzle) > MAX_SUBSETS:
        return
    expected = brute_force_result(puzzle).total_damage
    if result.total_damage != expected:
        raise SkipSetValidationError(
            f"solver total {result.total_damage} differs from exhaustive minimum {expected}"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Minimum-damage trap skipping solver")
    parser.add_argument("--input", "-i", help="Path to .in or JSON puzzle file (reads stdin when omitted)")
    parser.add_argument("--solver", choices=sorted(SOLVERS), default="greedy", help="Solver backend")
    parser.add_argument("--output-text", help="Optional file to write one total per line")
    parser.add_argument("--output-json", help="Optional file to write skip positions and totals as JSON")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check each skip set and compare totals with exhaustive search where feasible",
    )
    args = parser.parse_args(argv)

    try:
        if args.input:
            puzzles = load_puzzles(args.input)
        else:
            puzzles = parse_puzzles_from_text(sys.stdin.read())
    except (OSError, PuzzleFormatError) as exc:
        print(f"Failed to parse puzzles: {exc}", file=sys.stderr)
        return 2

    solve = SOLVERS[args.solver]
    results: List[SolverResult] = []
    for ordinal, puzzle in enumerate(puzzles, start=1):
        try:
            result = solve(puzzle)
        except (MilpSolverError, ValueError) as exc:
            print(f"Solver {args.solver} failed on puzzle {ordinal}: {exc}", file=sys.stderr)
            return 3
        if args.validate:
            try:
                _check_result(puzzle, result)
            except SkipSetValidationError as exc:
                print(f"Validation failed on puzzle {ordinal}: {exc}", file=sys.stderr)
                return 3
        results.append(result)

    text = results_to_text(results)
    if args.output_text:
        Path(args.output_text).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)

    if args.output_json:
        payload = results_to_dict(puzzles, results)
        Path(args.output_json).write_text(json.dumps(payload, indent=2), encoding="utf-8")

    print(f"Solved {len(puzzles)} puzzles | solver={args.solver}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
