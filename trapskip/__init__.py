"""High-level entry points for the trap-skip puzzle solver."""

from .evaluator import evaluate
from .models import InvalidPuzzleError, Puzzle, SolverResult
from .parser import PuzzleFormatError, load_puzzles, parse_puzzles_from_text
from .reference import brute_force, brute_force_skip_set
from .solver import select_skip_positions, solve, solve_puzzle
from .validation import SkipSetValidationError, validate_skip_set

__all__ = [
    "Puzzle",
    "SolverResult",
    "InvalidPuzzleError",
    "evaluate",
    "solve",
    "solve_puzzle",
    "select_skip_positions",
    "brute_force",
    "brute_force_skip_set",
    "validate_skip_set",
    "SkipSetValidationError",
    "load_puzzles",
    "parse_puzzles_from_text",
    "PuzzleFormatError",
]
