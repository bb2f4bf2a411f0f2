"""Input parsing for trap-skip puzzle files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Sequence

from .models import InvalidPuzzleError, Puzzle


class PuzzleFormatError(ValueError):
    """Raised when an input file cannot be parsed."""


def _tokens_from_text(raw_text: str) -> List[str]:
    tokens = raw_text.split()
    if not tokens:
        raise PuzzleFormatError("input is empty; expected puzzle count")
    return tokens


def _take(tokens: Sequence[str], index: int) -> str:
    try:
        return tokens[index]
    except IndexError as exc:
        raise PuzzleFormatError("unexpected end of input while parsing puzzles") from exc


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise PuzzleFormatError(f"expected integer {what}, got {token!r}") from exc


def _build_puzzle(damages: Sequence[int], k: int, ordinal: int) -> Puzzle:
    try:
        return Puzzle.from_iterable(damages, k)
    except InvalidPuzzleError as exc:
        raise PuzzleFormatError(f"puzzle {ordinal}: {exc}") from exc


def _parse_from_tokens(tokens: Sequence[str]) -> List[Puzzle]:
    pointer = 0

    def next_int(what: str) -> int:
        nonlocal pointer
        token = _take(tokens, pointer)
        pointer += 1
        return _to_int(token, what)

    puzzle_count = next_int("puzzle count")
    if puzzle_count < 0:
        raise PuzzleFormatError(f"puzzle count must be non-negative, got {puzzle_count}")

    puzzles: List[Puzzle] = []
    for ordinal in range(1, puzzle_count + 1):
        trap_count = next_int("trap count")
        k = next_int("skip budget")
        if trap_count < 0:
            raise PuzzleFormatError(f"puzzle {ordinal}: trap count must be non-negative, got {trap_count}")
        damages = [next_int("damage") for _ in range(trap_count)]
        puzzles.append(_build_puzzle(damages, k, ordinal))

    if pointer != len(tokens):
        raise PuzzleFormatError(f"{len(tokens) - pointer} unexpected trailing tokens after {puzzle_count} puzzles")
    return puzzles


def _parse_from_json(payload: Any) -> List[Puzzle]:
    if isinstance(payload, dict):
        try:
            payload = payload["puzzles"]
        except KeyError as exc:
            raise PuzzleFormatError(f"missing required field: {exc}") from exc
    if not isinstance(payload, list):
        raise PuzzleFormatError("expected a list of puzzles")

    puzzles: List[Puzzle] = []
    for ordinal, item in enumerate(payload, start=1):
        try:
            damages = item["damages"]
            k = item["k"]
        except (KeyError, TypeError) as exc:
            raise PuzzleFormatError(f"puzzle {ordinal}: missing required field: {exc}") from exc
        if not isinstance(damages, list):
            raise PuzzleFormatError(f"puzzle {ordinal}: damages must be a list")
        puzzles.append(_build_puzzle(damages, k, ordinal))
    return puzzles


def parse_puzzles_from_text(raw_text: str) -> List[Puzzle]:
    """Parse either whitespace-delimited `.in` or JSON definitions."""
    stripped = raw_text.lstrip()
    if not stripped:
        raise PuzzleFormatError("input is empty; expected puzzle count")
    if stripped[0] in "{[":
        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise PuzzleFormatError(f"invalid JSON: {exc}") from exc
        return _parse_from_json(payload)
    return _parse_from_tokens(_tokens_from_text(raw_text))


def parse_puzzle_from_text(raw_text: str) -> Puzzle:
    """Parse a single `n k` header followed by `n` damages."""
    tokens = _tokens_from_text(raw_text)
    return _parse_from_tokens(["1", *tokens])[0]


def load_puzzles(path: str | Path) -> List[Puzzle]:
    """Load puzzles from `path` or raise `PuzzleFormatError`."""
    raw_text = Path(path).read_text(encoding="utf-8")
    return parse_puzzles_from_text(raw_text)
