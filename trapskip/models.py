"""Core data structures shared by the solver modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple


class InvalidPuzzleError(ValueError):
    """Raised when a puzzle violates its construction invariants."""


@dataclass(frozen=True, slots=True)
class Puzzle:
    damages: Tuple[int, ...]
    k: int

    def __post_init__(self) -> None:
        damages = tuple(self.damages)
        if not damages:
            raise InvalidPuzzleError("puzzle needs at least one trap")
        for index, damage in enumerate(damages):
            if isinstance(damage, bool) or not isinstance(damage, int):
                raise InvalidPuzzleError(f"damage at position {index} is not an integer: {damage!r}")
            if damage < 0:
                raise InvalidPuzzleError(f"damage at position {index} is negative: {damage}")
        if isinstance(self.k, bool) or not isinstance(self.k, int):
            raise InvalidPuzzleError(f"skip budget is not an integer: {self.k!r}")
        if not 0 <= self.k <= len(damages):
            raise InvalidPuzzleError(f"skip budget {self.k} outside [0, {len(damages)}]")
        object.__setattr__(self, "damages", damages)

    @classmethod
    def from_iterable(cls, damages: Iterable[int], k: int) -> "Puzzle":
        return cls(damages=tuple(damages), k=k)

    @property
    def n(self) -> int:
        return len(self.damages)

    def later_count(self, position: int) -> int:
        """Number of positions strictly after `position`."""
        return self.n - position - 1


@dataclass(frozen=True, slots=True)
class SolverResult:
    skip_positions: FrozenSet[int]
    total_damage: int

    def sorted_positions(self) -> Tuple[int, ...]:
        return tuple(sorted(self.skip_positions))
