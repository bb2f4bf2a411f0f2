from __future__ import annotations

import random
import time

import pytest

from trapskip.evaluator import evaluate
from trapskip.generator import GeneratorConfig, generate_puzzle, generate_puzzles, puzzles_to_text
from trapskip.models import InvalidPuzzleError, Puzzle
from trapskip.parser import parse_puzzles_from_text
from trapskip.reference import (
    ReferenceSolverLimitError,
    brute_force,
    brute_force_result,
    brute_force_skip_set,
)
from trapskip.solver import (
    closed_form_damage,
    position_score,
    select_skip_positions,
    solve,
    solve_puzzle,
)
from trapskip.validation import SkipSetValidationError, validate_skip_set

FIXTURE = Puzzle(damages=(8, 2, 5, 15, 11, 2, 8), k=5)


def test_evaluate_without_skips_is_plain_sum():
    puzzle = Puzzle(damages=(1, 2, 3), k=0)
    assert evaluate(puzzle, set()) == 6


def test_evaluate_bonus_applies_to_later_traps():
    puzzle = Puzzle(damages=(1, 2, 3), k=1)
    assert evaluate(puzzle, {0}) == (2 + 1) + (3 + 1)
    assert evaluate(puzzle, {2}) == 1 + 2


def test_evaluate_accepts_any_iterable():
    assert evaluate(FIXTURE, [3, 4]) == evaluate(FIXTURE, frozenset({3, 4}))


def test_puzzle_converts_damages_to_tuple_and_compares_by_value():
    puzzle = Puzzle.from_iterable([1, 2, 3], 2)
    assert puzzle.damages == (1, 2, 3)
    assert puzzle == Puzzle(damages=(1, 2, 3), k=2)
    assert puzzle.n == 3


@pytest.mark.parametrize(
    "damages, k",
    [
        ((), 0),
        ((1, 2), 3),
        ((1, 2), -1),
        ((1, -2), 1),
        ((1, 2.5), 1),
        ((True, 2), 1),
    ],
)
def test_invalid_puzzles_are_unconstructable(damages, k):
    with pytest.raises(InvalidPuzzleError):
        Puzzle(damages=damages, k=k)


def test_position_score_subtracts_later_count():
    assert [position_score(FIXTURE, i) for i in range(FIXTURE.n)] == [2, -3, 1, 12, 9, 1, 8]


def test_known_fixture_minimum_is_nine():
    assert solve(FIXTURE) == 9
    assert brute_force(FIXTURE) == 9


def test_second_fixture_greedy_matches_oracle():
    puzzle = Puzzle(damages=(3, 4, 4, 1), k=3)
    assert solve(puzzle) == brute_force(puzzle) == 3


def test_ties_prefer_lower_position():
    # Scores for positions 2 and 5 are both 1.
    assert select_skip_positions(FIXTURE) == frozenset({0, 2, 3, 4, 6})
    puzzle = Puzzle(damages=(2, 1, 0), k=1)
    assert select_skip_positions(puzzle) == frozenset({0})


def test_k_zero_returns_sum():
    rng = random.Random(7)
    for _ in range(20):
        puzzle = generate_puzzle(rng.randint(1, 30), 0, rng, max_damage=100)
        result = solve_puzzle(puzzle)
        assert result.skip_positions == frozenset()
        assert result.total_damage == sum(puzzle.damages)


def test_k_equal_n_returns_zero():
    rng = random.Random(11)
    for _ in range(20):
        n = rng.randint(1, 30)
        puzzle = generate_puzzle(n, n, rng, max_damage=100)
        assert solve(puzzle) == 0
        assert select_skip_positions(puzzle) == frozenset(range(n))


def test_greedy_matches_brute_force_on_all_small_shapes():
    rng = random.Random(20240601)
    for n in range(2, 10):
        for k in range(1, n):
            for _ in range(1000):
                puzzle = generate_puzzle(n, k, rng, max_damage=12)
                assert solve(puzzle) == brute_force(puzzle), puzzle


def test_greedy_skip_set_is_legal_and_matches_closed_form():
    rng = random.Random(3)
    config = GeneratorConfig(min_traps=1, max_traps=40, max_damage=50)
    for puzzle in generate_puzzles(200, config, rng):
        result = solve_puzzle(puzzle)
        validate_skip_set(puzzle, result.skip_positions)
        assert closed_form_damage(puzzle, result.skip_positions) == result.total_damage


def test_brute_force_skip_set_reaches_minimum():
    skip_set = brute_force_skip_set(FIXTURE)
    assert len(skip_set) == FIXTURE.k
    assert evaluate(FIXTURE, skip_set) == 9


def test_brute_force_refuses_huge_enumeration():
    puzzle = Puzzle(damages=tuple(range(40)), k=20)
    with pytest.raises(ReferenceSolverLimitError):
        brute_force_result(puzzle)


def test_solver_is_deterministic():
    puzzle = Puzzle(damages=(5,) * 50, k=17)
    first = solve_puzzle(puzzle)
    for _ in range(5):
        again = solve_puzzle(puzzle)
        assert again == first


@pytest.mark.parametrize("k_fraction", [0.0, 0.5, 1.0])
def test_greedy_handles_large_puzzles_within_a_second(k_fraction):
    rng = random.Random(99)
    n = 200_000
    puzzle = generate_puzzle(n, int(n * k_fraction), rng, max_damage=1_000_000_000)
    start = time.perf_counter()
    total = solve(puzzle)
    elapsed = time.perf_counter() - start
    assert total >= 0
    assert elapsed < 1.0


def test_validation_rejects_wrong_size_and_duplicates():
    with pytest.raises(SkipSetValidationError):
        validate_skip_set(FIXTURE, [0, 1, 2])
    with pytest.raises(SkipSetValidationError):
        validate_skip_set(FIXTURE, [0, 0, 1, 2, 3])
    with pytest.raises(SkipSetValidationError):
        validate_skip_set(FIXTURE, [0, 1, 2, 3, 7])


def test_generated_text_parses_back():
    rng = random.Random(5)
    puzzles = generate_puzzles(10, GeneratorConfig(max_traps=15), rng)
    assert parse_puzzles_from_text(puzzles_to_text(puzzles)) == puzzles
