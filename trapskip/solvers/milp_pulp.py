from __future__ import annotations

from typing import Optional

import pulp

from ..evaluator import evaluate
from ..models import Puzzle, SolverResult


class MilpSolverError(RuntimeError):
    """Raised when the MILP backend does not reach an optimal solution."""


def build_model(puzzle: Puzzle):
    """Model the damage sum directly, without the greedy score.

    skip_i is binary, bonus_i = sum(skip_j for j < i). The contribution of
    trap i is (1 - skip_i) * (damage_i + bonus_i); the product
    skip_i * bonus_i is carried by carry_i, bounded above by bonus_i and by
    i * skip_i. Minimisation pushes carry_i onto that bound.
    """
    positions = list(range(puzzle.n))
    model = pulp.LpProblem("trap_skip", pulp.LpMinimize)

    skip_vars = pulp.LpVariable.dicts("skip", positions, cat="Binary")
    carry_vars = pulp.LpVariable.dicts("carry", positions, lowBound=0.0)

    # Exactly k skips.
    model += pulp.lpSum(skip_vars[i] for i in positions) == puzzle.k, "skip_budget"

    objective_terms = []
    for i in positions:
        bonus = pulp.lpSum(skip_vars[j] for j in range(i))
        model += carry_vars[i] <= bonus, f"carry_bonus_{i}"
        model += carry_vars[i] <= i * skip_vars[i], f"carry_skip_{i}"
        damage = puzzle.damages[i]
        objective_terms.append(damage - damage * skip_vars[i] + bonus - carry_vars[i])

    model += pulp.lpSum(objective_terms)
    return model, skip_vars


def solve_milp(puzzle: Puzzle, solver: Optional[pulp.LpSolver] = None) -> SolverResult:
    """Exact solve with PuLP (CBC by default).

    The reported total is recomputed with the evaluator from the chosen skip
    set, so it is an exact integer regardless of solver tolerances.
    """
    model, skip_vars = build_model(puzzle)
    if solver is None:
        solver = pulp.PULP_CBC_CMD(msg=False)
    model.solve(solver)

    status = pulp.LpStatus[model.status]
    if status != "Optimal":
        raise MilpSolverError(f"MILP solve finished with status {status}")

    skip_positions = frozenset(i for i, var in skip_vars.items() if (var.value() or 0.0) > 0.5)
    if len(skip_positions) != puzzle.k:
        raise MilpSolverError(f"MILP returned {len(skip_positions)} skips, expected {puzzle.k}")
    return SolverResult(skip_positions=skip_positions, total_damage=evaluate(puzzle, skip_positions))
