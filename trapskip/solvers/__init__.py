"""Exact solver backends."""

from .milp_pulp import MilpSolverError, solve_milp

__all__ = ["MilpSolverError", "solve_milp"]
