"""Solver layer: one solver per group of operations."""

from typing import Optional

from .base import BaseSolver, SolverRegistry
from .general import GeneralSolver
from .calculus_solver import CalculusSolver
from .polynomial_solver import QuadraticSolver
from ..algebra import AlgebraBackend, SympyBackend

__all__ = [
    "BaseSolver",
    "SolverRegistry",
    "GeneralSolver",
    "CalculusSolver",
    "QuadraticSolver",
    "get_default_registry",
]


def get_default_registry(backend: Optional[AlgebraBackend] = None) -> SolverRegistry:
    """
    Create a registry covering every operation kind.

    - General: evaluate, simplify, expand, factor
    - Calculus: derivative, limit, integrate, sum, product
    - Quadratic: solve
    """
    backend = backend or SympyBackend()
    registry = SolverRegistry()
    registry.register(GeneralSolver(backend))
    registry.register(CalculusSolver(backend))
    registry.register(QuadraticSolver(backend))
    registry.check_complete()
    return registry
