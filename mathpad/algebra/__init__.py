"""Algebra layer: backend interface and the SymPy backend."""

from .base import AlgebraBackend
from .sympy_backend import SympyBackend

__all__ = ["AlgebraBackend", "SympyBackend"]
