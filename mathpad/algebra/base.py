"""
Expression-algebra backend interface.

The engine only orchestrates calls through this interface and reads
numbers back out of evaluated results; parsing, evaluation, differentiation
and simplification all live behind it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Union

# A backend-specific expression tree
Tree = Any

Number = float


class AlgebraBackend(ABC):
    """
    Abstract base class for expression-algebra backends.

    evaluate() returns a Python float whenever the result is a real number
    (``nan`` when it is undefined, ``inf``/``-inf`` when it diverges), and
    the backend's own tree otherwise (symbolic or complex results).
    """

    name: str = "AlgebraBackend"

    @abstractmethod
    def parse(self, text: str) -> Tree:
        """Parse canonical notation. Raises ParseError."""

    @abstractmethod
    def evaluate(
        self, tree: Tree, scope: Optional[Dict[str, float]] = None
    ) -> Union[Number, Tree]:
        """Substitute ``scope`` and evaluate. Raises EvaluationError."""

    @abstractmethod
    def derivative(self, tree: Tree, variable: str) -> Tree:
        pass

    @abstractmethod
    def simplify(self, tree: Tree) -> Tree:
        pass

    @abstractmethod
    def rationalize(self, tree: Tree) -> Tree:
        """Rewrite as a single fraction of expanded polynomials."""

    @abstractmethod
    def expand(self, tree: Tree) -> Tree:
        pass

    @abstractmethod
    def factor(self, tree: Tree) -> Tree:
        pass

    @abstractmethod
    def integrate(
        self, tree: Tree, variable: str, bounds: Optional[Tuple[Tree, Tree]] = None
    ) -> Union[Number, Tree]:
        """Antiderivative, or the definite integral over ``bounds``."""

    @abstractmethod
    def summation(self, tree: Tree, variable: str, lower: Tree, upper: Tree):
        pass

    @abstractmethod
    def product(self, tree: Tree, variable: str, lower: Tree, upper: Tree):
        pass

    @abstractmethod
    def to_display(self, tree: Tree) -> str:
        """LaTeX rendering of a tree."""

    @staticmethod
    def is_number(value: Any) -> bool:
        """True when evaluate() produced a plain real number."""
        return isinstance(value, float)
