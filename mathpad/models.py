"""
Core data structures for MathPad.

These dataclasses define the contract between layers. Everything here is
created per request and discarded once the result string is produced.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple
from enum import Enum, auto

from .output.formatting import format_number


class OperationKind(Enum):
    """Operations a user can request from the notepad."""

    EVALUATE = auto()  # Fallback when no keyword matches
    DERIVATIVE = auto()
    SIMPLIFY = auto()
    EXPAND = auto()
    FACTOR = auto()
    SOLVE = auto()
    LIMIT = auto()
    INTEGRATE = auto()
    SUM = auto()
    PRODUCT = auto()


@dataclass(frozen=True)
class OperationRequest:
    """
    A classified request: which operation, on which operand.

    Only the fields relevant to ``kind`` are set:

    - DERIVATIVE, SOLVE, INTEGRATE, SUM, PRODUCT: ``variable``
    - LIMIT: ``variable`` and ``target`` (raw target text, e.g. "inf")
    - INTEGRATE (definite), SUM, PRODUCT: ``bounds``
    """

    kind: OperationKind
    expression: str  # Canonical operand
    variable: Optional[str] = None
    target: Optional[str] = None
    bounds: Optional[Tuple[str, str]] = None

    @classmethod
    def evaluate(cls, expression: str) -> "OperationRequest":
        return cls(kind=OperationKind.EVALUATE, expression=expression)


@dataclass
class SolveResult:
    """
    Real roots of ``expr = 0``, or a phrase describing why there are none.

    At most two roots; ``message`` is set instead for the degenerate cases
    ("No real solutions", "All real numbers", "No solution", ...).
    """

    roots: List[float] = field(default_factory=list)
    message: Optional[str] = None

    def format(self) -> str:
        """Render roots comma-separated, each formatted on its own."""
        if self.message is not None:
            return self.message
        return ", ".join(format_number(root) for root in self.roots)


@dataclass(frozen=True)
class AnswerPair:
    """A submitted answer and the stored answer it is checked against."""

    user_answer: str
    correct_answer: str
