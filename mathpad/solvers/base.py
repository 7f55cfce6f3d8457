"""
Base solver interface and the solver registry.

Every operation kind is handled by exactly one registered solver. Solvers
return the final display string; failures are raised as MathPadError (or
whatever the algebra library raises) and turned into "Error: ..." by the
engine.
"""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, List, Optional
import math

from ..algebra.base import AlgebraBackend, Tree
from ..models import OperationKind, OperationRequest
from ..output.formatting import format_number
from ..utils.errors import EvaluationError
from ..utils.trace import TraceHook


class BaseSolver(ABC):
    """
    Abstract base class for operation solvers.

    Subclasses declare the operation kinds they handle and implement solve().
    """

    # Human-readable name for this solver
    name: str = "BaseSolver"

    # Description of what this solver handles
    description: str = "Base solver class"

    # Operation kinds this solver is responsible for
    kinds: FrozenSet[OperationKind] = frozenset()

    def __init__(self, backend: AlgebraBackend):
        self.backend = backend

    @abstractmethod
    def solve(
        self, request: OperationRequest, trace: Optional[TraceHook] = None
    ) -> str:
        """
        Carry out the request.

        Args:
            request: Classified OperationRequest
            trace: Optional hook for intermediate values

        Returns:
            Result string (LaTeX, formatted number or descriptive phrase)
        """
        pass

    def _render(self, value) -> str:
        """Format a number, or render a tree as LaTeX."""
        if self.backend.is_number(value):
            if math.isnan(value):
                raise EvaluationError("Result is undefined (division by zero?)")
            if math.isinf(value):
                return "\\infty" if value > 0 else "-\\infty"
            return format_number(value)
        return self.backend.to_display(value)

    def _parse_bound(self, text: str) -> Tree:
        """Parse an integration/summation bound; it must be a number."""
        parsed = self.backend.parse(text)
        value = self.backend.evaluate(parsed)
        if not self.backend.is_number(value):
            raise EvaluationError(f"Expected a number, got '{text}'")
        return parsed


class SolverRegistry:
    """
    Registry of available solvers, keyed by operation kind.

    A kind can only be claimed once; check_complete() reports kinds nobody
    handles.
    """

    def __init__(self):
        self._solvers: Dict[OperationKind, BaseSolver] = {}

    def register(self, solver: BaseSolver):
        """Register a solver for every kind it declares."""
        for kind in solver.kinds:
            if kind in self._solvers:
                raise ValueError(
                    f"{kind.name} already handled by {self._solvers[kind].name}"
                )
            self._solvers[kind] = solver

    def get_solver(self, request: OperationRequest) -> Optional[BaseSolver]:
        return self._solvers.get(request.kind)

    def missing_kinds(self) -> List[OperationKind]:
        return [kind for kind in OperationKind if kind not in self._solvers]

    def check_complete(self):
        """Raise ValueError unless every OperationKind has a solver."""
        missing = self.missing_kinds()
        if missing:
            names = ", ".join(kind.name for kind in missing)
            raise ValueError(f"No solver registered for: {names}")

    @property
    def solvers(self) -> List[BaseSolver]:
        """Registered solvers, each listed once."""
        unique: List[BaseSolver] = []
        for solver in self._solvers.values():
            if solver not in unique:
                unique.append(solver)
        return unique
