"""
General-purpose algebra solver.

Handles plain evaluation and the rewrite operations (simplify, expand,
factor). Plain evaluation is the fallback for anything without a
recognized leading keyword.
"""

import math
import re
from typing import Dict, Optional

from .base import BaseSolver
from ..models import OperationKind, OperationRequest
from ..output.formatting import format_scientific
from ..utils.constants import constant_values
from ..utils.trace import TraceHook, emit

_NAME = re.compile(r"[A-Za-z_]\w*")


class GeneralSolver(BaseSolver):
    """
    Evaluate, simplify, expand and factor.

    Plain evaluation substitutes the physical constants (``c``, ``hbar``,
    ``G``, ...) and prints a formatted number when the result is real,
    LaTeX otherwise. Results that use a constant keep their significant
    figures, so ``hbar`` prints as ``1.054572 \\times 10^{-34}``.
    """

    name = "GeneralSolver"
    description = "Evaluation and algebraic rewriting"

    kinds = frozenset(
        {
            OperationKind.EVALUATE,
            OperationKind.SIMPLIFY,
            OperationKind.EXPAND,
            OperationKind.FACTOR,
        }
    )

    def __init__(self, backend, constants: Optional[Dict[str, float]] = None):
        super().__init__(backend)
        self.constants = constant_values() if constants is None else constants

    def solve(
        self, request: OperationRequest, trace: Optional[TraceHook] = None
    ) -> str:
        tree = self.backend.parse(request.expression)

        if request.kind == OperationKind.SIMPLIFY:
            return self.backend.to_display(self.backend.simplify(tree))

        if request.kind == OperationKind.EXPAND:
            return self.backend.to_display(self.backend.expand(tree))

        if request.kind == OperationKind.FACTOR:
            return self.backend.to_display(self.backend.factor(tree))

        value = self.backend.evaluate(tree, self.constants)
        emit(trace, "evaluated", value=value)
        if self._uses_constants(request.expression) and self._finite(value):
            return format_scientific(value)
        return self._render(value)

    def _uses_constants(self, expression: str) -> bool:
        names = set(_NAME.findall(expression))
        return not names.isdisjoint(self.constants)

    def _finite(self, value) -> bool:
        return self.backend.is_number(value) and math.isfinite(value)
