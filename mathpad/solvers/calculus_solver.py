"""
Calculus solver for derivatives, limits, integrals and finite sums/products.
"""

import math
import re
from typing import Optional

from .base import BaseSolver
from ..models import OperationKind, OperationRequest
from ..output.formatting import format_fixed
from ..utils.errors import EvaluationError, IndeterminateLimitError, ParseError
from ..utils.trace import TraceHook, emit


class CalculusSolver(BaseSolver):
    """
    Solver for calculus operations.

    Handles:
    - Derivatives (symbolic, simplified)
    - Limits (direct substitution, one simplification retry)
    - Integrals (indefinite and definite)
    - Finite sums and products

    Limits are found by substituting the target point, so only expressions
    that are defined (or become defined after simplification) there resolve.
    Indeterminate forms such as sin(x)/x at 0 are reported, not resolved.
    """

    name = "CalculusSolver"
    description = "Calculus solver for derivatives, limits, integrals and series"

    kinds = frozenset(
        {
            OperationKind.DERIVATIVE,
            OperationKind.LIMIT,
            OperationKind.INTEGRATE,
            OperationKind.SUM,
            OperationKind.PRODUCT,
        }
    )

    def solve(
        self, request: OperationRequest, trace: Optional[TraceHook] = None
    ) -> str:
        if request.kind == OperationKind.DERIVATIVE:
            return self._solve_derivative(request)
        elif request.kind == OperationKind.LIMIT:
            return self._solve_limit(request, trace)
        elif request.kind == OperationKind.INTEGRATE:
            return self._solve_integral(request)
        else:
            return self._solve_series(request)

    def _solve_derivative(self, request: OperationRequest) -> str:
        tree = self.backend.parse(request.expression)
        result = self.backend.derivative(tree, request.variable)
        return self.backend.to_display(self.backend.simplify(result))

    def _solve_limit(
        self, request: OperationRequest, trace: Optional[TraceHook] = None
    ) -> str:
        variable = request.variable
        point = self._limit_point(request.target)
        tree = self.backend.parse(request.expression)

        value = self.backend.evaluate(tree, {variable: point})
        if self.backend.is_number(value) and not math.isfinite(value):
            # Removable singularities like (x^2-1)/(x-1) at 1 cancel out
            emit(trace, "limit_retry", variable=variable, point=point)
            simplified = self.backend.simplify(tree)
            value = self.backend.evaluate(simplified, {variable: point})

        if not self.backend.is_number(value):
            return self.backend.to_display(value)
        if not math.isfinite(value):
            raise IndeterminateLimitError(variable, request.target)
        return format_fixed(value)

    def _limit_point(self, target: str) -> float:
        """``inf``/``infinity`` (optionally signed) or a plain number."""
        text = target.strip()
        infinite = re.fullmatch(r"([+-]?)(inf|infinity)", text, re.IGNORECASE)
        if infinite:
            return -math.inf if infinite.group(1) == "-" else math.inf

        try:
            return float(text)
        except ValueError:
            pass

        # Named points such as pi or e/2
        try:
            value = self.backend.evaluate(self.backend.parse(text))
        except ParseError:
            value = None
        if not self.backend.is_number(value):
            raise EvaluationError(f"Invalid limit target: '{target}'")
        return value

    def _solve_integral(self, request: OperationRequest) -> str:
        tree = self.backend.parse(request.expression)

        if request.bounds is None:
            result = self.backend.integrate(tree, request.variable)
            return self.backend.to_display(result) + " + C"

        lower, upper = (self._parse_bound(bound) for bound in request.bounds)
        value = self.backend.integrate(tree, request.variable, (lower, upper))
        return self._render(value)

    def _solve_series(self, request: OperationRequest) -> str:
        tree = self.backend.parse(request.expression)
        lower, upper = (self._parse_bound(bound) for bound in request.bounds)

        if request.kind == OperationKind.SUM:
            value = self.backend.summation(tree, request.variable, lower, upper)
        else:
            value = self.backend.product(tree, request.variable, lower, upper)
        return self._render(value)
