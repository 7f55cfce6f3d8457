"""
Linear and quadratic equation solver.

Reads the Taylor coefficients of ``f(v) = 0`` at ``v = 0`` from f and its
derivatives instead of asking the algebra library to factor anything:

    c = f(0),  b = f'(0),  a = f''(0) / 2

This is only correct when f really is a polynomial of degree <= 2 in v.
The third derivative must vanish identically, so higher-degree and
transcendental equations are rejected rather than mis-solved.
"""

import math
from typing import Optional

from .base import BaseSolver
from ..models import OperationKind, OperationRequest, SolveResult
from ..utils.constants import SOLVE_TOLERANCE
from ..utils.errors import (
    DegreeTooHighError,
    EvaluationError,
    MathPadError,
    UnsupportedFormError,
)
from ..utils.trace import TraceHook, emit


class QuadraticSolver(BaseSolver):
    """
    Real roots of equations of degree at most 2.

    Handles ``solve(expr, v)`` and ``solve(lhs = rhs, v)``.

    Usage:
        solver = QuadraticSolver(SympyBackend())
        solver.find_roots("x^2-5*x+6", "x").format()  # '3, 2'
    """

    name = "QuadraticSolver"
    description = "Linear/quadratic roots by coefficient extraction"

    kinds = frozenset({OperationKind.SOLVE})

    tolerance = SOLVE_TOLERANCE

    def solve(
        self, request: OperationRequest, trace: Optional[TraceHook] = None
    ) -> str:
        return self.find_roots(request.expression, request.variable, trace).format()

    def find_roots(
        self, expression: str, variable: str, trace: Optional[TraceHook] = None
    ) -> SolveResult:
        """
        Solve ``expression = 0`` for ``variable``.

        Raises:
            EvaluationError: f(0) is undefined
            UnsupportedFormError: f'(0) is undefined (sqrt/log/trig terms)
            DegreeTooHighError: f''' is not identically zero
        """
        tree = self.backend.simplify(self.backend.parse(self._zero_form(expression)))
        at_zero = {variable: 0}

        c = self.backend.evaluate(tree, at_zero)
        if not self.backend.is_number(c):
            raise EvaluationError(
                f"Cannot solve: expression has unknowns other than {variable}"
            )
        if not self._finite(c):
            raise EvaluationError(
                "Cannot solve: division by zero or undefined values at "
                f"{variable} = 0"
            )

        first = self.backend.derivative(tree, variable)
        b = self.backend.evaluate(first, at_zero)
        if not self._finite(b):
            raise UnsupportedFormError(
                "Cannot solve transcendental equations: terms such as sqrt, "
                "log or trig functions make the coefficients undefined"
            )

        second = self.backend.derivative(first, variable)
        try:
            a2 = self.backend.evaluate(second, at_zero)
        except MathPadError:
            a2 = 0.0
        if not self._finite(a2):
            a2 = 0.0

        self._check_degree(second, variable)

        emit(trace, "coefficients", a2=a2, b=b, c=c)
        return self._classify(a2, b, c)

    @staticmethod
    def _zero_form(expression: str) -> str:
        """``lhs = rhs`` -> ``lhs - (rhs)``."""
        if "=" not in expression:
            return expression
        lhs, rhs = expression.split("=", 1)
        return f"{lhs.strip()} - ({rhs.strip()})"

    def _check_degree(self, second, variable: str):
        """f''' must vanish everywhere, not only at 0 (x^4 - 1 has f'''(0) = 0)."""
        third = self.backend.simplify(self.backend.derivative(second, variable))
        if third != 0:
            raise DegreeTooHighError(variable)

    def _finite(self, value) -> bool:
        return self.backend.is_number(value) and math.isfinite(value)

    def _classify(self, a2: float, b: float, c: float) -> SolveResult:
        tol = self.tolerance

        if abs(a2) > tol:
            a = a2 / 2
            discriminant = b * b - 4 * a * c
            if discriminant < 0:
                return SolveResult(message="No real solutions")

            root_d = math.sqrt(discriminant)
            x1 = (-b + root_d) / (2 * a)
            x2 = (-b - root_d) / (2 * a)
            if abs(x1 - x2) < tol:
                return SolveResult(roots=[x1])
            return SolveResult(roots=[x1, x2])

        if abs(b) > tol:
            root = -c / b
            if not math.isfinite(root):
                return SolveResult(message="No solution (division by zero)")
            return SolveResult(roots=[root])

        if abs(c) < tol:
            return SolveResult(message="All real numbers")
        return SolveResult(message="No solution")
