"""
SymPy implementation of the algebra backend.
"""

import math
import re
from typing import Dict, Optional, Tuple

import sympy as sp
from sympy.parsing.sympy_parser import (
    parse_expr,
    standard_transformations,
    implicit_multiplication,
    implicit_application,
    convert_xor,
)

from .base import AlgebraBackend
from ..utils.errors import EvaluationError, ParseError, UnsupportedFormError


class SympyBackend(AlgebraBackend):
    """
    Algebra backend built on SymPy.

    Canonical notation is close to SymPy's own: ``^`` is converted to
    ``**`` and juxtaposed factors (``pi r``) are multiplied.

    Usage:
        backend = SympyBackend()
        tree = backend.parse("x^2 + 1")
        backend.evaluate(tree, {"x": 2})  # 5.0
    """

    name = "SympyBackend"

    TRANSFORMATIONS = standard_transformations + (
        implicit_multiplication,
        implicit_application,
        convert_xor,
    )

    # Calculator names that differ from SymPy's
    ALIASES = {
        "e": sp.E,
        "pi": sp.pi,
        "inf": sp.oo,
        "infinity": sp.oo,
        "Infinity": sp.oo,
        "abs": sp.Abs,
        "ln": sp.log,
        "log": sp.log,
        "sqrt": sp.sqrt,
        "cbrt": sp.cbrt,
        "root": sp.root,
        "arcsin": sp.asin,
        "arccos": sp.acos,
        "arctan": sp.atan,
    }

    # SymPy functions/singletons that users mean as plain variables
    RESERVED_NAMES = {
        "E",
        "I",
        "N",
        "S",
        "O",
        "Q",
        "C",
        "beta",
        "gamma",
        "zeta",
        "eta",
        "Lambda",
    }

    # Numbers this close to real are treated as real
    IMAGINARY_TOLERANCE = 1e-12

    def parse(self, text: str) -> sp.Expr:
        local_dict = self._local_dict(text)
        try:
            expr = parse_expr(
                text.strip(), local_dict=local_dict, transformations=self.TRANSFORMATIONS
            )
        except Exception as e:
            raise ParseError(
                f"Failed to parse expression: {e}", expression=text
            ) from e

        if not isinstance(expr, sp.Basic):
            raise ParseError(
                f"Expression did not parse to a formula: {text}", expression=text
            )
        return expr

    def _local_dict(self, text: str) -> dict:
        """Build the name table for parse_expr, keeping physics letters symbolic."""
        local_dict = dict(self.ALIASES)
        for name in set(re.findall(r"\b([A-Za-z][A-Za-z0-9_]*)\b", text)):
            if name in local_dict:
                continue
            if name in self.RESERVED_NAMES or (len(name) == 1 and name.isupper()):
                local_dict[name] = sp.Symbol(name)
        return local_dict

    def evaluate(self, tree: sp.Basic, scope: Optional[Dict[str, float]] = None):
        value = tree
        try:
            if scope:
                substitutions = {
                    sp.Symbol(name): self._to_sympy(number)
                    for name, number in scope.items()
                }
                value = value.subs(substitutions)
            return self._to_number(value)
        except (TypeError, ValueError, ArithmeticError, AttributeError) as e:
            raise EvaluationError(f"Evaluation failed: {e}") from e

    @staticmethod
    def _to_sympy(number) -> sp.Basic:
        if isinstance(number, sp.Basic):
            return number
        if isinstance(number, float):
            if math.isinf(number):
                return sp.oo if number > 0 else -sp.oo
            if number.is_integer():
                return sp.Integer(int(number))
            return sp.Float(number)
        return sp.sympify(number)

    def _to_number(self, value):
        """Collapse a SymPy value to a float when it is a real number."""
        value = sp.sympify(value)

        if value.has(sp.nan, sp.zoo):
            return math.nan
        if value == sp.oo:
            return math.inf
        if value == -sp.oo:
            return -math.inf
        if value.free_symbols:
            return value
        if value.has(sp.S.Infinity, sp.S.NegativeInfinity):
            return math.nan

        evaluated = value.evalf()
        if not evaluated.is_number:
            return value

        real, imag = evaluated.as_real_imag()
        real, imag = float(real), float(imag)
        if abs(imag) > self.IMAGINARY_TOLERANCE * max(1.0, abs(real)):
            return value
        return real

    def derivative(self, tree: sp.Basic, variable: str) -> sp.Basic:
        return sp.diff(tree, sp.Symbol(variable))

    def simplify(self, tree: sp.Basic) -> sp.Basic:
        return sp.simplify(tree)

    def rationalize(self, tree: sp.Basic) -> sp.Basic:
        return sp.cancel(sp.together(tree))

    def expand(self, tree: sp.Basic) -> sp.Basic:
        return sp.expand(tree)

    def factor(self, tree: sp.Basic) -> sp.Basic:
        return sp.factor(self.rationalize(tree))

    def integrate(
        self,
        tree: sp.Basic,
        variable: str,
        bounds: Optional[Tuple[sp.Basic, sp.Basic]] = None,
    ):
        symbol = sp.Symbol(variable)
        if bounds is None:
            result = sp.integrate(tree, symbol)
            if result.has(sp.Integral):
                raise UnsupportedFormError(
                    f"No closed-form antiderivative found for {tree}"
                )
            return result

        lower, upper = bounds
        result = sp.integrate(tree, (symbol, lower, upper))
        if result.has(sp.Integral):
            # No closed form: fall back to numerical quadrature
            result = sp.Integral(tree, (symbol, lower, upper)).evalf()
        return self._to_number(result)

    def summation(self, tree: sp.Basic, variable: str, lower, upper):
        result = sp.summation(tree, (sp.Symbol(variable), lower, upper))
        return self._to_number(result)

    def product(self, tree: sp.Basic, variable: str, lower, upper):
        result = sp.product(tree, (sp.Symbol(variable), lower, upper))
        return self._to_number(result)

    def to_display(self, tree) -> str:
        return sp.latex(tree)
