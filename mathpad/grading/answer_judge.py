"""
Answer checking for practice problems.

Decides whether a submitted answer matches the stored one: numerically
within a tolerance when both sides are numbers, by normalized text
otherwise. Never raises.
"""

import logging
import math
import re
from typing import Optional, Sequence

import sympy as sp
from sympy.parsing.sympy_parser import parse_expr, standard_transformations

from ..algebra import AlgebraBackend, SympyBackend
from ..models import AnswerPair
from ..utils.constants import ANSWER_TOLERANCE, EQUIVALENCE_TEST_POINTS
from ..utils.errors import MathPadError

logger = logging.getLogger(__name__)

_PLAIN_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")

# Characters the numeric evaluator accepts after symbol substitution
_ARITHMETIC = re.compile(r"[0-9A-Za-z.+\-*/(), ]+")

# Letters that mark an answer as algebraic; e, i and p are left out so
# that e, pi and i alone do not count as variables
_ALGEBRA_LETTER = re.compile(r"[a-df-hj-oq-z]", re.IGNORECASE)

_IGNORED_CHARACTERS = re.compile(r"[\s()<>]")


class AnswerJudge:
    """
    Compare a user's answer with the correct one.

    Usage:
        judge = AnswerJudge()
        judge.is_equivalent("4", "4.0")              # True
        judge.is_equivalent("Converge", "converge")  # True

        AnswerJudge(algebraic=True).is_equivalent("2(x+1)", "2x+2")  # True
    """

    NUMERIC_LOCALS = {"pi": sp.pi, "sqrt": sp.sqrt, "E": sp.E}

    def __init__(
        self,
        tolerance: float = ANSWER_TOLERANCE,
        algebraic: bool = False,
        test_points: Sequence[float] = EQUIVALENCE_TEST_POINTS,
        backend: Optional[AlgebraBackend] = None,
    ):
        """
        Args:
            tolerance: Largest accepted difference between numeric answers
            algebraic: Also accept symbolically equal expressions
            test_points: Sample values for the algebraic spot check
            backend: Algebra backend for the algebraic comparison
        """
        self.tolerance = tolerance
        self.algebraic = algebraic
        self.test_points = tuple(test_points)
        self._backend = backend

    @property
    def backend(self) -> AlgebraBackend:
        """Lazy-load the algebra backend."""
        if self._backend is None:
            self._backend = SympyBackend()
        return self._backend

    def judge(self, pair: AnswerPair) -> bool:
        return self.is_equivalent(pair.user_answer, pair.correct_answer)

    def is_equivalent(self, user_answer: str, correct_answer: str) -> bool:
        user = user_answer.strip()
        correct = correct_answer.strip()

        user_value = self.to_number(user)
        correct_value = self.to_number(correct)
        if not math.isnan(user_value) and not math.isnan(correct_value):
            return abs(user_value - correct_value) < self.tolerance

        if self.algebraic and (
            _ALGEBRA_LETTER.search(user) or _ALGEBRA_LETTER.search(correct)
        ):
            if self._algebraically_equal(user, correct):
                return True

        return self._normalize_text(user) == self._normalize_text(correct)

    def to_number(self, text: str) -> float:
        """
        Numeric value of an answer, or ``nan`` when it is not a number.

        Recognizes plain decimals, ``a/b`` quotients of decimals, and
        arithmetic using π, √, ^ and e (Euler's number).
        """
        if "/" in text and not re.search(r"[a-zA-Z]", text):
            parts = [part.strip() for part in text.split("/")]
            if len(parts) == 2 and all(_PLAIN_FLOAT.fullmatch(p) for p in parts):
                numerator, denominator = float(parts[0]), float(parts[1])
                if denominator != 0:
                    return numerator / denominator

        if _PLAIN_FLOAT.fullmatch(text):
            return float(text)

        # Every "e" becomes Euler's number, including inside words; see DESIGN.md
        expression = (
            text.replace("π", "pi")
            .replace("√", "sqrt")
            .replace("^", "**")
            .replace("e", "E")
        )
        if not _ARITHMETIC.fullmatch(expression) or "__" in expression:
            return math.nan

        try:
            # Unevaluated, so 9^9^9 is computed in floating point, not exactly
            value = parse_expr(
                expression,
                local_dict=dict(self.NUMERIC_LOCALS),
                transformations=standard_transformations,
                evaluate=False,
            )
            if not isinstance(value, sp.Basic) or value.free_symbols:
                return math.nan
            real, imag = sp.N(value).as_real_imag()
            if imag != 0:
                return math.nan
            return float(real)
        except Exception:
            # Anything that fails to evaluate is simply not a number
            return math.nan

    def _algebraically_equal(self, user: str, correct: str) -> bool:
        """Symbolic difference, then a spot check at sample points."""
        try:
            left = self.backend.parse(user)
            right = self.backend.parse(correct)
            if self.backend.simplify(left - right) == 0:
                return True
        except (MathPadError, TypeError) as e:
            logger.debug("algebraic comparison skipped: %s", e)
            return False

        names = sorted(str(s) for s in left.free_symbols | right.free_symbols)
        if not names:
            return False

        compared = 0
        for point in self.test_points:
            # Distinct values per variable so x+y is not mistaken for 2x
            scope = {
                name: point * (1 + 0.1 * index) for index, name in enumerate(names)
            }
            try:
                a = self.backend.evaluate(left, scope)
                b = self.backend.evaluate(right, scope)
            except MathPadError:
                continue
            if not (self._finite(a) and self._finite(b)):
                continue
            if abs(a - b) > self.tolerance:
                return False
            compared += 1
        return compared > 0

    def _finite(self, value) -> bool:
        return self.backend.is_number(value) and math.isfinite(value)

    @staticmethod
    def _normalize_text(text: str) -> str:
        return _IGNORED_CHARACTERS.sub("", text).lower()


_default_judge = AnswerJudge()


def is_equivalent(user_answer: str, correct_answer: str) -> bool:
    """
    Convenience function: check with the default judge.
    """
    return _default_judge.is_equivalent(user_answer, correct_answer)
