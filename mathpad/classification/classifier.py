"""
Operation classifier for routing to solvers.

Priority-ordered keyword matching over the canonical expression.
"""

import re
from typing import List, Optional, Tuple

from ..models import OperationKind, OperationRequest
from ..utils.constants import DEFAULT_VARIABLE
from ..utils.errors import ParseError

_IDENTIFIER = re.compile(r"[a-zA-Z_]\w*")


class OperationClassifier:
    """
    Classifies canonical expressions into operation requests.

    Classification priority (highest first):
    1. Derivative: ``d/dV(expr)`` or ``derivative(expr[, V])``
    2. ``simplify(expr)``
    3. ``expand(expr)``
    4. ``factor(expr)``
    5. ``solve(expr, V)``
    6. ``limit(expr, V -> target)``
    7. ``integrate(expr[, V[, lower, upper]])``
    8. ``sum(expr, V, lower, upper)`` / ``product(...)``
    9. Evaluate (fallback)

    A keyword only matches when its call spans the whole expression. A
    matched keyword with the wrong arguments raises ParseError.

    Usage:
        classifier = OperationClassifier()
        request = classifier.classify("solve(x^2-4, x)")
        request.kind  # OperationKind.SOLVE
    """

    def classify(self, canonical: str) -> OperationRequest:
        """
        Classify a canonical expression.

        Args:
            canonical: Output of the normalizer

        Returns:
            OperationRequest with exactly one kind
        """
        text = canonical.strip()

        for check in (
            self._check_derivative,
            self._check_rewrite,
            self._check_solve,
            self._check_limit,
            self._check_integral,
            self._check_series,
        ):
            request = check(text)
            if request is not None:
                return request

        return OperationRequest.evaluate(text)

    def _check_derivative(self, text: str) -> Optional[OperationRequest]:
        leibniz = re.match(r"d/d([a-zA-Z]\w*)(?=\()", text)
        if leibniz:
            body = self._call_body(text, leibniz.end())
            if body is not None:
                return OperationRequest(
                    kind=OperationKind.DERIVATIVE,
                    expression=body.strip(),
                    variable=leibniz.group(1),
                )

        args = self._call_args(text, "derivative")
        if args is None:
            return None
        if len(args) == 1:
            variable = DEFAULT_VARIABLE
        elif len(args) == 2:
            variable = self._variable(args[1], "derivative(expr, x)")
        else:
            raise self._usage("derivative(expr, x)", text)
        return OperationRequest(
            kind=OperationKind.DERIVATIVE, expression=args[0], variable=variable
        )

    def _check_rewrite(self, text: str) -> Optional[OperationRequest]:
        for keyword, kind in (
            ("simplify", OperationKind.SIMPLIFY),
            ("expand", OperationKind.EXPAND),
            ("factor", OperationKind.FACTOR),
        ):
            args = self._call_args(text, keyword)
            if args is None:
                continue
            if len(args) != 1:
                raise self._usage(f"{keyword}(expr)", text)
            return OperationRequest(kind=kind, expression=args[0])
        return None

    def _check_solve(self, text: str) -> Optional[OperationRequest]:
        args = self._call_args(text, "solve")
        if args is None:
            return None
        if len(args) != 2:
            raise self._usage("solve(expr, x)", text)
        return OperationRequest(
            kind=OperationKind.SOLVE,
            expression=args[0],
            variable=self._variable(args[1], "solve(expr, x)"),
        )

    def _check_limit(self, text: str) -> Optional[OperationRequest]:
        args = self._call_args(text, "limit")
        if args is None:
            return None
        if len(args) != 2 or "->" not in args[1]:
            raise self._usage("limit(expr, x -> target)", text)
        variable, target = (part.strip() for part in args[1].split("->", 1))
        if not target:
            raise self._usage("limit(expr, x -> target)", text)
        return OperationRequest(
            kind=OperationKind.LIMIT,
            expression=args[0],
            variable=self._variable(variable, "limit(expr, x -> target)"),
            target=target,
        )

    def _check_integral(self, text: str) -> Optional[OperationRequest]:
        args = self._call_args(text, "integrate")
        if args is None:
            return None
        usage = "integrate(expr, x) or integrate(expr, x, lower, upper)"
        if len(args) not in (1, 2, 4):
            raise self._usage(usage, text)
        variable = self._variable(args[1], usage) if len(args) > 1 else DEFAULT_VARIABLE
        bounds = (args[2], args[3]) if len(args) == 4 else None
        return OperationRequest(
            kind=OperationKind.INTEGRATE,
            expression=args[0],
            variable=variable,
            bounds=bounds,
        )

    def _check_series(self, text: str) -> Optional[OperationRequest]:
        for keyword, kind in (
            ("sum", OperationKind.SUM),
            ("product", OperationKind.PRODUCT),
        ):
            args = self._call_args(text, keyword)
            if args is None:
                continue
            usage = f"{keyword}(expr, k, lower, upper)"
            if len(args) != 4:
                raise self._usage(usage, text)
            return OperationRequest(
                kind=kind,
                expression=args[0],
                variable=self._variable(args[1], usage),
                bounds=(args[2], args[3]),
            )
        return None

    # --- argument extraction ---

    def _call_args(self, text: str, keyword: str) -> Optional[List[str]]:
        """Arguments of ``keyword(...)`` when that call is the whole text."""
        if not text.startswith(keyword + "("):
            return None
        body = self._call_body(text, len(keyword))
        if body is None:
            return None
        args = split_arguments(body)
        if any(not arg for arg in args):
            raise self._usage(f"{keyword}(...) with non-empty arguments", text)
        return args

    @staticmethod
    def _call_body(text: str, open_index: int) -> Optional[str]:
        """
        Contents of the parenthesis opening at ``open_index``, provided its
        matching ``)`` is the last character of ``text``.
        """
        depth = 0
        for i in range(open_index, len(text)):
            if text[i] == "(":
                depth += 1
            elif text[i] == ")":
                depth -= 1
                if depth == 0:
                    if i == len(text) - 1:
                        return text[open_index + 1 : i]
                    return None
        return None

    def _variable(self, text: str, usage: str) -> str:
        name = text.strip()
        if not _IDENTIFIER.fullmatch(name):
            raise ParseError(
                f"'{name}' is not a variable name",
                expression=text,
                suggestions=[f"Use the form {usage}"],
            )
        return name

    @staticmethod
    def _usage(usage: str, text: str) -> ParseError:
        return ParseError(
            f"Malformed call '{text}'", expression=text, suggestions=[f"Use {usage}"]
        )


def split_arguments(body: str) -> List[str]:
    """Split on commas that are not nested inside brackets."""
    args: List[str] = []
    depth = 0
    current = ""
    for char in body:
        if char in "([":
            depth += 1
        elif char in ")]":
            depth -= 1
        if char == "," and depth == 0:
            args.append(current.strip())
            current = ""
        else:
            current += char
    args.append(current.strip())
    return args


def classify(canonical: str) -> OperationRequest:
    """Convenience function: classify with a default classifier."""
    return OperationClassifier().classify(canonical)
