"""
Exceptions raised by the MathPad pipeline.

Each carries the message shown to the user and a few hints for rewriting
the input. The engine catches them per request and returns
``"Error: <message>"``, so none of them reach the caller.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, List


class ErrorSeverity(Enum):
    """How a failed request should be presented."""

    WARNING = auto()  # Input is valid but outside what the engine supports
    ERROR = auto()  # Input could not be parsed or evaluated


@dataclass
class ErrorContext:
    """Display-ready summary of a failed request (CLI ``--verbose``)."""

    title: str
    message: str
    technical_details: Optional[str]
    suggestions: List[str]  # First one is shown as "Try: ..."
    severity: ErrorSeverity

    @classmethod
    def from_exception(cls, exc: Exception, context: str = "") -> "ErrorContext":
        """Summarize any exception, including ones raised inside SymPy."""
        exc_type = type(exc).__name__
        exc_msg = str(exc)

        if isinstance(exc, MathPadError):
            return exc.to_context()

        # Tokenizer/parser failures from the algebra library
        if isinstance(exc, SyntaxError) or "parse" in exc_type.lower():
            return cls(
                title="Parse Error",
                message="Could not parse the expression.",
                technical_details=f"{exc_type}: {exc_msg}",
                suggestions=[
                    "Check for unbalanced parentheses or braces",
                    "Make sure every operator has two operands",
                ],
                severity=ErrorSeverity.ERROR,
            )

        if isinstance(exc, (ZeroDivisionError, OverflowError)):
            return cls(
                title="Evaluation Error",
                message=f"The expression could not be evaluated: {exc_msg}",
                technical_details=f"{exc_type}: {exc_msg}",
                suggestions=["Check for division by zero"],
                severity=ErrorSeverity.ERROR,
            )

        return cls(
            title="Error",
            message=f"An unexpected error occurred: {exc_msg}",
            technical_details=f"{exc_type}: {exc_msg}\nContext: {context}",
            suggestions=["Try again with a simpler expression"],
            severity=ErrorSeverity.ERROR,
        )


class MathPadError(Exception):
    """
    Root of the MathPad exceptions.

    Subclasses set ``default_title``, ``default_suggestions`` and
    ``default_severity``; callers may override the suggestions per raise.
    """

    default_title = "Error"
    default_suggestions: List[str] = []
    default_severity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        *,
        suggestions: Optional[List[str]] = None,
        technical_details: Optional[str] = None,
        severity: Optional[ErrorSeverity] = None,
    ):
        super().__init__(message)
        self.user_message = message
        self.suggestions = suggestions or list(self.default_suggestions)
        self.technical_details = technical_details
        self.severity = severity or self.default_severity

    def to_context(self) -> ErrorContext:
        return ErrorContext(
            title=self.default_title,
            message=self.user_message,
            technical_details=self.technical_details,
            suggestions=self.suggestions,
            severity=self.severity,
        )


# === Parse Errors ===


class ParseError(MathPadError):
    """Raised when a canonical expression cannot be parsed."""

    default_title = "Parse Error"
    default_suggestions = [
        "Check for missing or extra parentheses",
        "Verify LaTeX commands are spelled correctly",
        "Try plain notation (e.g., 'x^2 + 2x + 1')",
    ]

    def __init__(self, message: str, *, expression: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.expression = expression


# === Evaluation Errors ===


class EvaluationError(MathPadError):
    """Raised when a parsed expression is undefined at a required point."""

    default_title = "Evaluation Error"
    default_suggestions = [
        "Check for division by zero",
        "Check that arguments are inside the function's domain",
    ]


# === Unsupported Forms ===


class UnsupportedFormError(MathPadError):
    """Raised when a request needs a capability the engine does not have."""

    default_title = "Unsupported"
    default_severity = ErrorSeverity.WARNING
    default_suggestions = [
        "Try reformulating the expression",
        "Use simplify() or factor() to inspect the expression first",
    ]


class IndeterminateLimitError(UnsupportedFormError):
    """Raised when a limit evaluates to an indeterminate or infinite form."""

    default_title = "Indeterminate Limit"

    def __init__(self, variable: str, target: str):
        super().__init__(
            f"Limit as {variable} -> {target} is an indeterminate form; "
            "resolving it requires L'Hôpital's rule, which is not supported",
            suggestions=[
                "Simplify the expression by hand and try again",
                "Evaluate the expression at a point close to the target",
            ],
            technical_details=f"variable={variable}, target={target}",
        )
        self.variable = variable
        self.target = target


class DegreeTooHighError(UnsupportedFormError):
    """Raised when solve() receives something that is not degree <= 2."""

    default_title = "Unsupported Equation"

    def __init__(self, variable: str):
        super().__init__(
            f"Equation has degree higher than 2 in {variable}; "
            "only linear and quadratic equations are supported",
            suggestions=[
                "Factor the polynomial and solve each factor",
                "Use factor() to find the roots symbolically",
            ],
        )
        self.variable = variable


# === Utility functions ===


def format_error_for_user(exc: Exception, context: str = "") -> str:
    """
    Format an exception into a user-friendly string.

    Returns a single string suitable for a status line or terminal output.
    """
    ctx = ErrorContext.from_exception(exc, context)

    result = ctx.message
    if ctx.suggestions:
        result += f" Try: {ctx.suggestions[0]}"

    return result
