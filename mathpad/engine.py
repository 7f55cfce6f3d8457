"""
Evaluation engine: normalize, classify, dispatch.

evaluate() always returns a string. A failure inside any operation comes
back as ``"Error: <message>"`` for that request only; the engine keeps no
state between calls.
"""

import logging
import time
from typing import Optional

from .algebra import AlgebraBackend, SympyBackend
from .classification import OperationClassifier
from .input import LatexNormalizer
from .output.formatting import format_error
from .solvers import SolverRegistry, get_default_registry
from .utils.errors import MathPadError
from .utils.trace import TraceHook, emit

logger = logging.getLogger(__name__)


class MathEngine:
    """
    Evaluate notepad input.

    Usage:
        engine = MathEngine()
        engine.evaluate(r"\\sqrt{16}")           # '4'
        engine.evaluate("solve(x^2-5x+6, x)")   # '3, 2'
    """

    def __init__(
        self,
        backend: Optional[AlgebraBackend] = None,
        registry: Optional[SolverRegistry] = None,
    ):
        self.backend = backend or SympyBackend()
        self.registry = registry or get_default_registry(self.backend)
        self.registry.check_complete()
        self.normalizer = LatexNormalizer()
        self.classifier = OperationClassifier()

    def normalize(self, raw: str) -> str:
        return self.normalizer.normalize(raw)

    def evaluate(self, raw: str, trace: Optional[TraceHook] = None) -> str:
        """
        Evaluate a raw LaTeX-like expression.

        Args:
            raw: Input from the math field
            trace: Optional hook receiving (event, payload) per stage

        Returns:
            LaTeX, a formatted number, a phrase such as "No real solutions",
            or "Error: <message>"
        """
        canonical = self.normalizer.normalize(raw)
        emit(trace, "normalized", raw=raw, canonical=canonical)

        try:
            request = self.classifier.classify(canonical)
            emit(trace, "classified", kind=request.kind.name, request=request)

            solver = self.registry.get_solver(request)
            start = time.perf_counter()
            result = solver.solve(request, trace)
            elapsed_ms = int((time.perf_counter() - start) * 1000)
        except Exception as e:
            # MathPadError and anything the algebra library raises alike
            return self._failure(e, canonical, trace)

        emit(trace, "result", result=result, solver=solver.name, elapsed_ms=elapsed_ms)
        return result

    def _failure(self, exc: Exception, canonical: str, trace: Optional[TraceHook]) -> str:
        message = exc.user_message if isinstance(exc, MathPadError) else str(exc)
        logger.debug("evaluation of %r failed: %s", canonical, exc)
        emit(trace, "error", error=type(exc).__name__, message=message, exception=exc)
        return format_error(message)


_default_engine: Optional[MathEngine] = None


def _get_default_engine() -> MathEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = MathEngine()
    return _default_engine


def evaluate(raw: str, trace: Optional[TraceHook] = None) -> str:
    """
    Convenience function: evaluate with a default engine.
    """
    return _get_default_engine().evaluate(raw, trace)
