"""Utilities: errors, constants, tracing."""

from .constants import PHYSICAL_CONSTANTS
from .errors import MathPadError
from .trace import TraceRecorder, stderr_trace, logging_trace

__all__ = [
    "PHYSICAL_CONSTANTS",
    "MathPadError",
    "TraceRecorder",
    "stderr_trace",
    "logging_trace",
]
