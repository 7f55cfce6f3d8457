"""
Trace hooks for following an evaluation.

A trace hook is any callable taking an event name and a payload dict. The
engine calls it at each stage of a request when one is passed in; nothing
is recorded otherwise.
"""

import logging
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

TraceHook = Callable[[str, Dict[str, Any]], None]


def emit(trace: Optional[TraceHook], event: str, **payload: Any) -> None:
    """Send an event to the hook if there is one."""
    if trace is not None:
        trace(event, payload)


def stderr_trace(event: str, payload: Dict[str, Any]) -> None:
    """Print events to stderr (used by ``mathpad --verbose``)."""
    details = ", ".join(f"{key}={value!r}" for key, value in payload.items())
    print(f"[{event}] {details}", file=sys.stderr)


def logging_trace(logger: logging.Logger, level: int = logging.DEBUG) -> TraceHook:
    """Adapt a trace hook onto a standard logger."""

    def hook(event: str, payload: Dict[str, Any]) -> None:
        logger.log(level, "%s %s", event, payload)

    return hook


class TraceRecorder:
    """
    Collects events in memory.

    Usage:
        recorder = TraceRecorder()
        evaluate("2+2", trace=recorder)
        recorder.events_named("normalized")
    """

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def __call__(self, event: str, payload: Dict[str, Any]) -> None:
        self.events.append((event, dict(payload)))

    def events_named(self, name: str) -> List[Dict[str, Any]]:
        return [payload for event, payload in self.events if event == name]
