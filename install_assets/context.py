"""Utilities for tracing nested asset resolution steps."""

import contextvars
from contextlib import contextmanager
from dataclasses import dataclass
import logging
from time import perf_counter
from typing import Generator


_LOGGER = logging.getLogger(__name__)

# No public API
__all__: list[str] = []


@dataclass
class TraceStep:
    """A single named step in the resolution trace."""

    name: str
    """Name of the step, typically the asset being resolved."""

    label: str
    """Full path of the step including all enclosing steps."""

    elapsed: float = 0.0
    """Seconds spent in the step, set once the step exits."""


_TRACE: contextvars.ContextVar[tuple[str, ...]] = contextvars.ContextVar(
    "asset_trace", default=()
)


def current_trace() -> tuple[str, ...]:
    """Return the names of the enclosing steps, outermost first."""
    return _TRACE.get()


@contextmanager
def trace_context(name: str) -> Generator[TraceStep, None, None]:
    """Record a named step nested under any enclosing steps."""
    stack = _TRACE.get() + (name,)
    token = _TRACE.set(stack)
    step = TraceStep(name=name, label=" > ".join(stack))
    start = perf_counter()
    _LOGGER.debug("[Trace] > %s", step.label)
    try:
        yield step
    finally:
        step.elapsed = perf_counter() - start
        _TRACE.reset(token)
        _LOGGER.debug("[Trace] < %s (%0.3fs)", step.label, step.elapsed)
