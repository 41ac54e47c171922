"""Instrumentation for store, weather and service calls."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, ParamSpec, TypeVar

from fitpick_app.logging_config import ensure_correlation_id, get_logger, log_event

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")

_MAX_PREVIEW_KEYS = 6


def _preview_kwargs(kwargs: dict) -> dict:
    """First few keyword arguments; values are scrubbed later by ``log_event``."""

    preview = dict(list(kwargs.items())[:_MAX_PREVIEW_KEYS])
    if len(kwargs) > _MAX_PREVIEW_KEYS:
        preview["truncated"] = True
    return preview


def _summarize(result: Any) -> Any:
    """Describe a return value without logging the garments themselves."""

    if result is None or isinstance(result, (bool, int, float)):
        return result
    if isinstance(result, (list, tuple, dict)):
        return {"type": type(result).__name__, "size": len(result)}
    return type(result).__name__


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def instrument_tool(tool_name: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log start, completion (with a result summary) or failure of a call, with timings.

    Exceptions are logged and re-raised unchanged.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_started",
                tool=tool_name,
                correlation_id=correlation_id,
                kwargs=_preview_kwargs(kwargs),
            )
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "tool_call_failed",
                    tool=tool_name,
                    correlation_id=correlation_id,
                    error=type(exc).__name__,
                    duration_ms=_elapsed_ms(start),
                    exc_info=True,
                )
                raise
            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_completed",
                tool=tool_name,
                correlation_id=correlation_id,
                result=_summarize(result),
                duration_ms=_elapsed_ms(start),
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_tool"]
