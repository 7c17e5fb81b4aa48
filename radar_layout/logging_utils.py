from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

from .model import Entry, RadarConfig

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxdict = 8


def _summarize_entry(entry: Entry) -> str:
    return (
        f"Entry(id={entry.id!r}, label={entry.label!r}, q={entry.quadrant}, r={entry.ring}, "
        f"pos=({entry.x:.2f}, {entry.y:.2f}))"
    )


def safe_repr(value: Any, *, max_items: int = 4, max_length: int = 400) -> str:
    """Bounded repr for log lines; arrays, entries and configs are summarized."""

    if isinstance(value, np.ndarray):
        if value.size == 0:
            return f"ndarray(shape={value.shape})"
        return (
            f"ndarray(shape={value.shape}, dtype={value.dtype}, "
            f"min={float(value.min()):.6g}, max={float(value.max()):.6g})"
        )
    if isinstance(value, Entry):
        return _summarize_entry(value)
    if isinstance(value, RadarConfig):
        return (
            f"RadarConfig(entries={len(value.entries)}, print_layout={value.print_layout}, "
            f"zoomed_quadrant={value.zoomed_quadrant})"
        )
    if isinstance(value, (list, tuple)) and value and all(isinstance(v, Entry) for v in value):
        head = ", ".join(_summarize_entry(v) for v in value[:max_items])
        more = f", ... {len(value) - max_items} more" if len(value) > max_items else ""
        return f"[{head}{more}]"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [safe_repr(arg) for arg in args]
    parts.extend(f"{key}={safe_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG lines on entry and exit of a call."""

    def decorator(func: F) -> F:
        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.exception("Exception in %s", qualname)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, safe_repr(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        return cast(F, wrapper)

    return decorator
