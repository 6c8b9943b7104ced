from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 4
_repr.maxtuple = 4


def _looks_like_point(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(coord, (int, float)) and not isinstance(coord, bool) for coord in value)
    )


def summarize(value: Any, *, max_points: int = 3) -> str:
    """Render ``value`` compactly; point collections collapse to a count."""

    if isinstance(value, np.ndarray):
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
    if _looks_like_point(value):
        return f"({value[0]:g}, {value[1]:g})"
    if isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
        if items and all(_looks_like_point(item) for item in items):
            head = ", ".join(summarize(item) for item in items[:max_points])
            more = ", ..." if len(items) > max_points else ""
            return f"<{len(items)} point(s): {head}{more}>"
    return _repr.repr(value)


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [summarize(arg) for arg in args]
    parts.extend(f"{key}={summarize(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG records on entry and exit."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            result = func(*args, **kwargs)
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, summarize(result))
            else:
                logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public module-level functions of ``namespace`` with :func:`debug_log_call`."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_"):
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)


__all__ = ["apply_debug_logging", "debug_log_call", "summarize"]
