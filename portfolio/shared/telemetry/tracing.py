"""Tracing helpers: the traced decorator and current-span annotations.

Arguments of a traced call are recorded by name after binding them to the
function signature, so positional and keyword calls produce the same
attributes. Only allowlisted names are recorded verbatim; free-text
arguments (search queries) are recorded as their length only.
"""

import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

P = ParamSpec("P")
R = TypeVar("R")

# Recorded as arg.<name> (case-insensitive).
_SAFE_SPAN_ATTR_KEYS = frozenset(
    {"id", "ids", "count", "limit", "offset", "kind", "kinds", "slug"}
)

# Recorded as arg.<name>.length.
_TEXT_SPAN_ATTR_KEYS = frozenset({"query", "raw_query", "q"})


def _bound_arguments(
    signature: inspect.Signature, args: tuple, kwargs: dict
) -> dict[str, Any]:
    try:
        bound = signature.bind(*args, **kwargs)
    except TypeError:
        return dict(kwargs)
    return {k: v for k, v in bound.arguments.items() if k not in ("self", "cls")}


def _record_arguments(span: trace.Span, arguments: dict[str, Any]) -> None:
    for key, value in arguments.items():
        name = key.lower()
        if name in _SAFE_SPAN_ATTR_KEYS:
            span.set_attribute(f"arg.{key}", str(value))
        elif name in _TEXT_SPAN_ATTR_KEYS and isinstance(value, str):
            span.set_attribute(f"arg.{key}.length", len(value))


def traced(
    operation_name: str | None = None,
    attributes: dict[str, str | int | float | bool] | None = None,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Run an async function inside a span named operation_name.

    The span ends with status OK, or ERROR with the exception recorded when
    the function raises (the exception propagates).

    Args:
        operation_name: Span name (defaults to module.qualname).
        attributes: Static attributes set on every span.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        tracer = trace.get_tracer(func.__module__)
        span_name = operation_name or f"{func.__module__}.{func.__qualname__}"
        signature = inspect.signature(func)

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with tracer.start_as_current_span(
                span_name,
                attributes=attributes,
                record_exception=False,
                set_status_on_exception=False,
            ) as span:
                _record_arguments(span, _bound_arguments(signature, args, kwargs))
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    set_span_error(e, span)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)


def set_span_error(exception: Exception, span: trace.Span | None = None) -> None:
    """Mark span (default: the current span) as error and record the exception."""
    span = span or trace.get_current_span()
    if span.is_recording():
        span.set_status(Status(StatusCode.ERROR, str(exception)))
        span.record_exception(exception)
