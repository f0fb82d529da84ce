"""Decorator and helpers for tracing Firestore operations."""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

T = TypeVar("T")

# Only these kwarg names are recorded on spans; tokens and payloads never are.
_SAFE_SPAN_ATTR_KEYS = frozenset({
    "collection", "doc_id", "document_id", "limit", "order_by", "must_exist",
    "field", "delta", "slug", "blog_id", "user_id", "include_private",
})


def _set_safe_span_attrs(span: trace.Span, kwargs: dict) -> None:
    """Set span attributes from kwargs; only allowlisted keys are recorded."""
    for key, value in kwargs.items():
        if not key.startswith("_") and key.lower() in _SAFE_SPAN_ATTR_KEYS:
            span.set_attribute(f"arg.{key}", str(value))


def _setup_span(
    span: trace.Span,
    attributes: dict[str, str | int | float | bool] | None,
    kwargs: dict[str, Any],
) -> None:
    if attributes:
        for key, value in attributes.items():
            span.set_attribute(key, value)
    _set_safe_span_attrs(span, kwargs)


def _run_in_span_sync(span: trace.Span, run: Callable[[], T]) -> T:
    try:
        result = run()
    except Exception as e:
        span.set_status(Status(StatusCode.ERROR, str(e)))
        span.record_exception(e)
        raise
    else:
        span.set_status(Status(StatusCode.OK))
        return result


async def _run_in_span_async(span: trace.Span, run: Callable[[], Any]) -> Any:
    try:
        result = await run()
    except Exception as e:
        span.set_status(Status(StatusCode.ERROR, str(e)))
        span.record_exception(e)
        raise
    else:
        span.set_status(Status(StatusCode.OK))
        return result


def traced(
    operation_name: str | None = None,
    attributes: dict | None = None,
) -> Callable:
    """Decorator to create a span for a function (sync or async).

    Args:
        operation_name: Span name (defaults to module.funcname).
        attributes: Optional dict of attributes to set on the span.

    Returns:
        Decorated function.
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                _setup_span(span, attributes, kwargs)
                return await _run_in_span_async(
                    span, lambda: func(*args, **kwargs)
                )

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                _setup_span(span, attributes, kwargs)
                return _run_in_span_sync(span, lambda: func(*args, **kwargs))

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
