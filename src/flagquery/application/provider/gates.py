"""Application provider – gates that branch on a flag verdict."""
from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from flagquery.application.provider.hooks import use_feature, use_flag
from flagquery.kernel.capabilities import Capability
from flagquery.kernel.query import FlagQuery

F = TypeVar("F", bound=Callable[..., Any])


def when_flag(
    query: FlagQuery | Any,
    fn: Callable[..., Any],
    /,
    *args: Any,
    otherwise: Any = None,
    **kwargs: Any,
) -> Any:
    """Call ``fn(*args, **kwargs)`` when *query* holds, else return *otherwise*."""
    if use_flag(query):
        return fn(*args, **kwargs)
    return otherwise


def with_feature(
    slug: str,
    fn: Callable[[Capability], Any],
    /,
    otherwise: Any = None,
) -> Any:
    """Call ``fn(capability)`` when *slug* is enabled, else return *otherwise*."""
    capability = use_feature(slug)
    if capability is None:
        return otherwise
    return fn(capability)


def flag_required(query: FlagQuery | Any, *, fallback: Any = None) -> Callable[[F], F]:
    """Decorator: run the function only while *query* holds.

    The query is checked against the ambient provider on every call; when it
    does not hold the function is skipped and *fallback* is returned.
    Coroutine functions are supported.
    """

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                if not use_flag(query):
                    return fallback
                return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not use_flag(query):
                return fallback
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["flag_required", "when_flag", "with_feature"]
