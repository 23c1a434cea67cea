"""Application provider – ambient FeatureProvider stored in a ``ContextVar``."""
from __future__ import annotations

import contextlib
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING, Iterator

from flagquery.kernel.errors import NoProviderError

if TYPE_CHECKING:
    from flagquery.application.provider.provider import FeatureProvider

_PROVIDER_CTX_VAR: ContextVar["FeatureProvider | None"] = ContextVar(
    "_flagquery_provider_ctx", default=None
)


class FeatureContext:
    """Ambient provider for the current thread / asyncio task."""

    @staticmethod
    def set(provider: "FeatureProvider") -> Token["FeatureProvider | None"]:
        return _PROVIDER_CTX_VAR.set(provider)

    @staticmethod
    def get() -> "FeatureProvider | None":
        return _PROVIDER_CTX_VAR.get()

    @staticmethod
    def require() -> "FeatureProvider":
        provider = _PROVIDER_CTX_VAR.get()
        if provider is None:
            raise NoProviderError()
        return provider

    @staticmethod
    def reset(token: Token["FeatureProvider | None"]) -> None:
        _PROVIDER_CTX_VAR.reset(token)

    @staticmethod
    def clear() -> None:
        _PROVIDER_CTX_VAR.set(None)

    @staticmethod
    @contextlib.contextmanager
    def scoped(provider: "FeatureProvider") -> Iterator["FeatureProvider"]:
        """Make *provider* ambient for the block; the outer one is restored on exit."""
        token = _PROVIDER_CTX_VAR.set(provider)
        try:
            yield provider
        finally:
            _PROVIDER_CTX_VAR.reset(token)


__all__ = ["FeatureContext"]
