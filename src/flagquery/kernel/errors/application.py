"""Application-layer errors — misuse of the provider glue."""

from __future__ import annotations

from typing import Any

from flagquery.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class NoProviderError(ApplicationError):
    """A feature accessor ran outside any ``FeatureProvider`` scope."""

    default_code = "no_provider"

    def __init__(
        self,
        message: str = "Component must be wrapped with FeatureProvider.",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


__all__ = ["ApplicationError", "NoProviderError"]
