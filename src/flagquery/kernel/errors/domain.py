"""Domain errors — malformed flag queries."""

from __future__ import annotations

from typing import Any

from flagquery.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a query or capability rule is violated."""

    default_code = "domain_error"


class InvalidCapabilityError(DomainError):
    """A capability record cannot be turned into a :class:`Capability`."""

    default_code = "invalid_capability"


class InvalidQueryError(DomainError):
    """A value cannot be read as a flag query.

    ``path`` locates the offending node inside the query, e.g.
    ``("$or", 1, "beta")``.
    """

    default_code = "invalid_query"

    def __init__(
        self,
        message: str,
        *,
        path: tuple[Any, ...] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.path = path
        self.detail.setdefault("path", list(path))


class InvalidOperatorError(InvalidQueryError):
    """A clause key is neither an equality identifier nor an operator token."""

    default_code = "invalid_operator"

    def __init__(
        self,
        key: Any,
        message: str | None = None,
        *,
        path: tuple[Any, ...] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Invalid operator {key!r}", path=path, **kwargs)
        self.key = key
        self.detail.setdefault("key", repr(key))


class DuplicateKeyError(InvalidQueryError):
    """A clause object repeats one of its keys."""

    default_code = "duplicate_key"

    def __init__(self, key: str, *, path: tuple[Any, ...] = (), **kwargs: Any) -> None:
        super().__init__(f"Duplicate clause key {key!r}", path=path, **kwargs)
        self.key = key
        self.detail.setdefault("key", key)


class DuplicateOperatorError(DuplicateKeyError):
    """A clause object repeats an operator token (``$or`` / ``$and``)."""

    default_code = "duplicate_operator"


__all__ = [
    "DomainError",
    "DuplicateKeyError",
    "DuplicateOperatorError",
    "InvalidCapabilityError",
    "InvalidOperatorError",
    "InvalidQueryError",
]
