"""Root of the flagquery error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Common base for every error flagquery raises.

    Catch it to handle malformed queries, bad capability records, a missing
    provider and configuration failures in one place.

    Args:
        message: Human-readable description.
        code: Stable machine-readable code; subclasses set ``default_code``.
        detail: Extra context such as the offending key or query path. The
            mapping is copied, so subclasses may add entries freely.
        cause: Lower-level exception this error wraps, if any. It is also
            chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form, ready to pass as structured log fields."""
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
