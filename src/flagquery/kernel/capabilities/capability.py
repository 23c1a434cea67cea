"""Kernel capabilities – Capability value object."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from flagquery.kernel.errors import InvalidCapabilityError


@dataclasses.dataclass(frozen=True)
class Capability:
    """A named, independently togglable unit of functionality.

    Equality and hashing use ``slug`` only; ``settings`` is opaque payload
    carried for callers and never read by the evaluator.
    """

    slug: str
    settings: Mapping[str, Any] = dataclasses.field(
        default_factory=dict, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.slug, str):
            raise InvalidCapabilityError(
                f"Capability slug must be a string, got {self.slug!r}"
            )
        # "$" prefixes operator tokens in flag queries.
        if self.slug.startswith("$"):
            raise InvalidCapabilityError(
                f"Capability slug {self.slug!r} uses the reserved '$' prefix"
            )
        object.__setattr__(self, "settings", MappingProxyType(dict(self.settings)))

    @classmethod
    def from_record(cls, record: "Capability | Mapping[str, Any]") -> "Capability":
        """Build a capability from a record such as ``{"slug": "beta", "settings": {}}``.

        Without a ``settings`` key, every key other than ``slug`` becomes a
        setting.
        """
        if isinstance(record, Capability):
            return record
        if not isinstance(record, Mapping):
            raise InvalidCapabilityError(
                f"Capability record must be a mapping, got {type(record).__name__}"
            )
        if "slug" not in record:
            raise InvalidCapabilityError("Capability record has no 'slug'", detail={"record": dict(record)})
        settings = record.get("settings")
        if settings is None:
            settings = {k: v for k, v in record.items() if k != "slug"}
        if not isinstance(settings, Mapping):
            raise InvalidCapabilityError(
                f"Capability settings must be a mapping, got {type(settings).__name__}",
                detail={"slug": record["slug"]},
            )
        return cls(slug=record["slug"], settings=settings)

    def to_dict(self) -> dict[str, Any]:
        return {"slug": self.slug, "settings": dict(self.settings)}


__all__ = ["Capability"]
