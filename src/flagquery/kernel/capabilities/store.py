"""Kernel capabilities – CapabilityStore and the CapabilityLookup port."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from flagquery.kernel.capabilities.capability import Capability


@runtime_checkable
class CapabilityLookup(Protocol):
    """Port: what the evaluator needs from a capability table."""

    def exists(self, slug: str) -> bool: ...

    def get(self, slug: str) -> Capability | None: ...


class CapabilityStore:
    """Read-only lookup table from slug to :class:`Capability`.

    Built once and never mutated; when the capability list changes, build a
    new store and swap the reference. Duplicate slugs in the input resolve to
    the *last* capability supplied. Construction has no other side effects.

    Example::

        store = CapabilityStore.from_records([{"slug": "beta"}])
        assert store.exists("beta")
        assert store.get("gamma") is None
    """

    __slots__ = ("_by_slug",)

    def __init__(self, capabilities: Iterable[Capability] = ()) -> None:
        by_slug: dict[str, Capability] = {}
        for capability in capabilities:
            by_slug[capability.slug] = capability
        self._by_slug: Mapping[str, Capability] = MappingProxyType(by_slug)

    @classmethod
    def from_records(cls, records: Iterable[Capability | Mapping[str, Any]]) -> "CapabilityStore":
        """Build a store from capabilities or ``{"slug": ...}`` mappings."""
        return cls(Capability.from_record(record) for record in records)

    def exists(self, slug: str) -> bool:
        return slug in self._by_slug

    def get(self, slug: str) -> Capability | None:
        """Return the capability for *slug*, or ``None`` when unknown."""
        return self._by_slug.get(slug)

    @property
    def slugs(self) -> frozenset[str]:
        return frozenset(self._by_slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def __iter__(self) -> Iterator[Capability]:
        return iter(self._by_slug.values())

    def __len__(self) -> int:
        return len(self._by_slug)

    def __repr__(self) -> str:
        return f"CapabilityStore({sorted(self._by_slug)!r})"


__all__ = ["CapabilityLookup", "CapabilityStore"]
