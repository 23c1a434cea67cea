"""Application provider – FeatureProvider, owner of the current store."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ContextManager

from flagquery.application.provider.context import FeatureContext
from flagquery.config import FlagQuerySettings
from flagquery.kernel.capabilities import Capability, CapabilityStore
from flagquery.kernel.query import FlagQuery, QueryEvaluator
from flagquery.observability.logging import get_logger

_log = get_logger(__name__)

CapabilityRecord = Capability | Mapping[str, Any]


class FeatureProvider:
    """Hold the :class:`CapabilityStore` built from a capability list.

    :meth:`update` rebuilds the store only when the list actually changed;
    an equal list (compared by content, so a list edited in place counts as
    changed) keeps the very same store object. Duplicate slugs are logged as
    warnings; the last one wins. A rebuilt store replaces the old one in a
    single reference swap, so evaluators that already captured the old store
    keep a consistent view.

    Example::

        provider = FeatureProvider([{"slug": "beta"}])
        with provider.activate():
            assert use_flag("beta")
    """

    def __init__(
        self,
        features: Iterable[CapabilityRecord] = (),
        *,
        reject_duplicate_keys: bool = True,
    ) -> None:
        self._reject_duplicate_keys = reject_duplicate_keys
        self._fingerprint: list[dict[str, Any]] | None = None
        self._store = CapabilityStore()
        self.update(features)

    @classmethod
    def from_settings(
        cls, features: Iterable[CapabilityRecord], settings: FlagQuerySettings
    ) -> "FeatureProvider":
        """Build a provider honouring *settings*."""
        return cls(features, reject_duplicate_keys=settings.reject_duplicate_keys)

    @property
    def store(self) -> CapabilityStore:
        return self._store

    def update(self, features: Iterable[CapabilityRecord]) -> CapabilityStore:
        """Point the provider at *features*; return the (possibly reused) store."""
        capabilities = [Capability.from_record(record) for record in features]
        fingerprint = [capability.to_dict() for capability in capabilities]
        if fingerprint == self._fingerprint:
            _log.debug("feature_provider.store_reused", size=len(self._store))
            return self._store

        seen: set[str] = set()
        for capability in capabilities:
            if capability.slug in seen:
                _log.warning("feature_provider.duplicate_slug", slug=capability.slug)
            seen.add(capability.slug)

        self._store = CapabilityStore(capabilities)
        self._fingerprint = fingerprint
        _log.debug("feature_provider.store_replaced", size=len(self._store))
        return self._store

    def evaluator(self) -> QueryEvaluator:
        """Return an evaluator bound to the store current at call time."""
        return QueryEvaluator(self._store, reject_duplicates=self._reject_duplicate_keys)

    def use_feature(self, slug: str) -> Capability | None:
        return self._store.get(slug)

    def use_flag(self, query: FlagQuery | Any) -> bool:
        return self.evaluator().evaluate(query)

    def use_flag_query(self) -> QueryEvaluator:
        return self.evaluator()

    def activate(self) -> ContextManager["FeatureProvider"]:
        """Make this provider the ambient one for a ``with`` block."""
        return FeatureContext.scoped(self)

    def __repr__(self) -> str:
        return f"FeatureProvider(store={self._store!r})"


__all__ = ["CapabilityRecord", "FeatureProvider"]
