"""Application provider – accessors for the ambient provider.

Each accessor raises :class:`~flagquery.kernel.errors.NoProviderError` when
called outside a provider scope.
"""
from __future__ import annotations

import contextlib
from collections.abc import Iterable
from typing import Any, Iterator

from flagquery.application.provider.context import FeatureContext
from flagquery.application.provider.provider import CapabilityRecord, FeatureProvider
from flagquery.kernel.capabilities import Capability
from flagquery.kernel.query import FlagQuery, QueryEvaluator


def use_feature(slug: str) -> Capability | None:
    """Return the capability named *slug*, or ``None`` when it is not enabled."""
    return FeatureContext.require().use_feature(slug)


def use_flag(query: FlagQuery | Any) -> bool:
    return FeatureContext.require().use_flag(query)


def use_flag_query() -> QueryEvaluator:
    """Return an evaluator bound to the ambient store as it is right now."""
    return FeatureContext.require().use_flag_query()


@contextlib.contextmanager
def feature_scope(
    features: Iterable[CapabilityRecord],
    *,
    reject_duplicate_keys: bool = True,
) -> Iterator[FeatureProvider]:
    """Build a :class:`FeatureProvider` for *features* and make it ambient.

    Example::

        with feature_scope([{"slug": "beta"}]):
            assert use_flag({"$or": ["beta", "gamma"]})
    """
    provider = FeatureProvider(features, reject_duplicate_keys=reject_duplicate_keys)
    with provider.activate():
        yield provider


__all__ = ["feature_scope", "use_feature", "use_flag", "use_flag_query"]
