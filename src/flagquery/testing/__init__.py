"""Testing – fakes and Hypothesis strategies for code that uses flagquery."""
from flagquery.testing.fakes import SpyCapabilityStore
from flagquery.testing.strategies import capability_strategy, flag_query_strategy, slug_strategy

__all__ = [
    "SpyCapabilityStore",
    "capability_strategy",
    "flag_query_strategy",
    "slug_strategy",
]
