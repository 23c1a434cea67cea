"""
flagquery – capability lookup and boolean flag-query evaluation.

Import path convention::

    from flagquery import CapabilityStore, evaluate, Op
    from flagquery.kernel.errors import InvalidOperatorError
    from flagquery.application import FeatureProvider, use_flag
    from flagquery.config import load_settings
"""

from flagquery.application import (
    FeatureProvider,
    feature_scope,
    flag_required,
    use_feature,
    use_flag,
    use_flag_query,
    when_flag,
    with_feature,
)
from flagquery.kernel import (
    Capability,
    CapabilityStore,
    Clause,
    FlagQuery,
    InvalidOperatorError,
    InvalidQueryError,
    Literal,
    NoProviderError,
    Op,
    QueryEvaluator,
    Sequence,
    evaluate,
    parse_json,
    parse_query,
)

__version__ = "0.1.0"
__all__ = [
    "Capability",
    "CapabilityStore",
    "Clause",
    "FeatureProvider",
    "FlagQuery",
    "InvalidOperatorError",
    "InvalidQueryError",
    "Literal",
    "NoProviderError",
    "Op",
    "QueryEvaluator",
    "Sequence",
    "__version__",
    "evaluate",
    "feature_scope",
    "flag_required",
    "parse_json",
    "parse_query",
    "use_feature",
    "use_flag",
    "use_flag_query",
    "when_flag",
    "with_feature",
]
