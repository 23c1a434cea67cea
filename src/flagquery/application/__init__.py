"""Application – provider glue between callers and the evaluator."""

from flagquery.application.provider import (
    FeatureContext,
    FeatureProvider,
    feature_scope,
    flag_required,
    use_feature,
    use_flag,
    use_flag_query,
    when_flag,
    with_feature,
)

__all__ = [
    "FeatureContext",
    "FeatureProvider",
    "feature_scope",
    "flag_required",
    "use_feature",
    "use_flag",
    "use_flag_query",
    "when_flag",
    "with_feature",
]
