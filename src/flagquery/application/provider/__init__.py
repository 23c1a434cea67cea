"""Application provider – store ownership, ambient context and gates."""
from flagquery.application.provider.context import FeatureContext
from flagquery.application.provider.gates import flag_required, when_flag, with_feature
from flagquery.application.provider.hooks import feature_scope, use_feature, use_flag, use_flag_query
from flagquery.application.provider.provider import CapabilityRecord, FeatureProvider

__all__ = [
    "CapabilityRecord",
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
