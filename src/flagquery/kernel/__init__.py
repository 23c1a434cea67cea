"""Kernel – capabilities, flag queries and the error hierarchy."""

from flagquery.kernel.capabilities import Capability, CapabilityLookup, CapabilityStore
from flagquery.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    DuplicateKeyError,
    DuplicateOperatorError,
    InvalidCapabilityError,
    InvalidOperatorError,
    InvalidQueryError,
    NoProviderError,
)
from flagquery.kernel.query import (
    Clause,
    FlagQuery,
    Literal,
    Op,
    QueryEvaluator,
    Sequence,
    evaluate,
    parse_json,
    parse_query,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "Capability",
    "CapabilityLookup",
    "CapabilityStore",
    "Clause",
    "DomainError",
    "DuplicateKeyError",
    "DuplicateOperatorError",
    "FlagQuery",
    "InvalidCapabilityError",
    "InvalidOperatorError",
    "InvalidQueryError",
    "Literal",
    "NoProviderError",
    "Op",
    "QueryEvaluator",
    "Sequence",
    "evaluate",
    "parse_json",
    "parse_query",
]
