"""Kernel query – FlagQuery nodes, parser and evaluator."""
from flagquery.kernel.query.evaluator import QueryEvaluator, evaluate
from flagquery.kernel.query.nodes import Clause, FlagQuery, Literal, RawFlagQuery, Sequence
from flagquery.kernel.query.ops import RESERVED_PREFIX, Op
from flagquery.kernel.query.parser import parse_json, parse_query

__all__ = [
    "Clause",
    "FlagQuery",
    "Literal",
    "Op",
    "QueryEvaluator",
    "RESERVED_PREFIX",
    "RawFlagQuery",
    "Sequence",
    "evaluate",
    "parse_json",
    "parse_query",
]
