"""Kernel query – parse the JSON-compatible authoring shape into nodes.

Authoring shape::

    "beta"                                   # Literal
    ["beta", "dark-mode"]                    # Sequence
    {"beta": True, "legacy": False,          # Clause: equality entries
     "$or": ["a", "b"], "$and": ["c", "d"]}  #         and operator entries

Clause keys are either capability slugs mapped to a ``bool`` or one of the
:class:`~flagquery.kernel.query.ops.Op` tokens mapped to a list. Anything
else raises :class:`~flagquery.kernel.errors.InvalidOperatorError`.
"""
from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from flagquery.kernel.errors import (
    DuplicateKeyError,
    DuplicateOperatorError,
    InvalidOperatorError,
    InvalidQueryError,
)
from flagquery.kernel.query.nodes import NODE_TYPES, Clause, FlagQuery, Literal, Sequence, check_equality
from flagquery.kernel.query.ops import Op, as_operator


class ObjectPairs(list):
    """Key/value pairs of a JSON object, duplicates preserved."""


def load_json(text: str | bytes) -> Any:
    """Decode JSON text, keeping every object as :class:`ObjectPairs`."""
    try:
        return json.loads(text, object_pairs_hook=ObjectPairs)
    except json.JSONDecodeError as exc:
        raise InvalidQueryError(f"Flag query is not valid JSON: {exc.msg}", cause=exc) from exc


def split_clause(
    pairs: Iterable[tuple[Any, Any]],
    path: tuple[Any, ...],
    *,
    reject_duplicates: bool = True,
) -> tuple[list[tuple[Any, Any]], dict[Op, Any]]:
    """Separate clause pairs into candidate equality entries and operator values.

    Only repeated keys are detected here; the entries themselves are checked
    with :func:`check_equality` and :func:`branch_items`.
    """
    others: dict[Any, Any] = {}
    branches: dict[Op, Any] = {}
    for key, value in pairs:
        op = as_operator(key)
        if op is not None:
            if op in branches and reject_duplicates:
                raise DuplicateOperatorError(op.value, path=path)
            branches[op] = value
        else:
            if key in others and reject_duplicates:
                raise DuplicateKeyError(key, path=path)
            others[key] = value
    return list(others.items()), branches


def branch_items(op: Op, value: Any, path: tuple[Any, ...]) -> list[Any] | tuple[Any, ...]:
    if isinstance(value, ObjectPairs) or not isinstance(value, (list, tuple)):
        raise InvalidOperatorError(
            op.value,
            f"Operator {op.value!r} expects a list of queries, got {type(value).__name__}",
            path=path,
        )
    return value


class _QueryParser:
    def __init__(self, *, reject_duplicates: bool = True) -> None:
        self._reject_duplicates = reject_duplicates

    def parse(self, raw: Any, path: tuple[Any, ...] = ()) -> FlagQuery:
        if isinstance(raw, NODE_TYPES):
            return raw  # type: ignore[return-value]
        if isinstance(raw, str):
            return Literal(raw)
        if isinstance(raw, ObjectPairs):
            return self._clause(raw, path)
        if isinstance(raw, (list, tuple)):
            return Sequence(tuple(self.parse(item, path + (i,)) for i, item in enumerate(raw)))
        if isinstance(raw, Mapping):
            return self._clause(raw.items(), path)
        raise InvalidQueryError(
            f"Unsupported flag query value of type {type(raw).__name__}: {raw!r}",
            path=path,
        )

    def _clause(self, pairs: Iterable[tuple[Any, Any]], path: tuple[Any, ...]) -> Clause:
        equalities, branches = split_clause(pairs, path, reject_duplicates=self._reject_duplicates)
        return Clause(
            equalities=tuple(check_equality(key, value, path) for key, value in equalities),
            any_of=self._branch(Op.OR, branches, path),
            all_of=self._branch(Op.AND, branches, path),
        )

    def _branch(
        self, op: Op, branches: dict[Op, Any], path: tuple[Any, ...]
    ) -> tuple[FlagQuery, ...] | None:
        if op not in branches:
            return None
        items = branch_items(op, branches[op], path)
        return tuple(self.parse(item, path + (op.value, i)) for i, item in enumerate(items))


_DEFAULT_PARSER = _QueryParser()


def parse_query(raw: Any, *, reject_duplicates: bool = True) -> FlagQuery:
    """Turn a query in authoring shape into a :class:`FlagQuery` node.

    The whole tree is checked, including branches that evaluation would
    skip. Nodes are returned unchanged. ``reject_duplicates`` only matters
    for clause objects produced by :func:`parse_json`; Python mappings cannot
    repeat a key.

    Raises:
        InvalidOperatorError: a clause key is neither an equality slug nor
            an operator token.
        InvalidQueryError: a value is not a string, list or mapping.
    """
    parser = _DEFAULT_PARSER if reject_duplicates else _QueryParser(reject_duplicates=False)
    return parser.parse(raw)


def parse_json(text: str | bytes, *, reject_duplicates: bool = True) -> FlagQuery:
    """Parse a query serialised as JSON text.

    JSON objects may repeat a key. With ``reject_duplicates`` (the default) a
    repeated operator token raises :class:`DuplicateOperatorError` and a
    repeated slug raises :class:`DuplicateKeyError`; otherwise the last
    occurrence wins.
    """
    return _QueryParser(reject_duplicates=reject_duplicates).parse(load_json(text))


__all__ = ["parse_json", "parse_query"]
