"""Kernel query – recursive flag-query evaluation.

``evaluate`` is pure: it reads the store through ``exists`` only, never
mutates anything and keeps no state between calls, so any number of calls
may share one store.

Queries in authoring shape are read as evaluation reaches them. A malformed
entry raises only when it is visited; a branch skipped by short-circuiting
is never inspected. Use :func:`~flagquery.kernel.query.parser.parse_query`
to check a whole query up front.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from flagquery.kernel.capabilities.store import CapabilityLookup
from flagquery.kernel.errors import InvalidQueryError
from flagquery.kernel.query.nodes import Clause, FlagQuery, Literal, Sequence, check_equality
from flagquery.kernel.query.ops import Op
from flagquery.kernel.query.parser import ObjectPairs, branch_items, load_json, split_clause

# Operator entries run after the equality entries, OR before AND.
_FOLDS: tuple[tuple[Op, Callable[[Iterable[bool]], bool]], ...] = ((Op.OR, any), (Op.AND, all))


class _Evaluation:
    __slots__ = ("_store", "_reject_duplicates")

    def __init__(self, store: CapabilityLookup, *, reject_duplicates: bool = True) -> None:
        self._store = store
        self._reject_duplicates = reject_duplicates

    def run(self, query: Any, path: tuple[Any, ...] = ()) -> bool:
        match query:
            case Literal(slug=slug):
                return self._store.exists(slug)
            case Sequence(items=items):
                return all(self.run(item, path + (i,)) for i, item in enumerate(items))
            case Clause():
                branches = {Op.OR: query.any_of, Op.AND: query.all_of}
                return self._clause(
                    query.equalities,
                    {op: items for op, items in branches.items() if items is not None},
                    path,
                )
            case str():
                return self._store.exists(query)
            case ObjectPairs():
                equalities, operators = split_clause(
                    query, path, reject_duplicates=self._reject_duplicates
                )
                return self._clause(equalities, operators, path)
            case list() | tuple():
                return all(self.run(item, path + (i,)) for i, item in enumerate(query))
            case Mapping():
                return self._clause(*split_clause(query.items(), path), path)
        raise InvalidQueryError(
            f"Unsupported flag query value of type {type(query).__name__}: {query!r}",
            path=path,
        )

    def _clause(
        self,
        equalities: Iterable[tuple[Any, Any]],
        branches: Mapping[Op, Any],
        path: tuple[Any, ...],
    ) -> bool:
        for key, value in equalities:
            slug, required = check_equality(key, value, path)
            if self._store.exists(slug) != required:
                return False
        for op, fold in _FOLDS:
            if op not in branches:
                continue
            items = branch_items(op, branches[op], path)
            if not fold(self.run(item, path + (op.value, i)) for i, item in enumerate(items)):
                return False
        return True


def evaluate(store: CapabilityLookup, query: FlagQuery | Any) -> bool:
    """Return whether *query* is satisfied by the capabilities in *store*.

    *query* may be a node or the JSON-compatible authoring shape. A
    malformed entry that evaluation reaches raises
    :class:`~flagquery.kernel.errors.InvalidQueryError` (in particular
    :class:`~flagquery.kernel.errors.InvalidOperatorError`) and no verdict
    is produced.

    Example::

        evaluate(store, {"$or": ["beta", {"legacy": False}]})
    """
    return _Evaluation(store).run(query)


class QueryEvaluator:
    """Evaluate queries against one captured store.

    Holding the store reference for the evaluator's lifetime gives each
    caller a consistent snapshot even if the owner swaps in a new store.
    """

    __slots__ = ("_store", "_reject_duplicates")

    def __init__(self, store: CapabilityLookup, *, reject_duplicates: bool = True) -> None:
        self._store = store
        self._reject_duplicates = reject_duplicates

    @property
    def store(self) -> CapabilityLookup:
        return self._store

    def evaluate(self, query: FlagQuery | Any) -> bool:
        return evaluate(self._store, query)

    __call__ = evaluate

    def evaluate_json(self, text: str | bytes) -> bool:
        """Evaluate a query serialised as JSON text.

        A clause object repeating a key is rejected when the evaluator was
        built with ``reject_duplicates`` (see :func:`parse_json`); otherwise
        the last occurrence wins.
        """
        evaluation = _Evaluation(self._store, reject_duplicates=self._reject_duplicates)
        return evaluation.run(load_json(text))


__all__ = ["QueryEvaluator", "evaluate"]
