"""Property-based tests for the evaluator's algebraic laws (Hypothesis)."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from flagquery.kernel.capabilities import Capability, CapabilityStore
from flagquery.kernel.errors import InvalidOperatorError
from flagquery.kernel.query import Op, evaluate, parse_query
from flagquery.testing import flag_query_strategy, slug_strategy

POOL = ["a", "b", "c", "d", "e"]

stores = st.lists(st.sampled_from(POOL), unique=True).map(
    lambda slugs: CapabilityStore(Capability(slug=s) for s in slugs)
)
queries = flag_query_strategy(POOL)
slugs = st.one_of(slug_strategy(POOL), slug_strategy())


@given(stores, slugs)
def test_literal_matches_exists(store: CapabilityStore, slug: str) -> None:
    assert evaluate(store, slug) == store.exists(slug)


@given(stores)
def test_empty_forms(store: CapabilityStore) -> None:
    assert evaluate(store, []) is True
    assert evaluate(store, {Op.AND: []}) is True
    assert evaluate(store, {Op.OR: []}) is False


@given(stores, queries, queries)
def test_and_is_conjunction(store: CapabilityStore, q1: Any, q2: Any) -> None:
    assert evaluate(store, {Op.AND: [q1, q2]}) == (evaluate(store, q1) and evaluate(store, q2))


@given(stores, queries, queries)
def test_or_is_disjunction(store: CapabilityStore, q1: Any, q2: Any) -> None:
    assert evaluate(store, {Op.OR: [q1, q2]}) == (evaluate(store, q1) or evaluate(store, q2))


@given(stores, queries, queries)
def test_sequence_is_conjunction(store: CapabilityStore, q1: Any, q2: Any) -> None:
    assert evaluate(store, [q1, q2]) == (evaluate(store, q1) and evaluate(store, q2))


@given(stores, slugs, st.booleans())
def test_equality_entry(store: CapabilityStore, slug: str, required: bool) -> None:
    assert evaluate(store, {slug: required}) == (store.exists(slug) == required)


@given(stores, queries)
def test_raw_and_parsed_agree(store: CapabilityStore, raw: Any) -> None:
    node = parse_query(raw)
    assert evaluate(store, raw) == evaluate(store, node) == evaluate(store, node.to_raw())


@given(stores, queries)
def test_verdict_is_bool(store: CapabilityStore, raw: Any) -> None:
    assert isinstance(evaluate(store, raw), bool)


@given(stores, queries)
def test_unknown_operator_never_yields_a_verdict(store: CapabilityStore, raw: Any) -> None:
    with pytest.raises(InvalidOperatorError):
        evaluate(store, {Op.OR: [raw], "$xor": [raw]})


@given(stores, queries)
def test_branch_after_decisive_result_is_not_inspected(store: CapabilityStore, raw: Any) -> None:
    bad = {"$xor": []}
    if evaluate(store, raw):
        assert evaluate(store, {Op.OR: [raw, bad]}) is True
    else:
        assert evaluate(store, {Op.AND: [raw, bad]}) is False
