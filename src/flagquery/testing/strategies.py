"""Testing – Hypothesis strategies for capabilities and flag queries.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "flagquery[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

    from flagquery.kernel.capabilities import Capability


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_SLUG_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789-_"


def slug_strategy(pool: list[str] | None = None) -> "SearchStrategy[str]":
    """Strategy drawing capability slugs.

    With *pool*, slugs are sampled from it, which keeps generated queries
    hitting a known store; otherwise short random slugs are generated (never
    starting with the reserved ``$``).
    """
    st = _require_hypothesis()
    if pool:
        return st.sampled_from(pool)
    return st.text(alphabet=_SLUG_ALPHABET, min_size=1, max_size=12)


def capability_strategy(pool: list[str] | None = None) -> "SearchStrategy[Capability]":
    """Strategy drawing :class:`Capability` values with small JSON-ish settings."""
    from flagquery.kernel.capabilities import Capability

    st = _require_hypothesis()
    settings = st.dictionaries(
        st.text(alphabet=_SLUG_ALPHABET, min_size=1, max_size=8),
        st.one_of(st.booleans(), st.integers(), st.text(max_size=8)),
        max_size=3,
    )
    return st.builds(Capability, slug=slug_strategy(pool), settings=settings)


def flag_query_strategy(
    pool: list[str] | None = None,
    *,
    max_leaves: int = 12,
) -> "SearchStrategy[Any]":
    """Strategy drawing flag queries in their JSON-compatible authoring shape.

    Example::

        @given(flag_query_strategy(["a", "b", "c"]))
        def test_parse_roundtrip(raw):
            assert parse_query(parse_query(raw).to_raw()) == parse_query(raw)
    """
    st = _require_hypothesis()
    slugs = slug_strategy(pool)

    def extend(children: Any) -> Any:
        clauses = st.fixed_dictionaries(
            {},
            optional={
                "$or": st.lists(children, max_size=3),
                "$and": st.lists(children, max_size=3),
            },
        )
        equalities = st.dictionaries(slugs, st.booleans(), max_size=3)
        clause = st.builds(lambda eq, ops: {**eq, **ops}, equalities, clauses)
        return st.one_of(st.lists(children, max_size=3), clause)

    return st.recursive(slugs, extend, max_leaves=max_leaves)


__all__ = ["capability_strategy", "flag_query_strategy", "slug_strategy"]
