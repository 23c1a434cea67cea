"""Kernel query – FlagQuery node types.

A flag query is one of three frozen node types:

* :class:`Literal`: satisfied when the capability exists;
* :class:`Sequence`: every item must be satisfied (empty is true);
* :class:`Clause`: equality entries, an optional OR branch list and an
  optional AND branch list, all of which must hold.

Children may be given in the JSON-compatible authoring shape; they are
parsed into nodes on construction.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from flagquery.kernel.errors import InvalidOperatorError, InvalidQueryError
from flagquery.kernel.query.ops import Op, is_reserved


def check_equality(key: Any, required: Any, path: tuple[Any, ...] = ()) -> tuple[str, bool]:
    """Return *key* and *required* as an equality entry, or raise.

    An equality entry pairs a slug (a string outside the reserved ``$``
    namespace) with a ``bool``; any other key or value is an invalid operator.
    """
    if isinstance(key, str) and not is_reserved(key) and isinstance(required, bool):
        return key, required
    raise InvalidOperatorError(key, path=path)


def _coerce_children(items: Iterable[Any]) -> tuple["FlagQuery", ...]:
    from flagquery.kernel.query.parser import parse_query

    return tuple(parse_query(item) for item in items)


class _Node:
    """Combinator overloads shared by every node type."""

    def __and__(self, other: Any) -> "Clause":
        return Clause(all_of=(self, other))

    def __or__(self, other: Any) -> "Clause":
        return Clause(any_of=(self, other))

    def to_raw(self) -> Any:
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class Literal(_Node):
    slug: str

    def __post_init__(self) -> None:
        if not isinstance(self.slug, str):
            raise InvalidQueryError(f"Literal slug must be a string, got {self.slug!r}")

    def to_raw(self) -> str:
        return self.slug


@dataclasses.dataclass(frozen=True)
class Sequence(_Node):
    items: tuple["FlagQuery", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _coerce_children(self.items))

    def to_raw(self) -> list[Any]:
        return [item.to_raw() for item in self.items]


@dataclasses.dataclass(frozen=True)
class Clause(_Node):
    """Conjunction of equality entries and OR / AND branch lists.

    ``any_of`` / ``all_of`` are ``None`` when the clause has no such entry;
    an empty tuple is an entry with no branches (``$or: []`` never holds,
    ``$and: []`` always holds).
    """

    equalities: tuple[tuple[str, bool], ...] = ()
    any_of: tuple["FlagQuery", ...] | None = None
    all_of: tuple["FlagQuery", ...] | None = None

    def __post_init__(self) -> None:
        equalities = self.equalities
        if isinstance(equalities, Mapping):
            equalities = equalities.items()
        object.__setattr__(
            self, "equalities", tuple(check_equality(slug, required) for slug, required in equalities)
        )
        if self.any_of is not None:
            object.__setattr__(self, "any_of", _coerce_children(self.any_of))
        if self.all_of is not None:
            object.__setattr__(self, "all_of", _coerce_children(self.all_of))

    def to_raw(self) -> dict[str, Any]:
        raw: dict[str, Any] = dict(self.equalities)
        if self.any_of is not None:
            raw[Op.OR.value] = [q.to_raw() for q in self.any_of]
        if self.all_of is not None:
            raw[Op.AND.value] = [q.to_raw() for q in self.all_of]
        return raw


FlagQuery: TypeAlias = Literal | Sequence | Clause
RawFlagQuery: TypeAlias = str | list[Any] | tuple[Any, ...] | Mapping[Any, Any]

NODE_TYPES: tuple[type, ...] = (Literal, Sequence, Clause)


__all__ = ["Clause", "FlagQuery", "Literal", "NODE_TYPES", "RawFlagQuery", "Sequence"]
