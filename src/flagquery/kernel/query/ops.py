"""Kernel query – reserved operator tokens."""
from __future__ import annotations

from enum import Enum

RESERVED_PREFIX = "$"


class Op(str, Enum):
    """Clause keys selecting a combinator instead of an equality test.

    Members compare equal to their string value, so ``{Op.OR: [...]}`` and
    ``{"$or": [...]}`` are the same clause.
    """

    OR = "$or"
    AND = "$and"

    def __str__(self) -> str:
        return self.value

    # Enum hashes by member name; equal objects must hash alike.
    def __hash__(self) -> int:
        return hash(self.value)


_BY_TOKEN: dict[str, Op] = {op.value: op for op in Op}


def as_operator(key: object) -> Op | None:
    """Return the :class:`Op` a clause key names, or ``None``."""
    if isinstance(key, Op):
        return key
    if isinstance(key, str):
        return _BY_TOKEN.get(key)
    return None


def is_reserved(key: str) -> bool:
    return key.startswith(RESERVED_PREFIX)


__all__ = ["Op", "RESERVED_PREFIX", "as_operator", "is_reserved"]
