"""
Field whitelists and the storage-neutral predicate tree.

The filter compiler produces these nodes; executor adapters translate them into
their own query language. Nodes are frozen dataclasses so two compilations of
equivalent requests compare equal.
"""

import enum
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, FrozenSet, Iterable, Tuple, Union

RANGE_FROM_SUFFIX = "_from"
RANGE_TO_SUFFIX = "_to"

PAGINATION_KEYS = ("page", "limit")
SORT_KEYS = ("sortBy", "sortOrder")
SEARCH_KEY = "search"


def _as_tuple(names: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(names, str):
        return (names,)
    return tuple(dict.fromkeys(names))


@dataclass(frozen=True)
class FieldWhitelist:
    """
    Declares which request keys a listing call site honours.

    Any request key that is not covered here (or reserved) never reaches the
    query. A field may be filtered by equality or by range, never both.
    """
    equality_fields: Tuple[str, ...] = ()
    range_fields: Tuple[str, ...] = ()
    searchable_fields: Tuple[str, ...] = ()
    sortable_fields: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in ("equality_fields", "range_fields", "searchable_fields", "sortable_fields"):
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))

        overlap = set(self.equality_fields) & set(self.range_fields)
        if overlap:
            raise ValueError(
                f"Fields cannot be both equality and range filters: {', '.join(sorted(overlap))}"
            )

    def range_keys(self, name: str) -> Tuple[str, str]:
        return f"{name}{RANGE_FROM_SUFFIX}", f"{name}{RANGE_TO_SUFFIX}"

    def reserved_keys(self) -> FrozenSet[str]:
        """Request keys consumed by pagination, sorting, search and range bounds."""
        keys = set(PAGINATION_KEYS) | set(SORT_KEYS) | {SEARCH_KEY}
        for name in self.range_fields:
            keys.update(self.range_keys(name))
        return frozenset(keys)


@dataclass(frozen=True)
class Equals:
    """
    ``field == value``.

    A list, tuple or set value means membership (an empty one matches nothing);
    ``None`` means the field is null.
    """
    field: str
    value: Any


@dataclass(frozen=True)
class Between:
    """Inclusive range ``low <= field <= high``."""
    field: str
    low: Any
    high: Any


@dataclass(frozen=True)
class AnyContains:
    """Case-insensitive substring match of ``term`` against at least one of ``fields``."""
    fields: Tuple[str, ...]
    term: str


@dataclass(frozen=True)
class And:
    clauses: Tuple["Predicate", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Or:
    clauses: Tuple["Predicate", ...] = field(default_factory=tuple)


Predicate = Union[Equals, Between, AnyContains, And, Or]

MATCH_ALL = And()


def is_membership(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))



_SCALAR_TYPES = (str, int, float, Decimal, date, enum.Enum)


def is_scalar(value: Any) -> bool:
    """Plain values a filter can compare against; mappings and nested lists are not."""
    return value is None or isinstance(value, _SCALAR_TYPES)


def is_filter_value(value: Any) -> bool:
    """A scalar, or a membership collection of scalars."""
    if is_membership(value):
        return all(is_scalar(item) for item in value)
    return is_scalar(value)
