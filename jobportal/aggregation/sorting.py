"""
Sort compiler.

Only one sort key per call is supported; multi-key ordering is a known limitation.
"""

import enum
from dataclasses import dataclass
from typing import Any, Iterable, Optional

_DESCENDING = {"desc", "descending"}


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class OrderingDirective:
    field: str
    order: SortOrder = SortOrder.ASC

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESC


def normalize_order(requested_order: Any) -> SortOrder:
    """``desc``/``descending`` in any case is descending, everything else ascending."""
    if isinstance(requested_order, str) and requested_order.strip().lower() in _DESCENDING:
        return SortOrder.DESC
    return SortOrder.ASC


def compile_ordering(
    requested_field: Any,
    requested_order: Any,
    sortable_fields: Iterable[str],
) -> Optional[OrderingDirective]:
    """
    Validate the requested sort field against the allow-list.

    Returns None when no field was requested or it is not sortable, in which
    case the store's default order applies.
    """
    if not isinstance(requested_field, str) or requested_field not in set(sortable_fields):
        return None
    return OrderingDirective(requested_field, normalize_order(requested_order))
