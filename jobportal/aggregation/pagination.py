"""
Pagination calculator.

Turns the ``page``/``limit`` keys of a listing request into an offset/limit pair,
and a total count back into the pagination metadata block of the response.

An absent, zero or negative ``limit`` disables pagination: the whole matching
set is returned and the envelope carries no ``pagination`` key. Admin and export
style calls rely on this.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Upper clamps; keep (MAX_PAGE - 1) * MAX_LIMIT well inside a signed 64-bit offset
MAX_LIMIT = 10_000
MAX_PAGE = 1_000_000_000


def coerce_int(value: Any) -> Optional[int]:
    """
    Parse an integer the lenient way query strings and JSON bodies need.

    Ints pass through, floats truncate, strings are read from their leading
    digits (``"3abc"`` -> 3). Anything else, booleans included, is ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


@dataclass(frozen=True)
class PaginationParams:
    limit: Optional[int]
    offset: Optional[int]
    current_page: int
    is_paginated: bool


@dataclass(frozen=True)
class PaginationMetadata:
    total_items: int
    total_pages: int
    current_page: int
    next_page: Optional[int]
    prev_page: Optional[int]
    has_next_page: bool
    has_previous_page: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalItems": self.total_items,
            "totalPages": self.total_pages,
            "currentPage": self.current_page,
            "nextPage": self.next_page,
            "prevPage": self.prev_page,
            "hasNextPage": self.has_next_page,
            "hasPreviousPage": self.has_previous_page,
        }


@dataclass(frozen=True)
class PaginatedEnvelope:
    """Uniform listing response. ``pagination`` is set iff the request was paginated."""
    records: List[Any]
    pagination: Optional[PaginationMetadata] = None

    @property
    def is_paginated(self) -> bool:
        return self.pagination is not None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"records": list(self.records)}
        if self.pagination is not None:
            body["pagination"] = self.pagination.to_dict()
        return body


def compute_params(request: Mapping[str, Any]) -> PaginationParams:
    """
    Calculate pagination parameters from a listing request.

    Args:
        request: Incoming payload; only ``page`` and ``limit`` are read

    Returns:
        PaginationParams. ``page`` defaults to 1 and is clamped to
        ``[1, MAX_PAGE]``, ``limit`` is capped at ``MAX_LIMIT``; when
        ``limit`` is absent or <= 0, ``is_paginated`` is False and both
        ``limit`` and ``offset`` are None.
    """
    page = coerce_int(request.get("page")) or 1
    page = min(max(page, 1), MAX_PAGE)

    limit = coerce_int(request.get("limit"))
    if limit is None or limit <= 0:
        return PaginationParams(limit=None, offset=None, current_page=1, is_paginated=False)
    limit = min(limit, MAX_LIMIT)

    return PaginationParams(
        limit=limit,
        offset=(page - 1) * limit,
        current_page=page,
        is_paginated=True,
    )


def compute_metadata(total_items: int, limit: Optional[int], current_page: int) -> Optional[PaginationMetadata]:
    """
    Build the pagination block for a result set.

    Returns None when ``limit`` is None (no pagination requested). A page past
    the end still gets metadata, with ``has_next_page`` False.
    """
    if limit is None:
        return None

    total_pages = math.ceil(total_items / limit)
    has_next_page = current_page < total_pages
    has_previous_page = current_page > 1

    return PaginationMetadata(
        total_items=total_items,
        total_pages=total_pages,
        current_page=current_page,
        next_page=current_page + 1 if has_next_page else None,
        prev_page=current_page - 1 if has_previous_page else None,
        has_next_page=has_next_page,
        has_previous_page=has_previous_page,
    )


def build_envelope(records: Sequence[Any], total_items: int, params: PaginationParams) -> PaginatedEnvelope:
    return PaginatedEnvelope(
        records=list(records),
        pagination=compute_metadata(total_items, params.limit, params.current_page),
    )
