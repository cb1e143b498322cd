"""
Tests for the pagination calculator.

Tests cover:
- Page/limit parsing and clamping
- Unpaginated escape hatch (absent or non-positive limit)
- Metadata invariants
- Envelope wire shape
"""

import math

import pytest

from jobportal.aggregation.pagination import (
    MAX_LIMIT,
    MAX_PAGE,
    PaginatedEnvelope,
    PaginationParams,
    build_envelope,
    coerce_int,
    compute_metadata,
    compute_params,
)


class TestCoerceInt:
    """Tests for lenient integer parsing"""

    @pytest.mark.parametrize("raw, expected", [
        (3, 3),
        ("7", 7),
        (" 12 ", 12),
        ("3abc", 3),
        ("-2", -2),
        (4.9, 4),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
        ([2], None),
        (float("nan"), None),
    ])
    def test_coerce(self, raw, expected):
        assert coerce_int(raw) == expected


class TestComputeParams:
    """Tests for turning page/limit into offset/limit"""

    def test_no_limit_disables_pagination(self):
        assert compute_params({}) == PaginationParams(limit=None, offset=None, current_page=1, is_paginated=False)

    @pytest.mark.parametrize("limit", [0, -5, "0", "-1", "abc", None])
    def test_non_positive_or_invalid_limit_disables_pagination(self, limit):
        params = compute_params({"page": 3, "limit": limit})

        assert params.is_paginated is False
        assert params.limit is None
        assert params.offset is None
        assert params.current_page == 1

    def test_offset_from_page_and_limit(self):
        params = compute_params({"page": 3, "limit": 10})

        assert params == PaginationParams(limit=10, offset=20, current_page=3, is_paginated=True)

    def test_string_values_are_parsed(self):
        params = compute_params({"page": "2", "limit": "5"})

        assert params.limit == 5
        assert params.offset == 5
        assert params.current_page == 2

    def test_missing_page_defaults_to_first(self):
        params = compute_params({"limit": 25})

        assert params.current_page == 1
        assert params.offset == 0

    @pytest.mark.parametrize("page", [0, -3, "-1", "abc", None])
    def test_invalid_page_clamps_to_first(self, page):
        params = compute_params({"page": page, "limit": 4})

        assert params.current_page == 1
        assert params.offset == 0

    @pytest.mark.parametrize("page, limit", [
        (10 ** 20, 10),
        ("99999999999999999999999", "5"),
        (2, 10 ** 30),
        (10 ** 20, 10 ** 20),
    ])
    def test_huge_values_are_clamped(self, page, limit):
        params = compute_params({"page": page, "limit": limit})

        assert params.current_page <= MAX_PAGE
        assert params.limit <= MAX_LIMIT
        assert 0 <= params.offset < 2 ** 63 - 1

    def test_limit_is_capped(self):
        params = compute_params({"page": 2, "limit": MAX_LIMIT + 1})

        assert params.limit == MAX_LIMIT
        assert params.offset == MAX_LIMIT

    @pytest.mark.parametrize("page", range(1, 8))
    @pytest.mark.parametrize("limit", [1, 2, 5, 10])
    def test_offset_formula(self, page, limit):
        params = compute_params({"page": page, "limit": limit})

        assert params.offset == (page - 1) * limit


class TestComputeMetadata:
    """Tests for the pagination metadata block"""

    def test_no_limit_returns_no_metadata(self):
        assert compute_metadata(42, None, 1) is None

    def test_first_of_three_pages(self):
        meta = compute_metadata(5, 2, 1)

        assert meta.total_items == 5
        assert meta.total_pages == 3
        assert meta.current_page == 1
        assert meta.next_page == 2
        assert meta.prev_page is None
        assert meta.has_next_page is True
        assert meta.has_previous_page is False

    def test_last_page(self):
        meta = compute_metadata(5, 2, 3)

        assert meta.has_next_page is False
        assert meta.next_page is None
        assert meta.prev_page == 2

    def test_zero_items(self):
        meta = compute_metadata(0, 10, 1)

        assert meta.total_pages == 0
        assert meta.current_page == 1
        assert meta.has_next_page is False
        assert meta.has_previous_page is False

    def test_page_beyond_range_still_has_metadata(self):
        meta = compute_metadata(5, 2, 7)

        assert meta.total_pages == 3
        assert meta.current_page == 7
        assert meta.has_next_page is False
        assert meta.has_previous_page is True
        assert meta.prev_page == 6

    def test_invariants_hold(self):
        for total in range(0, 15):
            for limit in range(1, 6):
                for page in range(1, 6):
                    meta = compute_metadata(total, limit, page)
                    assert meta.total_pages == math.ceil(total / limit)
                    assert meta.has_next_page == (page < meta.total_pages)
                    assert meta.has_previous_page == (page > 1)
                    assert meta.next_page == (page + 1 if meta.has_next_page else None)
                    assert meta.prev_page == (page - 1 if meta.has_previous_page else None)


class TestEnvelope:
    """Tests for the response envelope"""

    def test_unpaginated_envelope_has_no_pagination_key(self):
        params = compute_params({})
        envelope = build_envelope(["a", "b", "c"], 3, params)

        assert envelope.is_paginated is False
        assert envelope.to_dict() == {"records": ["a", "b", "c"]}

    def test_paginated_envelope_uses_camel_case_keys(self):
        params = compute_params({"page": 2, "limit": 2})
        envelope = build_envelope(["c", "d"], 5, params)

        assert envelope.to_dict() == {
            "records": ["c", "d"],
            "pagination": {
                "totalItems": 5,
                "totalPages": 3,
                "currentPage": 2,
                "nextPage": 3,
                "prevPage": 1,
                "hasNextPage": True,
                "hasPreviousPage": True,
            },
        }

    def test_default_envelope_is_unpaginated(self):
        assert PaginatedEnvelope(records=[]).pagination is None
