"""
Tests for the in-memory executor.
"""

from types import SimpleNamespace

from jobportal.aggregation import MATCH_ALL, And, AnyContains, Between, Equals, Or, OrderingDirective, SortOrder
from jobportal.aggregation.memory_executor import MemoryExecutor, matches, resolve

ROWS = [
    {"id": 1, "name": "Alice", "city": "Berlin", "salary": 90, "employer": {"name": "Acme"}, "tags": [{"label": "python"}]},
    {"id": 2, "name": "bob", "city": None, "salary": 50, "employer": {"name": "Globex"}, "tags": []},
    {"id": 3, "name": "Carol", "city": "Paris", "salary": None, "employer": None, "tags": [{"label": "design"}]},
]


class TestMatching:
    """Tests for predicate evaluation"""

    def test_match_all(self):
        assert all(matches(row, MATCH_ALL) for row in ROWS)

    def test_empty_or_matches_nothing(self):
        assert not any(matches(row, Or()) for row in ROWS)

    def test_equality_and_membership(self):
        assert [r["id"] for r in ROWS if matches(r, Equals("city", "Berlin"))] == [1]
        assert [r["id"] for r in ROWS if matches(r, Equals("id", [1, 3]))] == [1, 3]
        assert [r["id"] for r in ROWS if matches(r, Equals("id", []))] == []

    def test_equality_with_none_matches_null(self):
        assert [r["id"] for r in ROWS if matches(r, Equals("city", None))] == [2]

    def test_between_is_inclusive_and_skips_null(self):
        assert [r["id"] for r in ROWS if matches(r, Between("salary", 50, 90))] == [1, 2]

    def test_between_with_incomparable_bounds_matches_nothing(self):
        assert not any(matches(row, Between("salary", "a", "z")) for row in ROWS)

    def test_contains_is_case_insensitive(self):
        predicate = AnyContains(("name",), "BO")

        assert [r["id"] for r in ROWS if matches(r, predicate)] == [2]

    def test_contains_over_several_fields(self):
        predicate = AnyContains(("name", "city"), "ar")

        assert [r["id"] for r in ROWS if matches(r, predicate)] == [3]

    def test_dotted_paths_through_objects_and_lists(self):
        assert [r["id"] for r in ROWS if matches(r, AnyContains(("employer.name",), "glob"))] == [2]
        assert [r["id"] for r in ROWS if matches(r, Equals("tags.label", "design"))] == [3]

    def test_resolve_works_on_plain_objects(self):
        row = SimpleNamespace(employer=SimpleNamespace(name="Acme"))

        assert resolve(row, "employer.name") == ["Acme"]
        assert resolve(row, "employer.missing") == []

    def test_nested_and_or(self):
        predicate = And((Or((Equals("city", "Berlin"), Equals("city", "Paris"))), Between("salary", 0, 100)))

        assert [r["id"] for r in ROWS if matches(r, predicate)] == [1]


class TestMemoryExecutor:
    """Tests for counting, ordering and slicing"""

    def test_returns_total_and_all_rows_without_limit(self):
        total, rows = MemoryExecutor(ROWS)(MATCH_ALL, None, ())

        assert total == 3
        assert rows == ROWS

    def test_slices_with_limit_and_offset(self):
        total, rows = MemoryExecutor(ROWS)(MATCH_ALL, None, (), limit=1, offset=1)

        assert total == 3
        assert [r["id"] for r in rows] == [2]

    def test_ascending_sort_puts_none_first(self):
        _, rows = MemoryExecutor(ROWS)(MATCH_ALL, OrderingDirective("salary", SortOrder.ASC), ())

        assert [r["id"] for r in rows] == [3, 2, 1]

    def test_descending_sort(self):
        _, rows = MemoryExecutor(ROWS)(MATCH_ALL, OrderingDirective("salary", SortOrder.DESC), ())

        assert [r["id"] for r in rows] == [1, 2, 3]

    def test_source_rows_are_not_reordered(self):
        executor = MemoryExecutor(ROWS)
        executor(MATCH_ALL, OrderingDirective("salary", SortOrder.DESC), ())

        assert [r["id"] for r in executor.rows] == [1, 2, 3]
