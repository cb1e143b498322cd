"""
In-process executor for ``aggregate()``.

Evaluates the predicate tree against rows that are already in memory: mappings
or plain objects. Matching follows the SQL adapter (case-insensitive contains,
list membership, dotted paths through related objects or lists of them).
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from jobportal.aggregation.predicates import (
    And,
    AnyContains,
    Between,
    Equals,
    Or,
    Predicate,
    is_membership,
)
from jobportal.aggregation.sorting import OrderingDirective

_MISSING = object()


def _get(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name, _MISSING)
    return getattr(item, name, _MISSING)


def resolve(row: Any, path: str) -> List[Any]:
    """All values reachable from ``row`` along a dotted path; lists fan out."""
    values = [row]
    for name in path.split("."):
        step = []
        for value in values:
            if value is None or value is _MISSING:
                continue
            found = _get(value, name)
            if isinstance(found, (list, tuple)):
                step.extend(found)
            else:
                step.append(found)
        values = step
    return [value for value in values if value is not _MISSING]


def _between(value: Any, low: Any, high: Any) -> bool:
    if value is None:
        return False
    try:
        return low <= value <= high
    except TypeError:
        return False


def _contains(value: Any, term: str) -> bool:
    if value is None:
        return False
    return term.casefold() in str(value).casefold()


def matches(row: Any, predicate: Predicate) -> bool:
    if isinstance(predicate, And):
        return all(matches(row, clause) for clause in predicate.clauses)
    if isinstance(predicate, Or):
        return any(matches(row, clause) for clause in predicate.clauses)
    if isinstance(predicate, Equals):
        values = resolve(row, predicate.field)
        if predicate.value is None:
            return not values or any(value is None for value in values)
        if is_membership(predicate.value):
            return any(value in predicate.value for value in values)
        return any(value == predicate.value for value in values)
    if isinstance(predicate, Between):
        return any(_between(value, predicate.low, predicate.high) for value in resolve(row, predicate.field))
    if isinstance(predicate, AnyContains):
        return any(
            _contains(value, predicate.term)
            for name in predicate.fields
            for value in resolve(row, name)
        )
    raise TypeError(f"Unsupported predicate node: {type(predicate).__name__}")


def _sort_key(field: str):
    def key(row):
        values = resolve(row, field)
        value = values[0] if values else None
        # None sorts before everything else when ascending
        return (value is not None, value)
    return key


class MemoryExecutor:
    """
    Executor over an in-memory collection.

    Relation descriptors are accepted and ignored; related data is expected to
    be reachable from the rows already.
    """

    def __init__(self, rows: Iterable[Any]):
        self.rows = list(rows)

    def __call__(
        self,
        predicate: Predicate,
        ordering: Optional[OrderingDirective],
        relations: Sequence[Any] = (),
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Tuple[int, List[Any]]:
        matched = [row for row in self.rows if matches(row, predicate)]
        if ordering is not None:
            matched.sort(key=_sort_key(ordering.field), reverse=ordering.descending)

        start = offset or 0
        end = start + limit if limit is not None else None
        return len(matched), matched[start:end]
