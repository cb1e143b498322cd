"""
Filter compiler.

Builds a predicate tree from a listing request and the call site's whitelist.
Only whitelisted fields are ever read from the request; everything else is
ignored, which is what keeps client-supplied keys out of the query.
"""

from typing import Any, List, Mapping

from jobportal.aggregation.predicates import (
    SEARCH_KEY,
    And,
    AnyContains,
    Between,
    Equals,
    FieldWhitelist,
    Predicate,
    is_filter_value,
    is_scalar,
)


def _search_term(request: Mapping[str, Any]):
    term = request.get(SEARCH_KEY)
    if isinstance(term, str) and term:
        return term
    return None


def compile_predicate(request: Mapping[str, Any], whitelist: FieldWhitelist) -> And:
    """
    Compile equality, range and search clauses into a single AND tree.

    - Equality: emitted whenever the key is present, falsy values included.
      Scalar values and lists of scalars are passed through unchanged; a
      structured value (an object, a nested list) is treated like an
      unrecognised key and dropped.
    - Range: emitted only when both ``<field>_from`` and ``<field>_to`` carry a
      scalar value. A one-sided or structured range yields no clause at all.
    - Search: a non-empty string ``search`` adds one OR over every searchable
      field. Empty or missing means no search clause.

    Never raises for request content; with nothing recognised the result is an
    empty AND, which matches everything.
    """
    clauses: List[Predicate] = []

    for name in whitelist.equality_fields:
        if name in request and is_filter_value(request[name]):
            clauses.append(Equals(name, request[name]))

    for name in whitelist.range_fields:
        from_key, to_key = whitelist.range_keys(name)
        low, high = request.get(from_key), request.get(to_key)
        if low is None or high is None or not (is_scalar(low) and is_scalar(high)):
            continue
        clauses.append(Between(name, low, high))

    term = _search_term(request)
    if term is not None and whitelist.searchable_fields:
        clauses.append(AnyContains(whitelist.searchable_fields, term))

    return And(tuple(clauses))
