"""
Generic data-aggregation engine.

Compiles a whitelist plus a free-form listing request into a predicate tree,
an ordering directive and pagination parameters, runs them through a
caller-supplied executor, and returns a uniform paginated envelope.
"""

from jobportal.aggregation.filters import compile_predicate
from jobportal.aggregation.orchestrator import AggregationError, aggregate
from jobportal.aggregation.pagination import (
    PaginatedEnvelope,
    PaginationMetadata,
    PaginationParams,
    build_envelope,
    compute_metadata,
    compute_params,
)
from jobportal.aggregation.predicates import (
    MATCH_ALL,
    And,
    AnyContains,
    Between,
    Equals,
    FieldWhitelist,
    Or,
)
from jobportal.aggregation.sorting import OrderingDirective, SortOrder, compile_ordering

__all__ = [
    "AggregationError",
    "And",
    "AnyContains",
    "Between",
    "Equals",
    "FieldWhitelist",
    "MATCH_ALL",
    "Or",
    "OrderingDirective",
    "PaginatedEnvelope",
    "PaginationMetadata",
    "PaginationParams",
    "SortOrder",
    "aggregate",
    "build_envelope",
    "compile_ordering",
    "compile_predicate",
    "compute_metadata",
    "compute_params",
]
