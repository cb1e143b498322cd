"""
Aggregation orchestrator.

Composes pagination, filtering and ordering into one call to a caller-supplied
executor and reshapes its ``(total_count, rows)`` result into the paginated
envelope. The executor owns storage, relation loading, retries and timeouts.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Sequence, Tuple, Union

from jobportal.aggregation.filters import compile_predicate
from jobportal.aggregation.pagination import PaginatedEnvelope, build_envelope, compute_params
from jobportal.aggregation.predicates import FieldWhitelist, Predicate
from jobportal.aggregation.sorting import OrderingDirective, compile_ordering

logger = logging.getLogger(__name__)

ExecutorResult = Tuple[int, Sequence[Any]]
Executor = Callable[..., Union[ExecutorResult, Awaitable[ExecutorResult]]]


class AggregationError(RuntimeError):
    """Raised when the executor fails; the original exception is kept as ``cause``."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


def _unpack(result: Any) -> ExecutorResult:
    try:
        total, rows = result
    except (TypeError, ValueError):
        raise AggregationError(
            f"aggregation failed: executor returned {type(result).__name__}, expected (total_count, rows)"
        )
    if isinstance(total, bool) or not isinstance(total, int):
        raise AggregationError(f"aggregation failed: executor returned a non-integer total count {total!r}")
    return total, rows


async def aggregate(
    executor: Executor,
    request: Mapping[str, Any],
    whitelist: FieldWhitelist,
    relations: Sequence[Any] = (),
) -> PaginatedEnvelope:
    """
    Run one listing query.

    Args:
        executor: ``(predicate, ordering, relations, limit=..., offset=...) -> (total_count, rows)``.
            May be sync or async. ``limit``/``offset`` are only passed for paginated requests,
            otherwise the executor must return the full matching set.
        request: Free-form request payload
        whitelist: Fields the call site allows to filter, search and sort on
        relations: Store-specific relation descriptors, forwarded to the executor untouched

    Returns:
        PaginatedEnvelope with records and, for paginated requests, metadata

    Raises:
        AggregationError: If the executor fails or returns something malformed
    """
    params = compute_params(request)
    predicate: Predicate = compile_predicate(request, whitelist)
    ordering: Optional[OrderingDirective] = compile_ordering(
        request.get("sortBy"), request.get("sortOrder"), whitelist.sortable_fields
    )

    logger.debug(
        f"Aggregating with predicate={predicate!r} ordering={ordering!r} "
        f"limit={params.limit} offset={params.offset}"
    )

    kwargs = {}
    if params.is_paginated:
        kwargs = {"limit": params.limit, "offset": params.offset}

    try:
        result = executor(predicate, ordering, tuple(relations), **kwargs)
        if inspect.isawaitable(result):
            result = await result
    except AggregationError:
        raise
    except Exception as e:
        logger.error(f"Aggregation executor failed: {e}")
        raise AggregationError(f"aggregation failed: {e}", cause=e) from e

    total_items, rows = _unpack(result)
    return build_envelope(rows, total_items, params)
