"""
SQLAlchemy adapter for the aggregation engine.

Translates the predicate tree and ordering into a ``select()`` on a mapped model
and runs the count and page fetch on a synchronous Session in the threadpool.

Dotted fields (``employer.cmp_name``) are resolved through a relationship with
EXISTS (``has()`` / ``any()``), so filtering on a related row never multiplies
base rows and the count stays correct.
"""

import enum
import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional, Sequence, Tuple, Union

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import and_, false, func, inspect, or_, select, true
from sqlalchemy.orm import Session, selectinload

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

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "y", "on"}
_FALSE_STRINGS = {"0", "false", "no", "n", "off"}


class UnknownFieldError(LookupError):
    """A whitelist or relation descriptor names something the model does not have."""


@dataclass(frozen=True)
class Include:
    """
    Eager-load a relationship of the base model.

    Args:
        relation: Relationship attribute name on the base model
        attributes: Column names of the related model to load (all when empty)
    """
    relation: str
    attributes: Tuple[str, ...] = ()


RelationDescriptor = Union[Include, str]


_MAX_INT = 2 ** 63 - 1


class _Uncoercible:
    def __repr__(self):
        return "UNCOERCIBLE"


# Marker for a filter value that can never equal anything stored in the column
UNCOERCIBLE = _Uncoercible()


def _is_date_only(text: str) -> bool:
    return "T" not in text and " " not in text and len(text) == 10


def _parse_string(python_type, text: str, upper_bound: bool):
    if python_type is bool:
        lowered = text.lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        return UNCOERCIBLE
    if python_type is int:
        return int(text)
    if python_type is float:
        return float(text.replace(",", "."))
    if python_type is Decimal:
        return Decimal(text.replace(",", "."))
    if python_type is datetime:
        if _is_date_only(text):
            # Date-only bound on a timestamp column covers the whole day
            day = date.fromisoformat(text)
            return datetime.combine(day, time.max if upper_bound else time.min)
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    if python_type is date:
        if _is_date_only(text):
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    return text


def _convert(python_type, value, upper_bound: bool):
    if isinstance(value, str):
        if python_type is str or (isinstance(python_type, type) and issubclass(python_type, enum.Enum)):
            return value
        return _parse_string(python_type, value.strip(), upper_bound)

    if python_type is bool:
        if isinstance(value, (bool, int)) and value in (0, 1):
            return bool(value)
        return UNCOERCIBLE
    if python_type in (int, float, Decimal):
        if isinstance(value, (int, float, Decimal)):
            return value
        return UNCOERCIBLE
    if python_type is datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.max if upper_bound else time.min)
        return UNCOERCIBLE
    if python_type is date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return UNCOERCIBLE
    if python_type is str:
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return str(value)
        return UNCOERCIBLE
    if isinstance(python_type, type) and issubclass(python_type, enum.Enum):
        return value if isinstance(value, python_type) else UNCOERCIBLE
    return value


def _coerce_scalar(python_type, value, upper_bound: bool = False):
    """
    Convert a filter value to the column's python type.

    Strings are parsed (ISO dates, numbers, boolean words); other values are
    checked for compatibility. Returns ``UNCOERCIBLE`` for a value the column
    can never hold, so the caller can emit a clause that matches nothing
    instead of handing the driver something it refuses to bind.
    """
    if value is None or python_type is None:
        return value
    try:
        converted = _convert(python_type, value, upper_bound)
    except (ValueError, InvalidOperation):
        return UNCOERCIBLE
    if python_type is int and isinstance(converted, int) and abs(converted) > _MAX_INT:
        return UNCOERCIBLE
    return converted


class SQLAlchemyExecutor:
    """
    Executor for ``aggregate()`` backed by a SQLAlchemy Session and a mapped model.

    ``scope`` is an optional SQLAlchemy condition ANDed into both the count and
    the fetch. Call sites use it to confine a listing to rows the caller may
    see; no client key can widen it.

    Usage:
        executor = SQLAlchemyExecutor(db, JobPost)
        envelope = await aggregate(executor, payload, JOB_POST_WHITELIST, [Include("employer")])
    """

    def __init__(self, db: Session, model, scope=None):
        self.db = db
        self.model = model
        self.mapper = inspect(model)
        self.scope = scope

    async def __call__(
        self,
        predicate: Predicate,
        ordering: Optional[OrderingDirective],
        relations: Sequence[RelationDescriptor] = (),
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Tuple[int, List[Any]]:
        return await run_in_threadpool(self.execute, predicate, ordering, relations, limit, offset)

    def execute(
        self,
        predicate: Predicate,
        ordering: Optional[OrderingDirective],
        relations: Sequence[RelationDescriptor] = (),
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Tuple[int, List[Any]]:
        """Blocking count + fetch. Returns ``(total_count, rows)``."""
        condition = self.translate(predicate)
        if self.scope is not None:
            condition = and_(self.scope, condition)

        count_stmt = select(func.count()).select_from(self.model).where(condition)
        total = self.db.execute(count_stmt).scalar_one()

        stmt = select(self.model).where(condition)
        stmt = stmt.options(*self._load_options(relations))
        stmt = stmt.order_by(*self._order_by(ordering))
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)

        rows = list(self.db.execute(stmt).scalars().all())
        logger.debug(f"{self.model.__name__}: fetched {len(rows)} of {total} matching rows")
        return total, rows

    # Predicate translation

    def translate(self, predicate: Predicate):
        if isinstance(predicate, And):
            if not predicate.clauses:
                return true()
            return and_(*(self.translate(clause) for clause in predicate.clauses))
        if isinstance(predicate, Or):
            if not predicate.clauses:
                return false()
            return or_(*(self.translate(clause) for clause in predicate.clauses))
        if isinstance(predicate, Equals):
            return self._on_field(predicate.field, lambda col, ptype: self._equals(col, ptype, predicate.value))
        if isinstance(predicate, Between):
            return self._on_field(predicate.field, lambda col, ptype: self._between(col, ptype, predicate))
        if isinstance(predicate, AnyContains):
            if not predicate.fields:
                return false()
            return or_(*(
                self._on_field(name, lambda col, ptype: col.icontains(predicate.term, autoescape=True))
                for name in predicate.fields
            ))
        raise TypeError(f"Unsupported predicate node: {type(predicate).__name__}")

    @staticmethod
    def _equals(column, python_type, value):
        if value is None:
            return column.is_(None)
        if is_membership(value):
            items = [_coerce_scalar(python_type, item) for item in value]
            return column.in_([item for item in items if item is not UNCOERCIBLE])
        value = _coerce_scalar(python_type, value)
        if value is UNCOERCIBLE:
            return false()
        return column == value

    @staticmethod
    def _between(column, python_type, predicate: Between):
        low = _coerce_scalar(python_type, predicate.low)
        high = _coerce_scalar(python_type, predicate.high, upper_bound=True)
        if low is UNCOERCIBLE or high is UNCOERCIBLE:
            return false()
        return column.between(low, high)

    def _on_field(self, name: str, build):
        if "." not in name:
            column, python_type = self._column(self.mapper, name)
            return build(column, python_type)

        relation_name, attribute = name.split(".", 1)
        relationship = self.mapper.relationships.get(relation_name)
        if relationship is None or "." in attribute:
            raise UnknownFieldError(f"{self.model.__name__} has no relation field '{name}'")
        column, python_type = self._column(relationship.mapper, attribute)
        related = getattr(self.model, relation_name)
        expression = build(column, python_type)
        return related.any(expression) if relationship.uselist else related.has(expression)

    @staticmethod
    def _column(mapper, name: str):
        prop = mapper.column_attrs.get(name)
        if prop is None:
            raise UnknownFieldError(f"{mapper.class_.__name__} has no column '{name}'")
        try:
            python_type = prop.columns[0].type.python_type
        except NotImplementedError:
            python_type = None
        return getattr(mapper.class_, name), python_type

    # Ordering and relation loading

    def _order_by(self, ordering: Optional[OrderingDirective]) -> List[Any]:
        primary_keys = list(self.mapper.primary_key)
        if ordering is None:
            return primary_keys
        if "." in ordering.field:
            raise UnknownFieldError(f"Sorting through relations is not supported: '{ordering.field}'")
        column, _ = self._column(self.mapper, ordering.field)
        return [column.desc() if ordering.descending else column.asc()] + primary_keys

    def _load_options(self, relations: Sequence[RelationDescriptor]) -> List[Any]:
        options = []
        for descriptor in relations:
            if isinstance(descriptor, str):
                descriptor = Include(descriptor)
            relationship = self.mapper.relationships.get(descriptor.relation)
            if relationship is None:
                raise UnknownFieldError(f"{self.model.__name__} has no relation '{descriptor.relation}'")
            loader = selectinload(getattr(self.model, descriptor.relation))
            if descriptor.attributes:
                columns = [self._column(relationship.mapper, name)[0] for name in descriptor.attributes]
                loader = loader.load_only(*columns)
            options.append(loader)
        return options
