"""
Pydantic schemas for the paginated listing envelope.

Wire keys are camelCase to match the listing contract:
``{"records": [...], "pagination": {"totalItems": ..., ...}}``.
"""

from dataclasses import asdict
from typing import Generic, List, Optional, Type, TypeVar
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from jobportal.aggregation import PaginatedEnvelope

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """Pagination block, present only on paginated responses."""
    total_items: int
    total_pages: int
    current_page: int
    next_page: Optional[int]
    prev_page: Optional[int]
    has_next_page: bool
    has_previous_page: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class Page(BaseModel, Generic[T]):
    """
    Listing response.

    Endpoints declare ``response_model_exclude_unset=True`` so an unpaginated
    page serializes without a ``pagination`` key at all.
    """
    records: List[T]
    pagination: Optional[PaginationMeta] = None

    @classmethod
    def from_envelope(cls, envelope: PaginatedEnvelope, item_schema: Type[BaseModel]) -> "Page":
        records = [item_schema.model_validate(row) for row in envelope.records]
        if envelope.pagination is None:
            return cls(records=records)
        return cls(records=records, pagination=PaginationMeta(**asdict(envelope.pagination)))
