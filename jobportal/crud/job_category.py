"""
CRUD operations for JobCategory model.
"""

from typing import Any, Mapping, Optional
from sqlalchemy.orm import Session

from jobportal.aggregation import FieldWhitelist, PaginatedEnvelope, aggregate
from jobportal.aggregation.sql_executor import SQLAlchemyExecutor
from jobportal.models.job_category import JobCategory
from jobportal.schemas.job_category import JobCategoryCreateRequest

LIST_WHITELIST = FieldWhitelist(
    equality_fields=("cate_desc",),
    searchable_fields=("cate_desc",),
    sortable_fields=("cate_desc", "created_at"),
)


def create(db: Session, data: JobCategoryCreateRequest) -> JobCategory:
    category = JobCategory(cate_desc=data.cate_desc)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def get_by_id(db: Session, cate_code: int) -> Optional[JobCategory]:
    return db.query(JobCategory).filter(JobCategory.cate_code == cate_code).first()


async def get_page(db: Session, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """List job categories with filters, search, sorting and pagination."""
    return await aggregate(SQLAlchemyExecutor(db, JobCategory), payload, LIST_WHITELIST)
