"""
CRUD operations for JobPost model.

Implements the Repository pattern to encapsulate all database operations
for job posts, providing a clean interface for the API layer.
"""

from typing import Any, Mapping, Optional
from sqlalchemy.orm import Session

from jobportal.aggregation import FieldWhitelist, PaginatedEnvelope, aggregate
from jobportal.aggregation.sql_executor import SQLAlchemyExecutor
from jobportal.crud.includes import EMPLOYER_SUMMARY, JOB_CATEGORY_SUMMARY
from jobportal.models.job_post import JobPost
from jobportal.schemas.job_post import JobPostCreateRequest

LIST_WHITELIST = FieldWhitelist(
    equality_fields=("job_title", "job_location", "job_cate", "cmp_id", "status"),
    range_fields=("posted_at", "salary"),
    searchable_fields=("job_title", "job_description"),
    sortable_fields=("job_title", "job_location", "job_cate", "posted_at", "salary"),
)
LIST_INCLUDES = (
    EMPLOYER_SUMMARY,
    JOB_CATEGORY_SUMMARY,
)


def create(db: Session, data: JobPostCreateRequest) -> JobPost:
    """
    Create a new job post in the database.

    Args:
        db: Database session
        data: Validated job post data

    Returns:
        Created JobPost instance with job_id
    """
    job_post = JobPost(**data.model_dump())
    db.add(job_post)
    db.commit()
    db.refresh(job_post)
    return job_post


def get_by_id(db: Session, job_id: int) -> Optional[JobPost]:
    """
    Retrieve a job post by its ID.

    Args:
        db: Database session
        job_id: Job post ID to retrieve

    Returns:
        JobPost instance if found, None otherwise
    """
    return db.query(JobPost).filter(JobPost.job_id == job_id).first()


async def get_page(db: Session, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """
    List job posts with employer and category joined.

    Args:
        db: Database session
        payload: Listing request (filters, search, sortBy/sortOrder, page/limit)

    Returns:
        PaginatedEnvelope of JobPost rows
    """
    return await aggregate(SQLAlchemyExecutor(db, JobPost), payload, LIST_WHITELIST, LIST_INCLUDES)
