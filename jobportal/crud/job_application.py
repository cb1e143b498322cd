"""
CRUD operations for JobApplication model.
"""

from typing import Any, Mapping, Optional
from sqlalchemy.orm import Session

from jobportal.aggregation import FieldWhitelist, PaginatedEnvelope, aggregate
from jobportal.aggregation.sql_executor import SQLAlchemyExecutor
from jobportal.crud.includes import CANDIDATE_SUMMARY, JOB_POST_SUMMARY
from jobportal.models.job_application import JobApplication, ApplicationStatus

LIST_WHITELIST = FieldWhitelist(
    equality_fields=("candidate_id", "job_id", "status"),
    range_fields=("applied_at",),
    searchable_fields=("job_post.job_title",),
    sortable_fields=("applied_at",),
)
LIST_INCLUDES = (
    CANDIDATE_SUMMARY,
    JOB_POST_SUMMARY,
)


def create(db: Session, candidate_id: int, job_id: int) -> JobApplication:
    application = JobApplication(
        candidate_id=candidate_id,
        job_id=job_id,
        status=ApplicationStatus.PENDING
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def get_by_id(db: Session, application_id: int) -> Optional[JobApplication]:
    return db.query(JobApplication).filter(JobApplication.id == application_id).first()


def get_for_candidate_and_job(db: Session, candidate_id: int, job_id: int) -> Optional[JobApplication]:
    return db.query(JobApplication).filter(
        JobApplication.candidate_id == candidate_id,
        JobApplication.job_id == job_id
    ).first()


async def get_page(db: Session, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """List job applications with the candidate and job post joined."""
    return await aggregate(SQLAlchemyExecutor(db, JobApplication), payload, LIST_WHITELIST, LIST_INCLUDES)
