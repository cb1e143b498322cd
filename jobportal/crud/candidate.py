"""
CRUD operations for Candidate model.
"""

from typing import Any, Mapping, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from jobportal.aggregation import FieldWhitelist, PaginatedEnvelope, aggregate
from jobportal.aggregation.sql_executor import SQLAlchemyExecutor
from jobportal.crud.includes import EMPLOYER_SUMMARY, JOB_CATEGORY_SUMMARY
from jobportal.models.access_request import ProfileAccess
from jobportal.models.candidate import Candidate
from jobportal.models.job_post import JobPost
from jobportal.schemas.candidate import CandidateCreateRequest

LIST_WHITELIST = FieldWhitelist(
    equality_fields=("can_name", "can_job_cate", "can_email", "can_appr"),
    range_fields=("reg_date",),
    searchable_fields=("can_name", "can_email"),
    sortable_fields=("can_name", "can_job_cate", "reg_date"),
)
LIST_INCLUDES = (JOB_CATEGORY_SUMMARY,)

JOB_POSTS_WHITELIST = FieldWhitelist(
    equality_fields=("job_location", "job_cate", "status"),
    range_fields=("posted_at",),
    searchable_fields=("job_title", "employer.cmp_name"),
    sortable_fields=("posted_at", "job_title"),
)
JOB_POSTS_INCLUDES = (EMPLOYER_SUMMARY, JOB_CATEGORY_SUMMARY)


def create(db: Session, data: CandidateCreateRequest) -> Candidate:
    """
    Register a new candidate.

    Args:
        db: Database session
        data: Validated candidate data

    Returns:
        Created Candidate instance with can_code
    """
    candidate = Candidate(**data.model_dump(exclude_none=True))
    db.add(candidate)
    db.commit()
    db.refresh(candidate)
    return candidate


def get_by_id(db: Session, can_code: int) -> Optional[Candidate]:
    return db.query(Candidate).filter(Candidate.can_code == can_code).first()


async def get_page(db: Session, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """List candidates with their job category, filtered, searched, sorted and paginated."""
    return await aggregate(SQLAlchemyExecutor(db, Candidate), payload, LIST_WHITELIST, LIST_INCLUDES)


def employers_granting(can_code: int):
    """Subquery of employer codes holding a profile access grant for the candidate."""
    return select(ProfileAccess.employer_id).where(ProfileAccess.candidate_id == can_code)


async def get_job_posts_for_candidate(db: Session, can_code: int, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """
    List job posts from employers the candidate has granted profile access to.

    The employer scope is applied in SQL, so client filters can only narrow it.
    """
    executor = SQLAlchemyExecutor(db, JobPost, scope=JobPost.cmp_id.in_(employers_granting(can_code)))
    return await aggregate(executor, payload, JOB_POSTS_WHITELIST, JOB_POSTS_INCLUDES)
