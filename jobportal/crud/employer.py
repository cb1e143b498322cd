"""
CRUD operations for Employer model.

Besides the plain employer listing, this module answers the two
employer-scoped candidate listings: candidates the employer has been granted
access to, and candidates it has not.
"""

from typing import Any, Mapping, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from jobportal.aggregation import FieldWhitelist, PaginatedEnvelope, aggregate
from jobportal.aggregation.sql_executor import SQLAlchemyExecutor
from jobportal.crud.includes import CANDIDATE_SUMMARY
from jobportal.models.access_request import ProfileAccess
from jobportal.models.candidate import Candidate
from jobportal.models.employer import Employer
from jobportal.schemas.employer import EmployerCreateRequest

LIST_WHITELIST = FieldWhitelist(
    equality_fields=("cmp_name", "emp_loca"),
    range_fields=("created_at",),
    searchable_fields=("cmp_name", "cmp_email", "emp_loca"),
    sortable_fields=("cmp_name", "created_at"),
)

ACCESSIBLE_CANDIDATES_WHITELIST = FieldWhitelist(
    equality_fields=("employer_id",),
    range_fields=("granted_at",),
    searchable_fields=("candidate.can_name", "candidate.can_email"),
    sortable_fields=("granted_at",),
)
ACCESSIBLE_CANDIDATES_INCLUDES = (CANDIDATE_SUMMARY,)

INACCESSIBLE_CANDIDATES_WHITELIST = FieldWhitelist(
    equality_fields=("can_job_cate",),
    searchable_fields=("can_name", "can_email"),
    sortable_fields=("created_at",),
)


def create(db: Session, data: EmployerCreateRequest) -> Employer:
    """
    Register a new employer.

    Args:
        db: Database session
        data: Validated employer data

    Returns:
        Created Employer instance with cmp_code
    """
    employer = Employer(**data.model_dump())
    db.add(employer)
    db.commit()
    db.refresh(employer)
    return employer


def get_by_id(db: Session, cmp_code: int) -> Optional[Employer]:
    return db.query(Employer).filter(Employer.cmp_code == cmp_code).first()


async def get_page(db: Session, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """List employers with filters, search, sorting and pagination."""
    return await aggregate(SQLAlchemyExecutor(db, Employer), payload, LIST_WHITELIST)


async def get_accessible_candidates(db: Session, employer_id: int, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """
    List the profile access grants held by an employer.

    The employer id is pinned over the client payload, so a client cannot
    widen the listing to other employers' grants.
    """
    scoped = {**payload, "employer_id": employer_id}
    return await aggregate(
        SQLAlchemyExecutor(db, ProfileAccess),
        scoped,
        ACCESSIBLE_CANDIDATES_WHITELIST,
        ACCESSIBLE_CANDIDATES_INCLUDES,
    )


def granted_candidates(employer_id: int):
    """Subquery of candidate codes the employer holds a profile access grant for."""
    return select(ProfileAccess.candidate_id).where(ProfileAccess.employer_id == employer_id)


async def get_inaccessible_candidates(db: Session, employer_id: int, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """
    List candidates the employer has no access grant for.

    The listing is scoped in SQL with ``NOT IN (granted candidates)``, ANDed
    into both the count and the page fetch.
    """
    executor = SQLAlchemyExecutor(db, Candidate, scope=Candidate.can_code.not_in(granted_candidates(employer_id)))
    return await aggregate(executor, payload, INACCESSIBLE_CANDIDATES_WHITELIST)
