"""
CRUD operations for AccessRequest model.

Only creation and listing live here; approving or rejecting a request is
handled by the admin workflow.
"""

from typing import Any, Mapping, Optional
from sqlalchemy.orm import Session

from jobportal.aggregation import FieldWhitelist, PaginatedEnvelope, aggregate
from jobportal.aggregation.sql_executor import SQLAlchemyExecutor
from jobportal.crud.includes import CANDIDATE_SUMMARY, EMPLOYER_SUMMARY
from jobportal.models.access_request import AccessRequest, AccessRequestStatus

LIST_WHITELIST = FieldWhitelist(
    equality_fields=("employer_id", "candidate_id", "status"),
    range_fields=("requested_at",),
    searchable_fields=("employer.cmp_name", "candidate.can_name"),
    sortable_fields=("requested_at",),
)
LIST_INCLUDES = (
    EMPLOYER_SUMMARY,
    CANDIDATE_SUMMARY,
)


def create(db: Session, employer_id: int, candidate_id: int) -> AccessRequest:
    access_request = AccessRequest(
        employer_id=employer_id,
        candidate_id=candidate_id,
        status=AccessRequestStatus.PENDING
    )
    db.add(access_request)
    db.commit()
    db.refresh(access_request)
    return access_request


def get_by_id(db: Session, request_id: int) -> Optional[AccessRequest]:
    return db.query(AccessRequest).filter(AccessRequest.id == request_id).first()


def get_pending(db: Session, employer_id: int, candidate_id: int) -> Optional[AccessRequest]:
    return db.query(AccessRequest).filter(
        AccessRequest.employer_id == employer_id,
        AccessRequest.candidate_id == candidate_id,
        AccessRequest.status == AccessRequestStatus.PENDING
    ).first()


async def get_page(db: Session, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """List access requests with employer and candidate names joined."""
    return await aggregate(SQLAlchemyExecutor(db, AccessRequest), payload, LIST_WHITELIST, LIST_INCLUDES)
