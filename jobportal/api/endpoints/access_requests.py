"""
API endpoints for profile access requests.

Employers file requests here; reviewing them belongs to the admin workflow.
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, HTTPException, Depends
from sqlalchemy.orm import Session

from jobportal.aggregation import AggregationError
from jobportal.core.database import get_db
from jobportal.crud import access_request as access_request_crud
from jobportal.crud import candidate as candidate_crud
from jobportal.crud import employer as employer_crud
from jobportal.schemas.access_request import AccessRequestCreateRequest, AccessRequestResponse
from jobportal.schemas.pagination import Page

router = APIRouter(prefix="/access-requests", tags=["Access Requests"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=AccessRequestResponse)
def request_access(request: AccessRequestCreateRequest, db: Session = Depends(get_db)):
    """
    File a pending request for an employer to see a candidate's profile.

    Raises:
        HTTPException 404: If the employer or candidate doesn't exist
        HTTPException 409: If a pending request already exists for the pair
    """
    if not employer_crud.get_by_id(db, request.employer_id):
        raise HTTPException(status_code=404, detail="Employer not found")
    if not candidate_crud.get_by_id(db, request.candidate_id):
        raise HTTPException(status_code=404, detail="Candidate not found")
    if access_request_crud.get_pending(db, request.employer_id, request.candidate_id):
        raise HTTPException(status_code=409, detail="An access request is already pending")

    access_request = access_request_crud.create(db, request.employer_id, request.candidate_id)
    logger.info(
        f"Employer {request.employer_id} requested access to candidate {request.candidate_id} "
        f"(request {access_request.id})"
    )
    return access_request


@router.post("/list", response_model=Page[AccessRequestResponse], response_model_exclude_unset=True)
async def list_access_requests(payload: Dict[str, Any] = Body(default={}), db: Session = Depends(get_db)):
    """
    List access requests with employer and candidate names.

    Filter by `employer_id`, `candidate_id`, `status` and `requested_at_from`/`requested_at_to`;
    `search` matches the employer or candidate name. Sortable by `requested_at`.
    """
    try:
        envelope = await access_request_crud.get_page(db, payload)
    except AggregationError as e:
        logger.error(f"Error listing access requests: {e}")
        raise HTTPException(status_code=500, detail="Error fetching access requests")

    return Page[AccessRequestResponse].from_envelope(envelope, AccessRequestResponse)


@router.get("/{request_id}", response_model=AccessRequestResponse)
def get_access_request(request_id: int, db: Session = Depends(get_db)):
    access_request = access_request_crud.get_by_id(db, request_id)

    if not access_request:
        raise HTTPException(status_code=404, detail="Access request not found")

    return access_request
