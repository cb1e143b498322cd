"""
API endpoints for candidate management.
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, HTTPException, Depends
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobportal.aggregation import AggregationError
from jobportal.core.database import get_db
from jobportal.crud import candidate as candidate_crud
from jobportal.crud import job_category as job_category_crud
from jobportal.schemas.candidate import CandidateCreateRequest, CandidateResponse
from jobportal.schemas.job_post import JobPostResponse
from jobportal.schemas.pagination import Page

router = APIRouter(prefix="/candidates", tags=["Candidates"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=CandidateResponse)
def create_candidate(request: CandidateCreateRequest, db: Session = Depends(get_db)):
    """
    Register a new candidate.

    Raises:
        HTTPException 404: If the job category doesn't exist
        HTTPException 409: If the email is already registered
    """
    if not job_category_crud.get_by_id(db, request.can_job_cate):
        raise HTTPException(status_code=404, detail=f"Job category {request.can_job_cate} not found")

    try:
        candidate = candidate_crud.create(db, request)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="A candidate with this email already exists")

    logger.info(f"Created candidate {candidate.can_code}")
    return candidate


@router.post("/list", response_model=Page[CandidateResponse], response_model_exclude_unset=True)
async def list_candidates(payload: Dict[str, Any] = Body(default={}), db: Session = Depends(get_db)):
    """
    List candidates with their job category.

    Body fields:
    - `can_name`, `can_job_cate`, `can_email`, `can_appr`: exact match (lists mean "any of")
    - `reg_date_from` + `reg_date_to`: registration date range (both bounds required)
    - `search`: matches name or email, case-insensitive
    - `sortBy` (`can_name`, `can_job_cate`, `reg_date`) and `sortOrder` (`asc`/`desc`)
    - `page`, `limit`: omit `limit` to get every candidate
    """
    try:
        envelope = await candidate_crud.get_page(db, payload)
    except AggregationError as e:
        logger.error(f"Error listing candidates: {e}")
        raise HTTPException(status_code=500, detail="Error fetching candidates")

    return Page[CandidateResponse].from_envelope(envelope, CandidateResponse)


@router.get("/{can_code}", response_model=CandidateResponse)
def get_candidate(can_code: int, db: Session = Depends(get_db)):
    candidate = candidate_crud.get_by_id(db, can_code)

    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")

    return candidate


@router.post("/{can_code}/job-posts", response_model=Page[JobPostResponse], response_model_exclude_unset=True)
async def list_candidate_job_posts(
    can_code: int,
    payload: Dict[str, Any] = Body(default={}),
    db: Session = Depends(get_db)
):
    """
    List job posts from employers this candidate has granted profile access to.

    Body fields:
    - `job_location`, `job_cate`, `status`: exact match
    - `posted_at_from` + `posted_at_to`: posting date range
    - `search`: matches the job title or the employer's name
    - `sortBy` (`posted_at`, `job_title`), `sortOrder`, `page`, `limit`
    """
    candidate = await run_in_threadpool(candidate_crud.get_by_id, db, can_code)
    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")

    try:
        envelope = await candidate_crud.get_job_posts_for_candidate(db, can_code, payload)
    except AggregationError as e:
        logger.error(f"Error listing job posts for candidate {can_code}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching job posts")

    return Page[JobPostResponse].from_envelope(envelope, JobPostResponse)
