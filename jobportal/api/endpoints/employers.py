"""
API endpoints for employers.

Includes the employer-scoped candidate listings used when browsing profiles:
candidates the employer has been granted access to, and those it has not.
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, HTTPException, Depends
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobportal.aggregation import AggregationError
from jobportal.core.database import get_db
from jobportal.crud import employer as employer_crud
from jobportal.schemas.access_request import ProfileAccessResponse
from jobportal.schemas.candidate import CandidateSummary
from jobportal.schemas.employer import EmployerCreateRequest, EmployerResponse
from jobportal.schemas.pagination import Page

router = APIRouter(prefix="/employers", tags=["Employers"])
logger = logging.getLogger(__name__)


def _get_employer_or_404(db: Session, cmp_code: int):
    employer = employer_crud.get_by_id(db, cmp_code)
    if not employer:
        raise HTTPException(status_code=404, detail="Employer not found")
    return employer


@router.post("/", status_code=201, response_model=EmployerResponse)
def create_employer(request: EmployerCreateRequest, db: Session = Depends(get_db)):
    """Register a new employer. Employer emails are unique."""
    try:
        employer = employer_crud.create(db, request)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="An employer with this email already exists")

    logger.info(f"Created employer {employer.cmp_code}: {employer.cmp_name}")
    return employer


@router.post("/list", response_model=Page[EmployerResponse], response_model_exclude_unset=True)
async def list_employers(payload: Dict[str, Any] = Body(default={}), db: Session = Depends(get_db)):
    """
    List employers.

    Filters: `cmp_name`, `emp_loca`, and the range `created_at_from`/`created_at_to`.
    Search covers name, email and location. Sortable by `cmp_name` and `created_at`.
    """
    try:
        envelope = await employer_crud.get_page(db, payload)
    except AggregationError as e:
        logger.error(f"Error listing employers: {e}")
        raise HTTPException(status_code=500, detail="Error fetching employers")

    return Page[EmployerResponse].from_envelope(envelope, EmployerResponse)


@router.get("/{cmp_code}", response_model=EmployerResponse)
def get_employer(cmp_code: int, db: Session = Depends(get_db)):
    return _get_employer_or_404(db, cmp_code)


@router.post(
    "/{cmp_code}/candidates/accessible",
    response_model=Page[ProfileAccessResponse],
    response_model_exclude_unset=True,
)
async def list_accessible_candidates(
    cmp_code: int,
    payload: Dict[str, Any] = Body(default={}),
    db: Session = Depends(get_db)
):
    """
    List the candidates this employer has been granted profile access to.

    Search runs over the candidate's name and email; sort by `granted_at`.
    """
    await run_in_threadpool(_get_employer_or_404, db, cmp_code)

    try:
        envelope = await employer_crud.get_accessible_candidates(db, cmp_code, payload)
    except AggregationError as e:
        logger.error(f"Error listing accessible candidates for employer {cmp_code}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching candidates")

    return Page[ProfileAccessResponse].from_envelope(envelope, ProfileAccessResponse)


@router.post(
    "/{cmp_code}/candidates/not-accessible",
    response_model=Page[CandidateSummary],
    response_model_exclude_unset=True,
)
async def list_inaccessible_candidates(
    cmp_code: int,
    payload: Dict[str, Any] = Body(default={}),
    db: Session = Depends(get_db)
):
    """
    List candidates this employer has not been granted access to yet.

    Only summary fields are returned; the employer must request access to see more.
    """
    await run_in_threadpool(_get_employer_or_404, db, cmp_code)

    try:
        envelope = await employer_crud.get_inaccessible_candidates(db, cmp_code, payload)
    except AggregationError as e:
        logger.error(f"Error listing inaccessible candidates for employer {cmp_code}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching candidates")

    return Page[CandidateSummary].from_envelope(envelope, CandidateSummary)
