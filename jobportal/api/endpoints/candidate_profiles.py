"""
API endpoints for candidate education and work experience records.
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, HTTPException, Depends
from sqlalchemy.orm import Session

from jobportal.aggregation import AggregationError
from jobportal.core.database import get_db
from jobportal.crud import candidate as candidate_crud
from jobportal.crud import candidate_profile as profile_crud
from jobportal.schemas.candidate_profile import (
    EducationCreateRequest,
    EducationResponse,
    ExperienceCreateRequest,
    ExperienceResponse,
)
from jobportal.schemas.pagination import Page

education_router = APIRouter(prefix="/education", tags=["Candidate Education"])
experience_router = APIRouter(prefix="/experience", tags=["Candidate Experience"])
logger = logging.getLogger(__name__)


def _require_candidate(db: Session, can_code: int):
    if not candidate_crud.get_by_id(db, can_code):
        raise HTTPException(status_code=404, detail=f"Candidate {can_code} not found")


@education_router.post("/", status_code=201, response_model=EducationResponse)
def create_education(request: EducationCreateRequest, db: Session = Depends(get_db)):
    """
    Add an education record to a candidate's profile.

    Raises:
        HTTPException 404: If the candidate doesn't exist
    """
    _require_candidate(db, request.can_code)

    education = profile_crud.create_education(db, request)
    logger.info(f"Added education record {education.edu_id} for candidate {request.can_code}")
    return education


@education_router.post("/list", response_model=Page[EducationResponse], response_model_exclude_unset=True)
async def list_education(payload: Dict[str, Any] = Body(default={}), db: Session = Depends(get_db)):
    """
    List education records.

    Filter by `can_code` and `can_pasy`; `search` matches degree, school and stream;
    sort by `can_pasy`.
    """
    try:
        envelope = await profile_crud.get_education_page(db, payload)
    except AggregationError as e:
        logger.error(f"Error listing education records: {e}")
        raise HTTPException(status_code=500, detail="Error fetching education records")

    return Page[EducationResponse].from_envelope(envelope, EducationResponse)


@education_router.get("/{edu_id}", response_model=EducationResponse)
def get_education(edu_id: int, db: Session = Depends(get_db)):
    education = profile_crud.get_education(db, edu_id)

    if not education:
        raise HTTPException(status_code=404, detail="Education record not found")

    return education


@experience_router.post("/", status_code=201, response_model=ExperienceResponse)
def create_experience(request: ExperienceCreateRequest, db: Session = Depends(get_db)):
    """
    Add a work experience record to a candidate's profile.

    Raises:
        HTTPException 404: If the candidate doesn't exist
        HTTPException 422: If the end date is before the start date
    """
    _require_candidate(db, request.can_code)

    experience = profile_crud.create_experience(db, request)
    logger.info(f"Added experience record {experience.exp_id} for candidate {request.can_code}")
    return experience


@experience_router.post("/list", response_model=Page[ExperienceResponse], response_model_exclude_unset=True)
async def list_experience(payload: Dict[str, Any] = Body(default={}), db: Session = Depends(get_db)):
    """
    List work experience records.

    Filter by `can_code`, `exp_type` and `job_stdt_from`/`job_stdt_to`; `search`
    matches employer name and designation; sort by `job_stdt` or `job_endt`.
    """
    try:
        envelope = await profile_crud.get_experience_page(db, payload)
    except AggregationError as e:
        logger.error(f"Error listing experience records: {e}")
        raise HTTPException(status_code=500, detail="Error fetching experience records")

    return Page[ExperienceResponse].from_envelope(envelope, ExperienceResponse)


@experience_router.get("/{exp_id}", response_model=ExperienceResponse)
def get_experience(exp_id: int, db: Session = Depends(get_db)):
    experience = profile_crud.get_experience(db, exp_id)

    if not experience:
        raise HTTPException(status_code=404, detail="Experience record not found")

    return experience
