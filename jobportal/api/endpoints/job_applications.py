import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, HTTPException, Depends
from sqlalchemy.orm import Session

from jobportal.aggregation import AggregationError
from jobportal.core.database import get_db
from jobportal.crud import candidate as candidate_crud
from jobportal.crud import job_application as job_application_crud
from jobportal.crud import job_post as job_post_crud
from jobportal.models.job_post import JobPostStatus
from jobportal.schemas.job_application import JobApplicationCreateRequest, JobApplicationResponse
from jobportal.schemas.pagination import Page

router = APIRouter(prefix="/job-applications", tags=["Job Applications"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobApplicationResponse)
def apply_for_job(request: JobApplicationCreateRequest, db: Session = Depends(get_db)):
    """
    Apply a candidate to a job post.

    Raises:
        HTTPException 404: If the candidate or job post doesn't exist
        HTTPException 400: If the job post is not active
        HTTPException 409: If the candidate already applied
    """
    if not candidate_crud.get_by_id(db, request.candidate_id):
        raise HTTPException(status_code=404, detail="Candidate not found")

    job_post = job_post_crud.get_by_id(db, request.job_id)
    if not job_post:
        raise HTTPException(status_code=404, detail="Job post not found")
    if job_post.status != JobPostStatus.ACTIVE:
        raise HTTPException(status_code=400, detail="Job post is not accepting applications")

    if job_application_crud.get_for_candidate_and_job(db, request.candidate_id, request.job_id):
        raise HTTPException(status_code=409, detail="Candidate has already applied for this job")

    application = job_application_crud.create(db, request.candidate_id, request.job_id)
    logger.info(f"Candidate {request.candidate_id} applied for job post {request.job_id}")
    return application


@router.post("/list", response_model=Page[JobApplicationResponse], response_model_exclude_unset=True)
async def list_job_applications(payload: Dict[str, Any] = Body(default={}), db: Session = Depends(get_db)):
    """
    List job applications with candidate and job post details.

    Filter by `candidate_id`, `job_id`, `status` and `applied_at_from`/`applied_at_to`;
    `search` matches the job title.
    """
    try:
        envelope = await job_application_crud.get_page(db, payload)
    except AggregationError as e:
        logger.error(f"Error listing job applications: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch applications")

    return Page[JobApplicationResponse].from_envelope(envelope, JobApplicationResponse)


@router.get("/{application_id}", response_model=JobApplicationResponse)
def get_job_application(application_id: int, db: Session = Depends(get_db)):
    application = job_application_crud.get_by_id(db, application_id)

    if not application:
        raise HTTPException(status_code=404, detail="Job application not found")

    return application
