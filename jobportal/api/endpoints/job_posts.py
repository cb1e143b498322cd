import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, HTTPException, Depends
from sqlalchemy.orm import Session

from jobportal.aggregation import AggregationError
from jobportal.core.database import get_db
from jobportal.crud import employer as employer_crud
from jobportal.crud import job_category as job_category_crud
from jobportal.crud import job_post as job_post_crud
from jobportal.schemas.job_post import JobPostCreateRequest, JobPostResponse
from jobportal.schemas.pagination import Page

router = APIRouter(prefix="/job-posts", tags=["Job Posts"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobPostResponse)
def create_job_post(request: JobPostCreateRequest, db: Session = Depends(get_db)):
    """
    Publish a new job post for an employer.

    Raises:
        HTTPException 404: If the employer or job category doesn't exist
    """
    if not employer_crud.get_by_id(db, request.cmp_id):
        raise HTTPException(status_code=404, detail=f"Employer {request.cmp_id} not found")
    if not job_category_crud.get_by_id(db, request.job_cate):
        raise HTTPException(status_code=404, detail=f"Job category {request.job_cate} not found")

    try:
        job_post = job_post_crud.create(db, request)
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating job post: {e}")
        raise HTTPException(status_code=500, detail="Failed to create job post")

    logger.info(f"Created job post {job_post.job_id}: {job_post.job_title}")
    return job_post


@router.post("/list", response_model=Page[JobPostResponse], response_model_exclude_unset=True)
async def list_job_posts(payload: Dict[str, Any] = Body(default={}), db: Session = Depends(get_db)):
    """
    List job posts with employer contact details and category.

    Body fields:
    - `job_title`, `job_location`, `job_cate`, `cmp_id`, `status`: exact match
    - `posted_at_from` + `posted_at_to`, `salary_from` + `salary_to`: ranges (both bounds required)
    - `search`: matches title or description, case-insensitive
    - `sortBy` (`job_title`, `job_location`, `job_cate`, `posted_at`, `salary`) and `sortOrder`
    - `page`, `limit`
    """
    try:
        envelope = await job_post_crud.get_page(db, payload)
    except AggregationError as e:
        logger.error(f"Error listing job posts: {e}")
        raise HTTPException(status_code=500, detail="Error fetching job posts")

    return Page[JobPostResponse].from_envelope(envelope, JobPostResponse)


@router.get("/{job_id}", response_model=JobPostResponse)
def get_job_post(job_id: int, db: Session = Depends(get_db)):
    job_post = job_post_crud.get_by_id(db, job_id)

    if not job_post:
        raise HTTPException(status_code=404, detail="Job post not found")

    return job_post
