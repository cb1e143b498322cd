import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, HTTPException, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobportal.aggregation import AggregationError
from jobportal.core.database import get_db
from jobportal.crud import job_category as job_category_crud
from jobportal.schemas.job_category import JobCategoryCreateRequest, JobCategoryResponse
from jobportal.schemas.pagination import Page

router = APIRouter(prefix="/job-categories", tags=["Job Categories"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobCategoryResponse)
def create_job_category(request: JobCategoryCreateRequest, db: Session = Depends(get_db)):
    """Create a new job category. Category descriptions are unique."""
    try:
        category = job_category_crud.create(db, request)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Job category already exists")

    logger.info(f"Created job category {category.cate_code}: {category.cate_desc}")
    return category


@router.post("/list", response_model=Page[JobCategoryResponse], response_model_exclude_unset=True)
async def list_job_categories(payload: Dict[str, Any] = Body(default={}), db: Session = Depends(get_db)):
    """
    List job categories.

    Filter by `cate_desc`, search with `search`, sort by `cate_desc` or `created_at`.
    Omit `limit` (or send 0) to get every category without pagination.
    """
    try:
        envelope = await job_category_crud.get_page(db, payload)
    except AggregationError as e:
        logger.error(f"Error listing job categories: {e}")
        raise HTTPException(status_code=500, detail="Error fetching job categories")

    return Page[JobCategoryResponse].from_envelope(envelope, JobCategoryResponse)


@router.get("/{cate_code}", response_model=JobCategoryResponse)
def get_job_category(cate_code: int, db: Session = Depends(get_db)):
    category = job_category_crud.get_by_id(db, cate_code)

    if not category:
        raise HTTPException(status_code=404, detail="Job category not found")

    return category
