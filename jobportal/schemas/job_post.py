from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from jobportal.models.job_post import JobPostStatus
from jobportal.schemas.employer import EmployerSummary
from jobportal.schemas.job_category import JobCategorySummary


class JobPostCreateRequest(BaseModel):
    """Schema for publishing a job post"""
    job_title: str = Field(..., min_length=1, max_length=200)
    job_description: str = Field(..., min_length=10)
    job_cate: int
    job_location: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    required_skills: Optional[str] = Field(None, description="Comma-separated skills")
    cmp_id: int
    status: JobPostStatus = JobPostStatus.ACTIVE


class JobPostResponse(BaseModel):
    """Schema for job post response"""
    job_id: int
    job_title: str
    job_description: str
    job_cate: int
    job_location: str
    salary: Optional[int] = None
    required_skills: Optional[str] = None
    cmp_id: int
    posted_at: datetime
    status: JobPostStatus
    employer: Optional[EmployerSummary] = None
    job_category: Optional[JobCategorySummary] = None

    class Config:
        from_attributes = True


class JobPostSummary(BaseModel):
    """Job post info embedded in applications"""
    job_id: int
    job_title: str
    job_location: str

    class Config:
        from_attributes = True
