from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from jobportal.models.job_application import ApplicationStatus
from jobportal.schemas.candidate import CandidateSummary
from jobportal.schemas.job_post import JobPostSummary


class JobApplicationCreateRequest(BaseModel):
    """Schema for applying to a job post"""
    candidate_id: int
    job_id: int


class JobApplicationResponse(BaseModel):
    """Schema for job application response"""
    id: int
    candidate_id: int
    job_id: int
    status: ApplicationStatus
    applied_at: datetime
    candidate: Optional[CandidateSummary] = None
    job_post: Optional[JobPostSummary] = None

    class Config:
        from_attributes = True
