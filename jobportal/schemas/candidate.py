"""
Pydantic schemas for Candidate API requests/responses.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr

from jobportal.schemas.job_category import JobCategorySummary


class CandidateCreateRequest(BaseModel):
    """Schema for registering a candidate"""
    can_name: str = Field(..., min_length=1, max_length=200)
    can_email: EmailStr
    can_mobn: str = Field(..., pattern=r"^\d{10}$", description="10-digit mobile number")
    can_job_cate: int = Field(..., description="Preferred job category code")
    can_about: Optional[str] = None
    can_skill: Optional[str] = None
    reg_date: Optional[date] = Field(None, description="Registration date (defaults to today)")


class CandidateResponse(BaseModel):
    """Full candidate response"""
    can_code: int
    can_name: str
    can_email: str
    can_mobn: str
    can_job_cate: int
    can_about: Optional[str] = None
    can_skill: Optional[str] = None
    can_appr: bool
    reg_date: date
    job_category: Optional[JobCategorySummary] = None

    class Config:
        from_attributes = True


class CandidateSummary(BaseModel):
    """Simplified candidate info for list endpoints and embedding"""
    can_code: int
    can_name: str
    can_email: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
