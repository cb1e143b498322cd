"""
Pydantic schemas for candidate education and experience records.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, model_validator

from jobportal.schemas.candidate import CandidateSummary


class EducationCreateRequest(BaseModel):
    """Schema for adding an education record to a candidate"""
    can_code: int
    can_edu: str = Field(..., min_length=1, max_length=100, description="Degree or level, e.g. Bachelors")
    can_scho: str = Field(..., min_length=1, max_length=200, description="School or institution")
    can_pasy: int = Field(..., ge=1900, le=2100, description="Year of passing")
    can_perc: Optional[float] = Field(None, ge=0, le=100)
    can_stre: Optional[str] = Field(None, max_length=100)
    can_cgpa: Optional[float] = Field(None, ge=0, le=10)


class EducationResponse(BaseModel):
    edu_id: int
    can_code: int
    can_edu: str
    can_scho: str
    can_pasy: int
    can_perc: Optional[float] = None
    can_stre: Optional[str] = None
    can_cgpa: Optional[float] = None
    candidate: Optional[CandidateSummary] = None

    class Config:
        from_attributes = True


class ExperienceCreateRequest(BaseModel):
    """Schema for adding a work experience record to a candidate"""
    can_code: int
    emp_name: str = Field(..., min_length=1, max_length=200)
    exp_type: str = Field(..., min_length=1, max_length=50, description="e.g. full-time, internship")
    exp_desg: str = Field(..., min_length=1, max_length=100, description="Designation")
    cur_ctc: float = Field(..., ge=0, description="Annual cost to company")
    job_stdt: date
    job_endt: Optional[date] = Field(None, description="Leave empty while still employed")

    @model_validator(mode="after")
    def end_not_before_start(self):
        if self.job_endt is not None and self.job_endt < self.job_stdt:
            raise ValueError("job_endt must not be before job_stdt")
        return self


class ExperienceResponse(BaseModel):
    exp_id: int
    can_code: int
    emp_name: str
    exp_type: str
    exp_desg: str
    cur_ctc: float
    job_stdt: date
    job_endt: Optional[date] = None
    candidate: Optional[CandidateSummary] = None

    class Config:
        from_attributes = True
