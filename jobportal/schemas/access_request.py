"""
Pydantic schemas for profile access requests and grants.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from jobportal.models.access_request import AccessRequestStatus
from jobportal.schemas.candidate import CandidateSummary
from jobportal.schemas.employer import EmployerSummary


class AccessRequestCreateRequest(BaseModel):
    """An employer asking to see a candidate's full profile"""
    employer_id: int
    candidate_id: int


class AccessRequestResponse(BaseModel):
    id: int
    employer_id: int
    candidate_id: int
    status: AccessRequestStatus
    requested_at: datetime
    reviewed_at: Optional[datetime] = None
    employer: Optional[EmployerSummary] = None
    candidate: Optional[CandidateSummary] = None

    class Config:
        from_attributes = True


class ProfileAccessResponse(BaseModel):
    """A granted profile access, listed from the employer's side"""
    id: int
    employer_id: int
    candidate_id: int
    granted_at: datetime
    candidate: Optional[CandidateSummary] = None

    class Config:
        from_attributes = True
