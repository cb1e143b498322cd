"""
Pydantic schemas for Employer API requests/responses.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr


class EmployerCreateRequest(BaseModel):
    """Schema for registering an employer"""
    cmp_name: str = Field(..., min_length=1, max_length=200)
    cmp_email: EmailStr
    cmp_mobn: str = Field(..., min_length=5, max_length=20)
    cmp_webs: Optional[str] = None
    emp_loca: Optional[str] = Field(None, description="Employer location (city/region)")
    emp_addr: Optional[str] = None


class EmployerResponse(BaseModel):
    """Full employer response"""
    cmp_code: int
    cmp_name: str
    cmp_email: str
    cmp_mobn: str
    cmp_webs: Optional[str] = None
    emp_loca: Optional[str] = None
    emp_addr: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EmployerSummary(BaseModel):
    """Employer contact info embedded in job posts and access requests"""
    cmp_code: int
    cmp_name: str
    cmp_email: Optional[str] = None
    cmp_mobn: Optional[str] = None

    class Config:
        from_attributes = True
