from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class JobCategoryCreateRequest(BaseModel):
    """Schema for creating a job category"""
    cate_desc: str = Field(..., min_length=1, max_length=200)


class JobCategoryResponse(BaseModel):
    """Schema for job category response"""
    cate_code: int
    cate_desc: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class JobCategorySummary(BaseModel):
    """Category info embedded in other resources"""
    cate_code: int
    cate_desc: str

    class Config:
        from_attributes = True
