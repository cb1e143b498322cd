from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from jobportal.core.database import Base


class JobCategory(Base):
    """A job category that both job posts and candidates are filed under."""
    __tablename__ = "job_cate"

    cate_code = Column(Integer, primary_key=True, index=True)
    cate_desc = Column(String, nullable=False, unique=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    candidates = relationship("Candidate", back_populates="job_category")
    job_posts = relationship("JobPost", back_populates="job_category")

    def __repr__(self):
        return f"<JobCategory(cate_code={self.cate_code}, cate_desc='{self.cate_desc}')>"
