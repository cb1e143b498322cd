import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, Enum, func
from sqlalchemy.orm import relationship
from jobportal.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class JobPostStatus(str, enum.Enum):
    """
    Job post visibility.

    - ACTIVE: Listed and open for applications
    - INACTIVE: Hidden from candidates
    """
    ACTIVE = "active"
    INACTIVE = "inactive"


class JobPost(Base):
    """
    A job opening published by an employer under a job category.
    """
    __tablename__ = "job_posts"

    job_id = Column(Integer, primary_key=True, index=True)
    job_title = Column(String, nullable=False, index=True)
    job_description = Column(Text, nullable=False)
    job_cate = Column(Integer, ForeignKey("job_cate.cate_code"), nullable=False, index=True)
    job_location = Column(String, nullable=False)
    salary = Column(Integer, nullable=True)
    required_skills = Column(Text, nullable=True)  # Comma-separated skills
    cmp_id = Column(Integer, ForeignKey("employer_mast.cmp_code"), nullable=False, index=True)

    posted_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    status = Column(
        Enum(JobPostStatus, values_callable=lambda e: [m.value for m in e]),
        default=JobPostStatus.ACTIVE,
        nullable=False,
        index=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    employer = relationship("Employer", back_populates="job_posts")
    job_category = relationship("JobCategory", back_populates="job_posts")
    applications = relationship("JobApplication", back_populates="job_post", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<JobPost(job_id={self.job_id}, job_title='{self.job_title}', status={self.status.value})>"
