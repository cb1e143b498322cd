"""
Job application database model.

Links a candidate to a job post they applied for.
"""

import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, ForeignKey, DateTime, Enum, UniqueConstraint, func
from sqlalchemy.orm import relationship
from jobportal.core.database import Base


class ApplicationStatus(str, enum.Enum):
    """
    Application review lifecycle:

    PENDING -> ACCEPTED
            -> REJECTED
    """
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class JobApplication(Base):
    __tablename__ = "job_applications"
    __table_args__ = (
        UniqueConstraint("candidate_id", "job_id", name="uq_job_applications_candidate_job"),
    )

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("candidate_mast.can_code"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("job_posts.job_id"), nullable=False, index=True)

    status = Column(
        Enum(ApplicationStatus, values_callable=lambda e: [m.value for m in e]),
        default=ApplicationStatus.PENDING,
        nullable=False,
        index=True
    )
    applied_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    candidate = relationship("Candidate", back_populates="applications")
    job_post = relationship("JobPost", back_populates="applications")
