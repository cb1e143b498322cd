"""
Profile access models.

An employer asks to see a candidate's full profile (AccessRequest); once an
admin approves, a ProfileAccess grant exists for the pair.
"""

import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, ForeignKey, DateTime, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from jobportal.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class AccessRequestStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AccessRequest(Base):
    __tablename__ = "access_requests"

    id = Column(Integer, primary_key=True, index=True)
    employer_id = Column(Integer, ForeignKey("employer_mast.cmp_code"), nullable=False, index=True)
    candidate_id = Column(Integer, ForeignKey("candidate_mast.can_code"), nullable=False, index=True)

    status = Column(
        Enum(AccessRequestStatus, values_callable=lambda e: [m.value for m in e]),
        default=AccessRequestStatus.PENDING,
        nullable=False,
        index=True
    )
    requested_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    employer = relationship("Employer", back_populates="access_requests")
    candidate = relationship("Candidate")


class ProfileAccess(Base):
    __tablename__ = "profile_accesses"
    __table_args__ = (
        UniqueConstraint("employer_id", "candidate_id", name="uq_profile_accesses_employer_candidate"),
    )

    id = Column(Integer, primary_key=True, index=True)
    employer_id = Column(Integer, ForeignKey("employer_mast.cmp_code"), nullable=False, index=True)
    candidate_id = Column(Integer, ForeignKey("candidate_mast.can_code"), nullable=False, index=True)
    granted_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    # Relationships
    employer = relationship("Employer", back_populates="profile_accesses")
    candidate = relationship("Candidate")
