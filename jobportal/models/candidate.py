"""
Candidate database model.

Represents a job seeker registered on the portal. Employers only see a
candidate's full profile once an admin has granted them access.
"""

from datetime import date
from sqlalchemy import Column, Integer, String, Boolean, Date, ForeignKey, Text, DateTime, func
from sqlalchemy.orm import relationship
from jobportal.core.database import Base


class Candidate(Base):
    __tablename__ = "candidate_mast"

    can_code = Column(Integer, primary_key=True, index=True)
    can_name = Column(String, nullable=False, index=True)
    can_email = Column(String, nullable=False, unique=True)
    can_mobn = Column(String(10), nullable=False)
    can_job_cate = Column(Integer, ForeignKey("job_cate.cate_code"), nullable=False, index=True)

    can_about = Column(Text, nullable=True)
    can_skill = Column(Text, nullable=True)
    can_appr = Column(Boolean, default=False, nullable=False)  # Approved by an admin

    reg_date = Column(Date, default=date.today, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    job_category = relationship("JobCategory", back_populates="candidates")
    applications = relationship("JobApplication", back_populates="candidate", cascade="all, delete-orphan")
    education = relationship("CandidateEducation", back_populates="candidate", cascade="all, delete-orphan")
    experience = relationship("CandidateExperience", back_populates="candidate", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Candidate(can_code={self.can_code}, can_name='{self.can_name}')>"
