"""
Employer database model.

An employer (company) publishes job posts and may be granted access to
candidate profiles through the admin-mediated access workflow.
"""

from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from jobportal.core.database import Base


class Employer(Base):
    __tablename__ = "employer_mast"

    cmp_code = Column(Integer, primary_key=True, index=True)
    cmp_name = Column(String, nullable=False, index=True)
    cmp_email = Column(String, nullable=False, unique=True)
    cmp_mobn = Column(String, nullable=False)
    cmp_webs = Column(String, nullable=True)
    emp_loca = Column(String, nullable=True)
    emp_addr = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    job_posts = relationship("JobPost", back_populates="employer", cascade="all, delete-orphan")
    access_requests = relationship("AccessRequest", back_populates="employer", cascade="all, delete-orphan")
    profile_accesses = relationship("ProfileAccess", back_populates="employer", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Employer(cmp_code={self.cmp_code}, cmp_name='{self.cmp_name}')>"
