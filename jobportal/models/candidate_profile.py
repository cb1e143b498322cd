"""
Candidate profile detail models: education and work experience.

Both hang off a candidate and are listed per candidate through the
aggregation engine.
"""

from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from jobportal.core.database import Base


class CandidateEducation(Base):
    __tablename__ = "candidate_edu_details"

    edu_id = Column(Integer, primary_key=True, index=True)
    can_code = Column(Integer, ForeignKey("candidate_mast.can_code"), nullable=False, index=True)

    can_edu = Column(String, nullable=False)  # Degree or level, e.g. "Bachelors"
    can_scho = Column(String, nullable=False)  # School or institution
    can_pasy = Column(Integer, nullable=False)  # Year of passing
    can_perc = Column(Numeric(5, 2, asdecimal=False), nullable=True)
    can_stre = Column(String, nullable=True)  # Stream or major
    can_cgpa = Column(Numeric(3, 2, asdecimal=False), nullable=True)

    candidate = relationship("Candidate", back_populates="education")

    def __repr__(self):
        return f"<CandidateEducation(edu_id={self.edu_id}, can_edu='{self.can_edu}')>"


class CandidateExperience(Base):
    __tablename__ = "candidate_exp_details"

    exp_id = Column(Integer, primary_key=True, index=True)
    can_code = Column(Integer, ForeignKey("candidate_mast.can_code"), nullable=False, index=True)

    emp_name = Column(String, nullable=False)
    exp_type = Column(String, nullable=False)  # e.g. "full-time", "internship"
    exp_desg = Column(String, nullable=False)  # Designation
    cur_ctc = Column(Numeric(10, 2, asdecimal=False), nullable=False)  # Annual cost to company

    job_stdt = Column(Date, nullable=False)
    job_endt = Column(Date, nullable=True)  # NULL while still employed

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    candidate = relationship("Candidate", back_populates="experience")

    def __repr__(self):
        return f"<CandidateExperience(exp_id={self.exp_id}, emp_name='{self.emp_name}')>"
