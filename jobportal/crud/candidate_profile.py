"""
CRUD operations for candidate education and experience records.
"""

from typing import Any, Mapping, Optional
from sqlalchemy.orm import Session

from jobportal.aggregation import FieldWhitelist, PaginatedEnvelope, aggregate
from jobportal.aggregation.sql_executor import SQLAlchemyExecutor
from jobportal.crud.includes import CANDIDATE_SUMMARY
from jobportal.models.candidate_profile import CandidateEducation, CandidateExperience
from jobportal.schemas.candidate_profile import EducationCreateRequest, ExperienceCreateRequest

EDUCATION_WHITELIST = FieldWhitelist(
    equality_fields=("can_code", "can_pasy"),
    searchable_fields=("can_edu", "can_scho", "can_stre"),
    sortable_fields=("can_pasy",),
)
EXPERIENCE_WHITELIST = FieldWhitelist(
    equality_fields=("can_code", "exp_type"),
    range_fields=("job_stdt",),
    searchable_fields=("emp_name", "exp_desg"),
    sortable_fields=("job_stdt", "job_endt"),
)
LIST_INCLUDES = (CANDIDATE_SUMMARY,)


def _add(db: Session, record):
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def create_education(db: Session, data: EducationCreateRequest) -> CandidateEducation:
    return _add(db, CandidateEducation(**data.model_dump()))


def get_education(db: Session, edu_id: int) -> Optional[CandidateEducation]:
    return db.query(CandidateEducation).filter(CandidateEducation.edu_id == edu_id).first()


async def get_education_page(db: Session, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """
    List education records, usually narrowed to one candidate with `can_code`.

    Args:
        db: Database session
        payload: Listing request (filters, search, sortBy/sortOrder, page/limit)

    Returns:
        PaginatedEnvelope of CandidateEducation rows with the candidate summary loaded
    """
    executor = SQLAlchemyExecutor(db, CandidateEducation)
    return await aggregate(executor, payload, EDUCATION_WHITELIST, LIST_INCLUDES)


def create_experience(db: Session, data: ExperienceCreateRequest) -> CandidateExperience:
    return _add(db, CandidateExperience(**data.model_dump()))


def get_experience(db: Session, exp_id: int) -> Optional[CandidateExperience]:
    return db.query(CandidateExperience).filter(CandidateExperience.exp_id == exp_id).first()


async def get_experience_page(db: Session, payload: Mapping[str, Any]) -> PaginatedEnvelope:
    """List work experience records with the candidate summary loaded."""
    executor = SQLAlchemyExecutor(db, CandidateExperience)
    return await aggregate(executor, payload, EXPERIENCE_WHITELIST, LIST_INCLUDES)
