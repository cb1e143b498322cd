"""
Eager-load descriptors for the summaries embedded in listing responses.

Each descriptor loads exactly the columns its summary schema serialises, so
building the response never lazy-loads a related row.
"""

from typing import Type
from pydantic import BaseModel

from jobportal.aggregation.sql_executor import Include
from jobportal.schemas.candidate import CandidateSummary
from jobportal.schemas.employer import EmployerSummary
from jobportal.schemas.job_category import JobCategorySummary
from jobportal.schemas.job_post import JobPostSummary


def summary_include(relation: str, schema: Type[BaseModel]) -> Include:
    return Include(relation, tuple(schema.model_fields))


CANDIDATE_SUMMARY = summary_include("candidate", CandidateSummary)
EMPLOYER_SUMMARY = summary_include("employer", EmployerSummary)
JOB_CATEGORY_SUMMARY = summary_include("job_category", JobCategorySummary)
JOB_POST_SUMMARY = summary_include("job_post", JobPostSummary)
