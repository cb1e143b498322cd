"""
CRUD operations (Create, Read) and listing queries for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern. Each module declares the whitelist its listing
endpoint honours.
"""

from jobportal.crud import (
    access_request,
    candidate,
    candidate_profile,
    employer,
    job_application,
    job_category,
    job_post,
)

__all__ = [
    "access_request",
    "candidate",
    "candidate_profile",
    "employer",
    "job_application",
    "job_category",
    "job_post",
]
