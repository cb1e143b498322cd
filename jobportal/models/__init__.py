"""
Database models package.
"""

from jobportal.models.job_category import JobCategory
from jobportal.models.employer import Employer
from jobportal.models.candidate import Candidate
from jobportal.models.candidate_profile import CandidateEducation, CandidateExperience
from jobportal.models.job_post import JobPost, JobPostStatus
from jobportal.models.job_application import JobApplication, ApplicationStatus
from jobportal.models.access_request import AccessRequest, AccessRequestStatus, ProfileAccess

__all__ = [
    "JobCategory",
    "Employer",
    "Candidate",
    "CandidateEducation",
    "CandidateExperience",
    "JobPost",
    "JobPostStatus",
    "JobApplication",
    "ApplicationStatus",
    "AccessRequest",
    "AccessRequestStatus",
    "ProfileAccess",
]
