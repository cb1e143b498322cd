"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- A seeded job portal (categories, employers, candidates, job posts)
"""

import os

# Point the application engine at an in-memory database before anything imports it
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobportal.core.database import Base, get_db
from jobportal.models import (
    AccessRequest,
    AccessRequestStatus,
    Candidate,
    CandidateEducation,
    CandidateExperience,
    Employer,
    JobApplication,
    JobCategory,
    JobPost,
    JobPostStatus,
    ProfileAccess,
)
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sql_statements():
    """
    Record every SQL statement sent to the test database while the test runs.
    """
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", record)
    yield statements
    event.remove(engine, "before_cursor_execute", record)


@pytest.fixture
def portal(db_session):
    """
    Seed a small job portal and return the created rows by name.

    - 2 categories: Engineering, Design
    - 2 employers: Acme Corp (Berlin), Globex (Paris)
    - 3 candidates: Alice, Bob (both Engineering), Carol (Design)
    - 5 job posts: 4 at Acme, 1 at Globex; one inactive; one without salary
    """
    engineering = JobCategory(cate_desc="Engineering")
    design = JobCategory(cate_desc="Design")
    db_session.add_all([engineering, design])
    db_session.flush()

    acme = Employer(
        cmp_name="Acme Corp", cmp_email="jobs@acme.test", cmp_mobn="5550001",
        emp_loca="Berlin", created_at=datetime(2024, 1, 10, 9, 0)
    )
    globex = Employer(
        cmp_name="Globex", cmp_email="hr@globex.test", cmp_mobn="5550002",
        emp_loca="Paris", created_at=datetime(2024, 3, 5, 9, 0)
    )
    db_session.add_all([acme, globex])
    db_session.flush()

    alice = Candidate(
        can_name="Alice Smith", can_email="alice@example.com", can_mobn="0123456789",
        can_job_cate=engineering.cate_code, can_appr=True, reg_date=date(2024, 1, 15)
    )
    bob = Candidate(
        can_name="Bob Jones", can_email="bob@example.com", can_mobn="0123456780",
        can_job_cate=engineering.cate_code, can_appr=False, reg_date=date(2024, 2, 20)
    )
    carol = Candidate(
        can_name="Carol White", can_email="carol@example.com", can_mobn="0123456781",
        can_job_cate=design.cate_code, can_appr=True, reg_date=date(2024, 3, 25)
    )
    db_session.add_all([alice, bob, carol])
    db_session.flush()

    posts = [
        JobPost(
            job_title="Senior Python Developer", job_description="Build APIs with FastAPI and PostgreSQL",
            job_cate=engineering.cate_code, job_location="Berlin", salary=90000,
            cmp_id=acme.cmp_code, posted_at=datetime(2024, 1, 5, 10, 0)
        ),
        JobPost(
            job_title="Junior Python Developer", job_description="Learn Django on real projects",
            job_cate=engineering.cate_code, job_location="Berlin", salary=50000,
            cmp_id=acme.cmp_code, posted_at=datetime(2024, 1, 20, 10, 0)
        ),
        JobPost(
            job_title="Data Engineer", job_description="Pipelines in python and SQL, 100% remote",
            job_cate=engineering.cate_code, job_location="Remote", salary=None,
            cmp_id=acme.cmp_code, posted_at=datetime(2024, 2, 14, 10, 0)
        ),
        JobPost(
            job_title="Product Designer", job_description="Own the design system end to end",
            job_cate=design.cate_code, job_location="Paris", salary=60000,
            cmp_id=globex.cmp_code, posted_at=datetime(2024, 3, 1, 10, 0)
        ),
        JobPost(
            job_title="Legacy Maintainer", job_description="Keep the old platform running",
            job_cate=engineering.cate_code, job_location="Berlin", salary=40000,
            cmp_id=acme.cmp_code, posted_at=datetime(2023, 12, 1, 10, 0),
            status=JobPostStatus.INACTIVE
        ),
    ]
    db_session.add_all(posts)
    db_session.commit()

    return {
        "engineering": engineering,
        "design": design,
        "acme": acme,
        "globex": globex,
        "alice": alice,
        "bob": bob,
        "carol": carol,
        "posts": posts,
    }


@pytest.fixture
def access_data(db_session, portal):
    """
    Profile access state on top of the seeded portal:
    Acme has been granted Alice, and has a pending request for Bob.
    Globex has a rejected request for Carol.
    """
    acme, globex = portal["acme"], portal["globex"]
    grant = ProfileAccess(
        employer_id=acme.cmp_code, candidate_id=portal["alice"].can_code,
        granted_at=datetime(2024, 4, 1, 12, 0)
    )
    pending = AccessRequest(
        employer_id=acme.cmp_code, candidate_id=portal["bob"].can_code,
        requested_at=datetime(2024, 4, 2, 12, 0)
    )
    rejected = AccessRequest(
        employer_id=globex.cmp_code, candidate_id=portal["carol"].can_code,
        status=AccessRequestStatus.REJECTED, requested_at=datetime(2024, 4, 3, 12, 0),
        reviewed_at=datetime(2024, 4, 4, 12, 0)
    )
    db_session.add_all([grant, pending, rejected])
    db_session.commit()
    return {"grant": grant, "pending": pending, "rejected": rejected}


@pytest.fixture
def applications(db_session, portal):
    """Alice applied to the two Python posts, Bob to the senior one."""
    senior, junior = portal["posts"][0], portal["posts"][1]
    rows = [
        JobApplication(candidate_id=portal["alice"].can_code, job_id=senior.job_id,
                       applied_at=datetime(2024, 2, 1, 8, 0)),
        JobApplication(candidate_id=portal["alice"].can_code, job_id=junior.job_id,
                       applied_at=datetime(2024, 2, 2, 8, 0)),
        JobApplication(candidate_id=portal["bob"].can_code, job_id=senior.job_id,
                       applied_at=datetime(2024, 2, 3, 8, 0)),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def profiles(db_session, portal):
    """
    Education and work history for Alice and Bob.
    Alice: two degrees and two jobs, the second one current. Bob: one degree, one internship.
    """
    alice, bob = portal["alice"].can_code, portal["bob"].can_code
    education = [
        CandidateEducation(can_code=alice, can_edu="Bachelors", can_scho="TU Berlin", can_pasy=2016,
                           can_perc=82.5, can_stre="Computer Science", can_cgpa=3.4),
        CandidateEducation(can_code=alice, can_edu="Masters", can_scho="TU Munich", can_pasy=2018,
                           can_stre="Data Science"),
        CandidateEducation(can_code=bob, can_edu="Bachelors", can_scho="Paris Tech", can_pasy=2021,
                           can_perc=71.0, can_stre="Mechanical Engineering"),
    ]
    experience = [
        CandidateExperience(can_code=alice, emp_name="Initech", exp_type="full-time",
                            exp_desg="Backend Developer", cur_ctc=65000,
                            job_stdt=date(2018, 9, 1), job_endt=date(2021, 6, 30)),
        CandidateExperience(can_code=alice, emp_name="Hooli", exp_type="full-time",
                            exp_desg="Senior Python Engineer", cur_ctc=85000,
                            job_stdt=date(2021, 8, 1)),
        CandidateExperience(can_code=bob, emp_name="Acme Corp", exp_type="internship",
                            exp_desg="Engineering Intern", cur_ctc=12000,
                            job_stdt=date(2021, 3, 1), job_endt=date(2021, 8, 31)),
    ]
    db_session.add_all(education + experience)
    db_session.commit()
    return {"education": education, "experience": experience}
