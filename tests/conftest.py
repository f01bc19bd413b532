"""Shared fixtures: sample documents and an in-memory stand-in for the motor database."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from jobboardly.models.company import Company
from jobboardly.models.job import Job
from jobboardly.models.user import (
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    UserProfile,
)


def make_collection() -> MagicMock:
    """A motor collection whose awaitable methods are AsyncMocks."""
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1, modified_count=1))
    collection.update_many = AsyncMock(return_value=MagicMock(matched_count=0, modified_count=0))
    collection.count_documents = AsyncMock(return_value=0)

    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value = cursor
    collection.cursor = cursor
    return collection


class FakeDatabase:
    """Indexable like AsyncIOMotorDatabase; one mock collection per name."""

    def __init__(self):
        self.collections = {}

    def __getitem__(self, name: str) -> MagicMock:
        if name not in self.collections:
            self.collections[name] = make_collection()
        return self.collections[name]


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def job_document():
    return {
        "_id": "job-1",
        "title": "Backend Engineer",
        "company": "Acme",
        "companyId": "company-1",
        "location": "Bengaluru",
        "type": "Full-time",
        "isRemote": True,
        "skills": ["Python", "MongoDB", "Python"],
        "salaryMin": 1200000,
        "salaryMax": 2500000,
        "postedById": "employer-1",
        "status": "pending",
        "moderationReason": None,
        "createdAt": datetime(2024, 5, 1, 10, 0),
        "postedDate": "2024-05-01T10:00:00Z",
        "responsibilities": "Build APIs",
        "requirements": "3+ years of Python",
        "minExperienceYears": 3,
        "maxExperienceYears": 6,
    }


@pytest.fixture
def job(job_document):
    return Job.from_document(job_document)


@pytest.fixture
def company_document():
    return {
        "_id": "company-1",
        "name": "Acme",
        "adminUids": ["employer-1"],
        "recruiterUids": ["recruiter-1"],
        "status": "pending",
        "createdAt": datetime(2024, 4, 1, tzinfo=timezone.utc),
    }


@pytest.fixture
def company(company_document):
    return Company.from_document(company_document)


@pytest.fixture
def seeker():
    return UserProfile(
        id="seeker-1",
        role="jobSeeker",
        name="Asha Rao",
        email="asha@example.com",
        headline="Python developer",
        skills=["Python", "FastAPI"],
        experiences=[
            ExperienceEntry(
                company_name="Initech",
                job_role="Developer",
                start_date="2020-01",
                currently_working=True,
                description="APIs",
                annual_ctc=1500000,
            )
        ],
        educations=[
            EducationEntry(
                level="Graduate",
                degree_name="B.Tech",
                institute_name="IIT",
                start_year=2015,
                end_year=2019,
            )
        ],
        languages=[LanguageEntry(language_name="English", proficiency="Native", can_read=True)],
        preferred_locations=["Bengaluru"],
        job_search_status="activelyLooking",
        is_profile_searchable=True,
    )
