"""Tests for document model conversion."""

from datetime import timezone

from jobboardly.models.company import Company
from jobboardly.models.job import Job
from jobboardly.models.user import UserProfile


def test_job_from_document(job_document):
    job = Job.from_document(job_document)

    assert job.id == "job-1"
    assert job.company_id == "company-1"
    assert job.skills == ["Python", "MongoDB"]
    assert job.created_at.tzinfo == timezone.utc
    assert job.posted_date.tzinfo == timezone.utc
    assert job.status == "pending"


def test_job_to_document_uses_camel_case(job):
    document = job.to_document()

    assert document["_id"] == "job-1"
    assert "id" not in document
    assert document["companyId"] == "company-1"
    assert document["postedById"] == "employer-1"
    assert document["isRemote"] is True
    assert "moderationReason" not in document


def test_company_membership(company_document):
    company = Company.from_document(company_document)
    assert company.is_member("employer-1")
    assert company.is_member("recruiter-1")
    assert not company.is_member("seeker-1")


def test_user_profile_ctc_aliases():
    profile = UserProfile.from_document({
        "_id": "u1",
        "role": "jobSeeker",
        "currentCTCValue": 1200000,
        "expectedCTCNegotiable": True,
        "experiences": [{"companyName": "Initech", "annualCTC": 900000}],
        "unknownField": "ignored",
    })

    assert profile.current_ctc_value == 1200000
    assert profile.expected_ctc_negotiable is True
    assert profile.experiences[0].annual_ctc == 900000
    assert profile.to_document()["currentCTCValue"] == 1200000


def test_admin_like_roles():
    assert UserProfile(id="a", role="moderator").is_admin_like
    assert not UserProfile(id="e", role="employer").is_admin_like
