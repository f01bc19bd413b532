"""Tests for the job, company and user read services."""

import pytest

from jobboardly.core.exceptions import NotFoundError
from jobboardly.db.mongodb import COMPANIES, JOBS, USERS
from jobboardly.services.company_service import CompanyService
from jobboardly.services.job_service import JobService
from jobboardly.services.user_service import UserService


class TestJobService:

    @pytest.mark.asyncio
    async def test_get_job(self, fake_db, job_document):
        fake_db[JOBS].find_one.return_value = job_document
        job = await JobService(fake_db).get_job("job-1")
        assert job.title == "Backend Engineer"

    @pytest.mark.asyncio
    async def test_get_missing_job(self, fake_db):
        with pytest.raises(NotFoundError, match="Job job-9 not found"):
            await JobService(fake_db).get_job("job-9")

    @pytest.mark.asyncio
    async def test_approved_jobs_query(self, fake_db, job_document):
        fake_db[JOBS].cursor.to_list.return_value = [job_document]

        jobs = await JobService(fake_db).get_approved_jobs(limit=20)

        assert [j.id for j in jobs] == ["job-1"]
        assert fake_db[JOBS].find.call_args.args[0] == {"status": "approved"}
        fake_db[JOBS].cursor.limit.assert_called_with(20)

    @pytest.mark.asyncio
    async def test_jobs_by_ids_keep_requested_order(self, fake_db, job_document):
        fake_db[JOBS].cursor.to_list.return_value = [job_document, {**job_document, "_id": "job-2"}]

        jobs = await JobService(fake_db).get_jobs_by_ids(["job-2", "missing", "job-1"])

        assert [j.id for j in jobs] == ["job-2", "job-1"]

    @pytest.mark.asyncio
    async def test_jobs_by_empty_ids(self, fake_db):
        assert await JobService(fake_db).get_jobs_by_ids([]) == []
        fake_db[JOBS].find.assert_not_called()


class TestCompanyService:

    @pytest.mark.asyncio
    async def test_get_company(self, fake_db, company_document):
        fake_db[COMPANIES].find_one.return_value = company_document
        company = await CompanyService(fake_db).get_company("company-1")
        assert company.admin_uids == ["employer-1"]

    @pytest.mark.asyncio
    async def test_recruiters_with_empty_list_skip_the_query(self, fake_db):
        assert await CompanyService(fake_db).get_company_recruiters([]) == []
        fake_db[USERS].find.assert_not_called()

    @pytest.mark.asyncio
    async def test_recruiters(self, fake_db):
        fake_db[USERS].cursor.to_list.return_value = [{"_id": "recruiter-1", "role": "employer", "name": "Rita"}]

        recruiters = await CompanyService(fake_db).get_company_recruiters(["recruiter-1"])

        assert [r.name for r in recruiters] == ["Rita"]
        assert fake_db[USERS].find.call_args.args[0] == {"_id": {"$in": ["recruiter-1"]}}


class TestUserService:

    @pytest.mark.asyncio
    async def test_get_missing_user(self, fake_db):
        with pytest.raises(NotFoundError):
            await UserService(fake_db).get_user("ghost")

    @pytest.mark.asyncio
    async def test_searchable_candidates_query(self, fake_db):
        await UserService(fake_db).get_searchable_candidates(limit=15)

        query = fake_db[USERS].find.call_args.args[0]
        assert query == {"role": "jobSeeker", "status": "active", "isProfileSearchable": True}
        fake_db[USERS].cursor.limit.assert_called_with(15)
