"""Tests for the matching request builder."""

from hypothesis import given, strategies as st

from jobboardly.models.job import Job
from jobboardly.models.user import (
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    UserProfile,
)
from jobboardly.services.matching_builder import (
    CANDIDATE_SEPARATOR,
    JOB_SEPARATOR,
    format_candidate_profile,
    format_candidates,
    format_educations,
    format_experiences,
    format_job_description,
    format_job_posting,
    format_job_postings,
    format_languages,
)


class TestSectionFormatters:

    def test_empty_sections_have_fixed_messages(self):
        assert format_experiences([]) == "No work experience listed."
        assert format_experiences(None) == "No work experience listed."
        assert format_educations([]) == "No education listed."
        assert format_languages([]) == "No languages listed."

    def test_empty_experiences_is_idempotent(self):
        assert format_experiences([]) == format_experiences([])

    def test_current_experience_with_ctc(self):
        text = format_experiences([
            ExperienceEntry(
                company_name="Initech",
                job_role="Developer",
                start_date="2020-01",
                currently_working=True,
                description="APIs",
                annual_ctc=1500000,
            )
        ])
        assert text == (
            "Company: Initech, Role: Developer, Duration: 2020-01 to Present, "
            "Annual CTC: ₹15L. Description: APIs"
        )

    def test_experience_without_ctc_or_end_date(self):
        text = format_experiences([ExperienceEntry(company_name="Initech", annual_ctc=0)])
        assert text == "Company: Initech, Role: N/A, Duration: N/A to N/A. Description: N/A"

    def test_experiences_are_joined_in_order(self):
        text = format_experiences([
            ExperienceEntry(company_name="First"),
            ExperienceEntry(company_name="Second"),
        ])
        first, second = text.split("; ")
        assert first.startswith("Company: First")
        assert second.startswith("Company: Second")

    def test_education_segment(self):
        text = format_educations([
            EducationEntry(
                level="Graduate",
                degree_name="B.Tech",
                institute_name="IIT",
                start_year=2015,
                end_year=2019,
                specialization="CS",
                course_type="Full Time",
            )
        ])
        assert text == (
            "Level: Graduate, Degree: B.Tech, Institute: IIT, Batch: 2015-2019, "
            "Specialization: CS, Course Type: Full Time. Description: N/A"
        )

    def test_language_flags(self):
        text = format_languages([
            LanguageEntry(language_name="English", proficiency="Native", can_read=True, can_speak=True),
            LanguageEntry(language_name="Hindi"),
        ])
        assert text == (
            "English (Proficiency: Native, Read: Y, Write: N, Speak: Y), "
            "Hindi (Proficiency: N/A, Read: N, Write: N, Speak: N)"
        )

    @given(st.lists(st.builds(ExperienceEntry, company_name=st.one_of(st.none(), st.text(max_size=20))), max_size=5))
    def test_experience_formatting_is_total(self, entries):
        text = format_experiences(entries)
        assert isinstance(text, str) and text


class TestCandidateProfile:

    def test_profile_includes_sections(self, seeker):
        text = format_candidate_profile(seeker)
        assert text.startswith("Candidate UID: seeker-1")
        assert "Skills: Python, FastAPI" in text
        assert "Work Experience Summary:\nCompany: Initech" in text
        assert "Education Summary:\nLevel: Graduate" in text
        assert "Languages: English (Proficiency: Native, Read: Y, Write: N, Speak: N)" in text
        assert "Preferred Locations: Bengaluru" in text
        assert "Current Job Search Status: Actively Looking" in text

    def test_minimal_profile(self):
        text = format_candidate_profile(UserProfile(id="u1", role="jobSeeker"))
        assert "Name: N/A" in text
        assert "No work experience listed." in text
        assert "No education listed." in text
        assert "Skills:" not in text

    def test_candidates_are_separated(self, seeker):
        other = UserProfile(id="seeker-2", role="jobSeeker", name="Ravi")
        text = format_candidates([seeker, other])
        blocks = text.split(CANDIDATE_SEPARATOR)
        assert len(blocks) == 2
        assert blocks[1].startswith("Candidate UID: seeker-2")


class TestJobPosting:

    def test_posting_block(self, job):
        text = format_job_posting(job)
        assert text.splitlines()[0] == "Job ID: job-1"
        assert "Remote: Yes" in text
        assert "Type: Full-time" in text
        assert "Experience Required: 3-6 years" in text
        assert "Required Skills: Python, MongoDB" in text
        assert "Salary Range (Annual INR): ₹12L - ₹25L" in text
        assert "Description:\nResponsibilities: Build APIs\nRequirements: 3+ years of Python" in text

    def test_missing_fields_render_na(self):
        job = Job(id="j", title="Intern", company_id="c", posted_by_id="p")
        text = format_job_posting(job)
        assert "Location: N/A" in text
        assert "Salary Range (Annual INR): N/A" in text
        assert "Required Skills: N/A" in text
        assert "Description:\nN/A" in text

    def test_one_sided_salary(self):
        job = Job(id="j", title="Intern", company_id="c", posted_by_id="p", salary_min=300000)
        assert "Salary Range (Annual INR): From ₹3L" in format_job_posting(job)

    def test_postings_are_separated_in_order(self, job):
        second = Job(id="job-2", title="Frontend", company_id="c", posted_by_id="p")
        blocks = format_job_postings([job, second]).split(JOB_SEPARATOR)
        assert [b.splitlines()[0] for b in blocks] == ["Job ID: job-1", "Job ID: job-2"]

    def test_job_description_adds_details(self, job):
        text = format_job_description(job)
        assert text.startswith(format_job_posting(job))
        assert "Industry: N/A" in text
        assert "Benefits: N/A" in text
