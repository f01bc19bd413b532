"""
Matching request builder.

Renders profiles and job postings into the plain-text blocks fed to the AI
matching prompts. Every formatter is deterministic and total: missing fields
render as ``N/A`` in a fixed position rather than being dropped, so the prompt
input keeps a stable shape.
"""

import re
from typing import Iterable, List, Optional

from jobboardly.models.job import Job
from jobboardly.models.user import EducationEntry, ExperienceEntry, LanguageEntry, UserProfile
from jobboardly.utils.currency import format_currency_inr

NA = "N/A"

CANDIDATE_SEPARATOR = "\n\n---\n\n"
JOB_SEPARATOR = "\n---\n"


def _or_na(value) -> str:
    if value is None or value == "":
        return NA
    return str(value)


def _flag(value: bool) -> str:
    return "Y" if value else "N"


def format_experiences(entries: Optional[Iterable[ExperienceEntry]]) -> str:
    """One ``; ``-joined segment per experience entry."""
    entries = list(entries or [])
    if not entries:
        return "No work experience listed."

    segments = []
    for exp in entries:
        end = "Present" if exp.currently_working else _or_na(exp.end_date)
        segment = (
            f"Company: {_or_na(exp.company_name)}, Role: {_or_na(exp.job_role)}, "
            f"Duration: {_or_na(exp.start_date)} to {end}"
        )
        if exp.annual_ctc:
            segment += f", Annual CTC: {format_currency_inr(exp.annual_ctc)}"
        segment += f". Description: {_or_na(exp.description)}"
        segments.append(segment)
    return "; ".join(segments)


def format_educations(entries: Optional[Iterable[EducationEntry]]) -> str:
    """One ``; ``-joined segment per education entry."""
    entries = list(entries or [])
    if not entries:
        return "No education listed."

    return "; ".join(
        f"Level: {_or_na(edu.level)}, Degree: {_or_na(edu.degree_name)}, "
        f"Institute: {_or_na(edu.institute_name)}, "
        f"Batch: {_or_na(edu.start_year)}-{_or_na(edu.end_year)}, "
        f"Specialization: {_or_na(edu.specialization)}, "
        f"Course Type: {_or_na(edu.course_type)}. "
        f"Description: {_or_na(edu.description)}"
        for edu in entries
    )


def format_languages(entries: Optional[Iterable[LanguageEntry]]) -> str:
    """``Name (Proficiency: P, Read: Y, Write: N, Speak: Y)`` joined by ``, ``."""
    entries = list(entries or [])
    if not entries:
        return "No languages listed."

    return ", ".join(
        f"{_or_na(lang.language_name)} (Proficiency: {_or_na(lang.proficiency)}, "
        f"Read: {_flag(lang.can_read)}, Write: {_flag(lang.can_write)}, "
        f"Speak: {_flag(lang.can_speak)})"
        for lang in entries
    )


def _humanize(camel: str) -> str:
    """activelyLooking -> Actively Looking"""
    spaced = re.sub(r"([A-Z])", r" \1", camel)
    return spaced[:1].upper() + spaced[1:]


def format_candidate_profile(profile: UserProfile) -> str:
    """Full profile block for one job seeker, keyed by UID."""
    lines: List[str] = [
        f"Candidate UID: {profile.id}",
        f"Name: {_or_na(profile.name)}",
    ]
    if profile.email:
        lines.append(f"Email: {profile.email}")
    if profile.mobile_number:
        lines.append(f"Mobile: {profile.mobile_number}")
    if profile.headline:
        lines.append(f"Headline: {profile.headline}")
    if profile.gender:
        lines.append(f"Gender: {profile.gender}")
    if profile.home_state:
        lines.append(f"Home State: {profile.home_state}")
    if profile.home_city:
        lines.append(f"Home City: {profile.home_city}")

    if profile.total_years_experience is not None or profile.total_months_experience is not None:
        lines.append(
            f"Total Experience: {profile.total_years_experience or 0} years, "
            f"{profile.total_months_experience or 0} months"
        )
    if profile.current_ctc_value is not None:
        suffix = " (Confidential)" if profile.current_ctc_confidential else ""
        lines.append(f"Current Annual CTC (INR): {format_currency_inr(profile.current_ctc_value)}{suffix}")
    if profile.expected_ctc_value is not None:
        suffix = " (Negotiable)" if profile.expected_ctc_negotiable else ""
        lines.append(f"Expected Annual CTC (INR): {format_currency_inr(profile.expected_ctc_value)}{suffix}")

    if profile.skills:
        lines.append(f"Skills: {', '.join(profile.skills)}")
    if profile.languages:
        lines.append(f"Languages: {format_languages(profile.languages)}")

    lines.append(f"Work Experience Summary:\n{format_experiences(profile.experiences)}")
    lines.append(f"Education Summary:\n{format_educations(profile.educations)}")

    if profile.portfolio_url:
        lines.append(f"Portfolio URL: {profile.portfolio_url}")
    if profile.linkedin_url:
        lines.append(f"LinkedIn URL: {profile.linkedin_url}")
    if profile.preferred_locations:
        lines.append(f"Preferred Locations: {', '.join(profile.preferred_locations)}")
    if profile.job_search_status:
        lines.append(f"Current Job Search Status: {_humanize(profile.job_search_status)}")
    if profile.notice_period:
        lines.append(f"Notice Period: {profile.notice_period}")

    if profile.parsed_resume_text:
        lines.append(
            f"\n--- Additional Resume Summary (from parsed document) ---\n{profile.parsed_resume_text}"
        )
    return "\n".join(lines).strip()


def format_candidates(profiles: Iterable[UserProfile]) -> str:
    return CANDIDATE_SEPARATOR.join(format_candidate_profile(p) for p in profiles)


def _salary_range(job: Job) -> str:
    if job.salary_min is not None and job.salary_max is not None:
        return f"{format_currency_inr(job.salary_min)} - {format_currency_inr(job.salary_max)}"
    if job.salary_min is not None:
        return f"From {format_currency_inr(job.salary_min)}"
    if job.salary_max is not None:
        return f"Up to {format_currency_inr(job.salary_max)}"
    return NA


def _description(job: Job) -> str:
    parts = []
    if job.responsibilities:
        parts.append(f"Responsibilities: {job.responsibilities}")
    if job.requirements:
        parts.append(f"Requirements: {job.requirements}")
    return "\n".join(parts) if parts else NA


def format_job_posting(job: Job) -> str:
    """Single posting block, keyed by Job ID."""
    experience = NA
    if job.min_experience_years is not None or job.max_experience_years is not None:
        experience = f"{_or_na(job.min_experience_years)}-{_or_na(job.max_experience_years)} years"

    return "\n".join([
        f"Job ID: {job.id}",
        f"Title: {_or_na(job.title)}",
        f"Company: {_or_na(job.company)}",
        f"Location: {_or_na(job.location)}",
        f"Type: {_or_na(job.type)}",
        f"Remote: {'Yes' if job.is_remote else 'No'}",
        f"Experience Level: {_or_na(job.experience_level)}",
        f"Experience Required: {experience}",
        f"Description:\n{_description(job)}",
        f"Required Skills: {', '.join(job.skills) if job.skills else NA}",
        f"Salary Range (Annual INR): {_salary_range(job)}",
    ])


def format_job_postings(jobs: Iterable[Job]) -> str:
    return JOB_SEPARATOR.join(format_job_posting(job) for job in jobs)


def format_job_description(job: Job) -> str:
    """Job block used as the candidate-matching job description."""
    return "\n".join([
        format_job_posting(job),
        f"Industry: {_or_na(job.industry)}",
        f"Department: {_or_na(job.department)}",
        f"Education Qualification: {_or_na(job.education_qualification)}",
        f"Benefits: {_or_na(job.benefits)}",
    ])
