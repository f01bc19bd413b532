"""Job posting schemas."""

from typing import List, Optional

from pydantic import Field, model_validator

from jobboardly.models.job import ExperienceLevel, JobType, ScreeningQuestion
from jobboardly.schemas.base import CamelModel


class _JobFields(CamelModel):
    location: Optional[str] = None
    type: Optional[JobType] = None
    is_remote: Optional[bool] = None
    skills: Optional[List[str]] = None
    salary_min: Optional[float] = Field(None, ge=0)
    salary_max: Optional[float] = Field(None, ge=0)
    responsibilities: Optional[str] = None
    requirements: Optional[str] = None
    benefits: Optional[str] = None
    industry: Optional[str] = None
    department: Optional[str] = None
    experience_level: Optional[ExperienceLevel] = None
    min_experience_years: Optional[int] = Field(None, ge=0)
    max_experience_years: Optional[int] = Field(None, ge=0)
    education_qualification: Optional[str] = None
    screening_questions: Optional[List[ScreeningQuestion]] = None

    @model_validator(mode="after")
    def check_ranges(self):
        if self.salary_min is not None and self.salary_max is not None and self.salary_min > self.salary_max:
            raise ValueError("salaryMin must not exceed salaryMax")
        if (
            self.min_experience_years is not None
            and self.max_experience_years is not None
            and self.min_experience_years > self.max_experience_years
        ):
            raise ValueError("minExperienceYears must not exceed maxExperienceYears")
        return self


class JobCreate(_JobFields):
    title: str = Field(..., min_length=1)


class JobUpdate(_JobFields):
    """Only the fields sent are changed."""

    title: Optional[str] = Field(None, min_length=1)
