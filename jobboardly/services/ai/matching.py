"""
AI matching flows.

A flow validates its input, renders a fixed prompt template, makes exactly one
provider call and validates the model's JSON answer. The ranked ID list is
returned in the order the model produced it. Nothing is cached or retried.
"""
from typing import Any, Generic, List, Mapping, Type, TypeVar, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from jobboardly.core.exceptions import (
    MatchingInputError,
    PromptServiceError,
    ResponseFormatError,
)
from .base import PromptProvider, extract_json_object

logger = structlog.get_logger(__name__)


class _MatchingModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class _MatchingInput(_MatchingModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @field_validator("*")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class JobMatchingInput(_MatchingInput):
    job_seeker_profile: str = Field(..., alias="jobSeekerProfile")
    job_postings: str = Field(..., alias="jobPostings")


class JobMatchingOutput(_MatchingModel):
    relevant_job_ids: List[str] = Field(..., alias="relevantJobIDs")
    reasoning: str


class CandidateMatchingInput(_MatchingInput):
    job_description: str = Field(..., alias="jobDescription")
    candidate_profiles: str = Field(..., alias="candidateProfiles")


class CandidateMatchingOutput(_MatchingModel):
    relevant_candidate_ids: List[str] = Field(..., alias="relevantCandidateIDs")
    reasoning: str


InputT = TypeVar("InputT", bound=_MatchingInput)
OutputT = TypeVar("OutputT", bound=_MatchingModel)


class MatchingFlow(Generic[InputT, OutputT]):
    """Schema-validated, single-shot prompt call."""

    def __init__(
        self,
        name: str,
        input_model: Type[InputT],
        output_model: Type[OutputT],
        template: str,
    ):
        self.name = name
        self.input_model = input_model
        self.output_model = output_model
        self.template = template

    def validate_input(self, data: Union[InputT, Mapping[str, Any]]) -> InputT:
        if isinstance(data, BaseModel):
            # Instances may come from model_construct and skip validation
            data = {name: getattr(data, name, None) for name in type(data).model_fields}
        try:
            return self.input_model.model_validate(data)
        except ValidationError as e:
            raise MatchingInputError(f"Invalid {self.name} input: {e}") from e

    def render(self, data: InputT) -> str:
        return self.template.format(**data.model_dump(by_alias=True))

    def parse_output(self, text: str) -> OutputT:
        try:
            payload = extract_json_object(text)
            return self.output_model.model_validate(payload)
        except (ValueError, ValidationError) as e:
            raise ResponseFormatError(f"{self.name} response did not match the expected format: {e}") from e

    async def run(self, data: Union[InputT, Mapping[str, Any]], provider: PromptProvider) -> OutputT:
        validated = self.validate_input(data)
        prompt = self.render(validated)

        logger.info("matching_flow_started", flow=self.name, provider=provider.name, prompt_chars=len(prompt))
        try:
            text = await provider.generate(prompt)
        except PromptServiceError:
            raise
        except Exception as e:
            logger.error("matching_flow_provider_failed", flow=self.name, error=str(e))
            raise PromptServiceError(str(e)) from e

        try:
            result = self.parse_output(text)
        except ResponseFormatError as e:
            logger.warning("matching_flow_bad_response", flow=self.name, error=e.message)
            raise

        logger.info("matching_flow_completed", flow=self.name)
        return result


JOB_MATCHING_TEMPLATE = """You are an experienced career counselor who matches job seekers with suitable openings.
Below are one job seeker's profile and a set of approved job postings.

Job Seeker Profile:
{jobSeekerProfile}

Available Job Postings:
{jobPostings}

Instructions:
1. Study the seeker's skills, languages, work experience, education, preferred locations, desired salary (INR) and job search status.
2. Study each posting's description, required skills, location, job type, remote option and salary range.
3. Select the Job IDs that are the strongest overall fit. Judge the whole profile, not keyword overlap.
4. Order the selected Job IDs from most to least relevant.
5. Explain the selection, naming concrete links between the profile and each job.

If the profile is sparse, use your best judgment with what is given.
If no job fits, return an empty list and explain why.

Respond with a single JSON object and nothing else:
{{"relevantJobIDs": ["<job id>", ...], "reasoning": "<explanation>"}}
"""


CANDIDATE_MATCHING_TEMPLATE = """You are an experienced recruitment assistant who matches candidates to a job.
Below are one job description and a set of candidate profiles.

Job Description:
{jobDescription}

Candidate Profiles:
{candidateProfiles}

Instructions:
1. Compare every candidate against the job's core requirements: skills, years and kind of experience, education, location and salary expectations.
2. Select the Candidate UIDs that are the strongest fit.
3. Order the selected UIDs from most to least relevant.
4. Explain the selection, naming the skills, experience or qualifications that make each candidate fit.

If no candidate fits, return an empty list and explain why.

Respond with a single JSON object and nothing else:
{{"relevantCandidateIDs": ["<candidate uid>", ...], "reasoning": "<explanation>"}}
"""


job_matching_flow: MatchingFlow[JobMatchingInput, JobMatchingOutput] = MatchingFlow(
    name="job_matching",
    input_model=JobMatchingInput,
    output_model=JobMatchingOutput,
    template=JOB_MATCHING_TEMPLATE,
)

candidate_matching_flow: MatchingFlow[CandidateMatchingInput, CandidateMatchingOutput] = MatchingFlow(
    name="candidate_matching",
    input_model=CandidateMatchingInput,
    output_model=CandidateMatchingOutput,
    template=CANDIDATE_MATCHING_TEMPLATE,
)
