"""AI services package"""
from .base import PromptProvider
from .factory import AIFactory, get_ai_provider
from .matching import (
    CandidateMatchingInput,
    CandidateMatchingOutput,
    JobMatchingInput,
    JobMatchingOutput,
    MatchingFlow,
    candidate_matching_flow,
    job_matching_flow,
)

__all__ = [
    'AIFactory',
    'CandidateMatchingInput',
    'CandidateMatchingOutput',
    'JobMatchingInput',
    'JobMatchingOutput',
    'MatchingFlow',
    'PromptProvider',
    'candidate_matching_flow',
    'get_ai_provider',
    'job_matching_flow',
]
