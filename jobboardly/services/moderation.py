"""
Moderation state machine.

Pure decision functions that compute the exact field set to persist when an
admin changes the status of a job, company or user. Persistence is the
caller's job (see ``AdminService``).
"""

from dataclasses import dataclass
from typing import Optional, Union

from jobboardly.models.company import CompanyStatus
from jobboardly.models.job import JobStatus
from jobboardly.models.user import UserStatus

# Statuses that always carry a moderation reason
_JOB_FLAGGED = frozenset({JobStatus.REJECTED, JobStatus.SUSPENDED})
_COMPANY_FLAGGED = frozenset({CompanyStatus.REJECTED, CompanyStatus.SUSPENDED, CompanyStatus.DELETED})


@dataclass(frozen=True)
class JobStatusDecision:
    status: JobStatus
    moderation_reason: Optional[str]


@dataclass(frozen=True)
class CompanyStatusDecision:
    final_status: CompanyStatus
    moderation_reason: Optional[str]


@dataclass(frozen=True)
class UserStatusDecision:
    status: UserStatus


def default_reason(status: Union[JobStatus, CompanyStatus]) -> str:
    """Default moderation message, e.g. ``"Suspended by admin"``."""
    value = status.value
    return f"{value[:1].upper()}{value[1:]} by admin"


def _resolve_reason(status, flagged: frozenset, approved, reason: Optional[str]) -> Optional[str]:
    if status in flagged:
        return reason if reason else default_reason(status)
    if status == approved and reason:
        return reason
    # Approved without a reason (or pending) clears any prior reason
    return None


def decide_job_status(
    target_status: Union[JobStatus, str],
    reason: Optional[str] = None,
) -> JobStatusDecision:
    """
    Decide the persisted status and moderation reason for a job.

    Rejected/suspended always carry a reason (explicit or
    ``"<Status> by admin"``); approved keeps an explicit non-empty reason and
    otherwise clears it.
    """
    status = JobStatus(target_status)
    return JobStatusDecision(
        status=status,
        moderation_reason=_resolve_reason(status, _JOB_FLAGGED, JobStatus.APPROVED, reason),
    )


def decide_company_status(
    intended: Union[CompanyStatus, str],
    reason: Optional[str] = None,
) -> CompanyStatusDecision:
    """
    Decide the persisted status and moderation reason for a company.

    The "active" intent is normalized to "approved"; "active" is never
    persisted. Rejected/suspended/deleted always carry a reason.
    """
    final_status = CompanyStatus(intended)
    if final_status == CompanyStatus.ACTIVE:
        final_status = CompanyStatus.APPROVED

    return CompanyStatusDecision(
        final_status=final_status,
        moderation_reason=_resolve_reason(
            final_status, _COMPANY_FLAGGED, CompanyStatus.APPROVED, reason
        ),
    )


def decide_user_status(new_status: Union[UserStatus, str]) -> UserStatusDecision:
    """Users have no reason tracking; the new status is applied as-is."""
    return UserStatusDecision(status=UserStatus(new_status))
