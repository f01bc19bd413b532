"""Request context from bearer tokens and role-based access rules."""

from dataclasses import dataclass
from typing import Union

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from jobboardly.config import settings
from jobboardly.core.exceptions import PermissionDeniedError
from jobboardly.models.company import Company
from jobboardly.models.job import JobStatus
from jobboardly.models.user import ADMIN_LIKE_ROLES, UserProfile, UserRole, UserStatus

# Tokens are issued by the identity provider; this service only verifies them
security = HTTPBearer()

# Admin-like roles that may view the dashboard but not moderate jobs/companies
READ_ONLY_ADMIN_ROLES = frozenset({UserRole.SUPPORT_AGENT, UserRole.DATA_ANALYST})


@dataclass(frozen=True)
class RequestContext:
    """Identity of the caller for a single request."""

    uid: str
    role: UserRole

    @property
    def is_admin_like(self) -> bool:
        return self.role in ADMIN_LIKE_ROLES


def decode_token(token: str) -> dict:
    """Decode and verify a JWT."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


def context_from_token(token: str) -> RequestContext:
    payload = decode_token(token)
    uid = payload.get("sub")
    role = payload.get("role")
    if not uid or not role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    try:
        return RequestContext(uid=str(uid), role=UserRole(role))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Unknown role: {role}",
        )


async def get_request_context(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> RequestContext:
    """Get the caller's context from the Bearer token."""
    return context_from_token(credentials.credentials)


def require_role(*allowed_roles: UserRole):
    """Dependency to check the caller has one of the allowed roles."""

    async def role_checker(ctx: RequestContext = Depends(get_request_context)) -> RequestContext:
        if ctx.role not in allowed_roles:
            raise PermissionDeniedError(
                f"Insufficient permissions. Required: {[r.value for r in allowed_roles]}"
            )
        return ctx

    return role_checker


require_admin_like = require_role(*ADMIN_LIKE_ROLES)


# ==================== Access rules ====================

def ensure_can_moderate_job(ctx: RequestContext, target_status: Union[JobStatus, str]) -> None:
    if ctx.role in READ_ONLY_ADMIN_ROLES:
        raise PermissionDeniedError("Your role cannot change job statuses")
    if ctx.role == UserRole.MODERATOR and JobStatus(target_status) == JobStatus.SUSPENDED:
        raise PermissionDeniedError("Moderators cannot suspend jobs")


def ensure_can_moderate_company(ctx: RequestContext) -> None:
    if ctx.role in READ_ONLY_ADMIN_ROLES:
        raise PermissionDeniedError("Your role cannot change company statuses")


def ensure_can_change_user_status(ctx: RequestContext, target: UserProfile) -> None:
    """
    Super admins may change any other user; admins may change anyone who is
    not an admin or super admin. Nobody changes their own status.
    """
    if ctx.uid == target.id:
        raise PermissionDeniedError("You cannot change your own status")
    if ctx.role == UserRole.SUPER_ADMIN:
        return
    if ctx.role == UserRole.ADMIN:
        if target.role in (UserRole.ADMIN.value, UserRole.SUPER_ADMIN.value):
            raise PermissionDeniedError("Admins cannot change the status of other admins")
        return
    raise PermissionDeniedError("Your role cannot change user statuses")


def ensure_company_member(ctx: RequestContext, company: Company) -> None:
    """Only the company's admins and recruiters manage its applications."""
    if not company.is_member(ctx.uid):
        raise PermissionDeniedError("You are not a member of this company")


def ensure_can_match_jobs(ctx: RequestContext) -> None:
    if ctx.role != UserRole.JOB_SEEKER:
        raise PermissionDeniedError("Job matching is available to job seekers only")


def ensure_can_match_candidates(ctx: RequestContext) -> None:
    if ctx.role != UserRole.EMPLOYER and not ctx.is_admin_like:
        raise PermissionDeniedError("Candidate matching is available to employers only")


def ensure_company_admin(ctx: RequestContext, company: Company) -> None:
    """Only company admins edit the company profile."""
    if ctx.uid not in company.admin_uids:
        raise PermissionDeniedError("Only company admins can edit the company profile")


def ensure_account_active(profile: UserProfile) -> None:
    if profile.status != UserStatus.ACTIVE:
        raise PermissionDeniedError(f"Account is {profile.status}")
