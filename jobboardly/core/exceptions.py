"""Application error taxonomy."""

from typing import Optional


class JobBoardlyError(Exception):
    """Base class for all application errors."""

    default_message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class MatchingInputError(JobBoardlyError):
    """AI matching input failed schema validation. Raised before any external call."""

    default_message = "Invalid matching input"


class NotFoundError(JobBoardlyError):
    """A referenced entity does not exist."""

    default_message = "Not found"

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class PermissionDeniedError(JobBoardlyError):
    """Caller's role does not allow the requested action."""

    default_message = "Permission denied"


class ExternalServiceError(JobBoardlyError):
    """An external collaborator (prompt service, document store) failed."""

    default_message = "External service failure"


class PromptServiceError(ExternalServiceError):
    """The generative model call failed (network, auth, quota, ...)."""

    default_message = "AI service request failed"


class ResponseFormatError(ExternalServiceError):
    """The model response could not be parsed into the expected schema."""

    default_message = "AI service returned an invalid response"


class StoreUnavailableError(ExternalServiceError):
    """The document store could not be reached or rejected the operation."""

    default_message = "Document store unavailable"


class ConflictError(JobBoardlyError):
    """The write conflicts with the current state of a record."""

    default_message = "Conflicting request"


class DuplicateApplicationError(ConflictError):
    """The applicant already applied to this job."""

    default_message = "Already applied to this job"


class ProfileExistsError(ConflictError):
    """A profile is already registered for this uid."""

    default_message = "Profile already exists"


class ApplicationStateError(ConflictError):
    """The application's current status does not allow the change."""

    default_message = "Application cannot be changed in its current status"
