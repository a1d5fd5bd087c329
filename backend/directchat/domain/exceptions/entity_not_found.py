"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found (ArtifactMissingError maps to 410 Gone)
"""

from directchat.domain.exceptions.base import DomainError


class EntityNotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    code = "not_found"

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class UnknownUserError(EntityNotFoundError):
    code = "unknown_user"

    def __init__(self, message: str = "One or both users do not exist"):
        super().__init__(message)


class ConversationNotFoundError(EntityNotFoundError):
    code = "conversation_not_found"

    def __init__(self, message: str = "Conversation not found"):
        super().__init__(message)


class FileRecordNotFoundError(EntityNotFoundError):
    code = "file_not_found"

    def __init__(self, message: str = "File not found"):
        super().__init__(message)


class ArtifactMissingError(EntityNotFoundError):
    """The File record exists but its bytes are gone from storage."""

    code = "artifact_missing"

    def __init__(self, message: str = "File not found on disk"):
        super().__init__(message)
