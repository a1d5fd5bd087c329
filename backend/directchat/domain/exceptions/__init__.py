"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer, which maps each ``code`` to an HTTP status.
"""

from directchat.domain.exceptions.base import DomainError
from directchat.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    UnknownUserError,
    ConversationNotFoundError,
    FileRecordNotFoundError,
    ArtifactMissingError,
)
from directchat.domain.exceptions.access_denied import (
    AccessDeniedError,
    SenderNotParticipantError,
)
from directchat.domain.exceptions.validation_error import (
    DomainValidationError,
    InvalidValueError,
    SelfConversationError,
    MissingFileReferenceError,
)
from directchat.domain.exceptions.conflict import (
    ConflictError,
    DuplicateEmailError,
    DuplicateUsernameError,
    ConversationAlreadyExistsError,
)
from directchat.domain.exceptions.authentication import InvalidCredentialsError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "UnknownUserError",
    "ConversationNotFoundError",
    "FileRecordNotFoundError",
    "ArtifactMissingError",
    "AccessDeniedError",
    "SenderNotParticipantError",
    "DomainValidationError",
    "InvalidValueError",
    "SelfConversationError",
    "MissingFileReferenceError",
    "ConflictError",
    "DuplicateEmailError",
    "DuplicateUsernameError",
    "ConversationAlreadyExistsError",
    "InvalidCredentialsError",
]
