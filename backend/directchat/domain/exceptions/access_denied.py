"""
AccessDeniedError - Raised when user lacks permission to access a resource.
Maps to: HTTP 403 Forbidden
"""

from directchat.domain.exceptions.base import DomainError


class AccessDeniedError(DomainError):
    """Raised when user lacks permission to access a resource"""

    code = "access_denied"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class SenderNotParticipantError(AccessDeniedError):
    code = "sender_not_participant"

    def __init__(self, message: str = "Sender is not part of this conversation"):
        super().__init__(message)
