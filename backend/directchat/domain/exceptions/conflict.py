"""
ConflictError - Raised when a write collides with existing state.
Maps to: HTTP 409 Conflict
"""

from directchat.domain.exceptions.base import DomainError


class ConflictError(DomainError):
    code = "conflict"

    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message)


class DuplicateEmailError(ConflictError):
    code = "duplicate_email"

    def __init__(self, message: str = "Email already exists"):
        super().__init__(message)


class DuplicateUsernameError(ConflictError):
    code = "duplicate_username"

    def __init__(self, message: str = "Username already exists"):
        super().__init__(message)


class ConversationAlreadyExistsError(ConflictError):
    """
    Raised by ConversationRepository.create when the unordered pair is taken.

    Never reaches the caller: CreateConversationHandler resolves it by
    looking the winning row up.
    """

    code = "conversation_exists"

    def __init__(self, message: str = "Conversation already exists for this pair"):
        super().__init__(message)
