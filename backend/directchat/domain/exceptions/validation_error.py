"""
DomainValidationError - Raised when a business rule is violated.
Maps to: HTTP 422 Unprocessable Entity (request-shape rules map to 400)
"""

from directchat.domain.exceptions.base import DomainError


class DomainValidationError(DomainError):
    """Exception raised for domain validation errors."""

    code = "validation_error"

    def __init__(self, message: str):
        super().__init__(message)


class SelfConversationError(DomainValidationError):
    code = "self_conversation"

    def __init__(self, message: str = "Cannot create conversation with yourself"):
        super().__init__(message)


class MissingFileReferenceError(DomainValidationError):
    code = "missing_file_reference"

    def __init__(self, message: str = "file_id is required for file messages"):
        super().__init__(message)


class InvalidValueError(DomainValidationError, ValueError):
    """Raised by value objects when a raw value cannot be wrapped."""
