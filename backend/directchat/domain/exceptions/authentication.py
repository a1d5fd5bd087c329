"""
InvalidCredentialsError - Raised when login fails.
Maps to: HTTP 401 Unauthorized

The message is the same whether the email is unknown or the password is wrong.
"""

from directchat.domain.exceptions.base import DomainError


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)
