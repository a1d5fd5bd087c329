"""
UserEmail Value Object - Wraps user email with validation.

Emails are compared exactly as given. No case folding happens here, so
"Alice@x.io" and "alice@x.io" are two different accounts.
"""

from dataclasses import dataclass

from directchat.domain.exceptions.validation_error import InvalidValueError


@dataclass(frozen=True)
class UserEmail:
    value: str  # user_email, presented as email

    def __post_init__(self):
        if not self.value or "@" not in self.value:
            raise InvalidValueError(f"Invalid user email: {self.value}")
        local, _, domain = self.value.rpartition("@")
        if not local or not domain or any(ch.isspace() for ch in self.value):
            raise InvalidValueError(f"Invalid user email: {self.value}")

    def __str__(self) -> str:
        return self.value
