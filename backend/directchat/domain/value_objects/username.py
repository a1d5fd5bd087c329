"""
Username Value Object - Public handle, 3 to 30 characters, case kept as given.
"""

from dataclasses import dataclass

from directchat.domain.exceptions.validation_error import InvalidValueError

MIN_LENGTH = 3
MAX_LENGTH = 30


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self):
        if not self.value or not (MIN_LENGTH <= len(self.value) <= MAX_LENGTH):
            raise InvalidValueError(
                f"Username must be between {MIN_LENGTH} and {MAX_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value
