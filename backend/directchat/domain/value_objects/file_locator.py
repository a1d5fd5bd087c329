"""
FileLocator Value Object - Physical location of a stored artifact.
"""

from dataclasses import dataclass
from pathlib import Path

from directchat.domain.exceptions.validation_error import InvalidValueError


@dataclass(frozen=True)
class FileLocator:
    value: str  # file system path

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise InvalidValueError("File locator cannot be empty")

    def __str__(self) -> str:
        return self.value

    @property
    def path(self) -> Path:
        return Path(self.value)

    @property
    def filename(self) -> str:
        return Path(self.value).name
