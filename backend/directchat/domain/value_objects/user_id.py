"""
UserId Value Object
"""

from dataclasses import dataclass

from directchat.domain.value_objects._serial_id import validate_serial


@dataclass(frozen=True, order=True)
class UserId:
    value: int  # users.id

    def __post_init__(self):
        validate_serial(self.value, "UserId")

    def __str__(self) -> str:
        return str(self.value)
