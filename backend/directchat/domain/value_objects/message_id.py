"""
MessageId Value Object - Message identity (monotonic database serial).
"""

from dataclasses import dataclass

from directchat.domain.value_objects._serial_id import validate_serial


@dataclass(frozen=True, order=True)
class MessageId:
    value: int

    def __post_init__(self):
        validate_serial(self.value, "MessageId")

    def __str__(self) -> str:
        return str(self.value)
