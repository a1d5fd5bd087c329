"""
ConversationId Value Object - Conversation identity (database serial).
"""

from dataclasses import dataclass

from directchat.domain.value_objects._serial_id import validate_serial


@dataclass(frozen=True)
class ConversationId:
    value: int

    def __post_init__(self):
        validate_serial(self.value, "ConversationId")

    def __str__(self) -> str:
        return str(self.value)
