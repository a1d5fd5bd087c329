"""Chat DTOs for API request/response."""

from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from directchat.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: int
    conversation_id: int
    sender_id: int
    content: str
    message_type: str
    file_id: Optional[int] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> MessageDTO:
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            sender_id=message.sender_id.value,
            content=message.content,
            message_type=message.kind.value,
            file_id=message.file_id.value if message.file_id else None,
            created_at=message.created_at,
        )
