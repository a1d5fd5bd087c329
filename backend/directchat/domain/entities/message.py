"""
Message Entity - A single message in a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from directchat.domain.exceptions.validation_error import DomainValidationError
from directchat.domain.value_objects.conversation_id import ConversationId
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.message_id import MessageId
from directchat.domain.value_objects.message_kind import MessageKind
from directchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Message:
    conversation_id: ConversationId
    sender_id: UserId
    content: str
    kind: MessageKind
    created_at: datetime
    file_id: Optional[FileId] = None
    id: Optional[MessageId] = None

    def __post_init__(self):
        if self.kind is MessageKind.TEXT and self.file_id is not None:
            raise DomainValidationError("Text messages cannot reference a file")

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        sender_id: UserId,
        content: str,
        kind: MessageKind = MessageKind.TEXT,
        file_id: Optional[FileId] = None,
    ) -> Message:
        """Factory method to create a new Message stamped with the current time."""
        return cls(
            conversation_id=conversation_id,
            sender_id=sender_id,
            content=content,
            kind=kind,
            file_id=file_id,
            created_at=datetime.now(timezone.utc),
        )
