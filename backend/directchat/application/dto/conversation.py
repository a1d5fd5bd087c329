"""Conversation DTOs for API request/response."""

from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel

from directchat.domain.entities.conversation import Conversation


class ConversationDTO(BaseModel):
    id: int
    user1_id: int
    user2_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, conversation: Conversation) -> ConversationDTO:
        return cls(
            id=conversation.id.value,
            user1_id=conversation.party_a.value,
            user2_id=conversation.party_b.value,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )
