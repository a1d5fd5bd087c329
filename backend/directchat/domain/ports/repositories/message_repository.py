"""
Message Repository Port - Interface for message persistence.
Implementation: directchat/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod

from directchat.domain.entities.message import Message
from directchat.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    async def append(self, message: Message) -> Message:
        """
        Insert the message and advance its conversation's updated_at to at
        least message.created_at, as one unit. Returns the stored message.
        """
        ...

    @abstractmethod
    async def list_for_conversation(
        self, conversation_id: ConversationId, limit: int, offset: int
    ) -> list[Message]:
        """Newest first (created_at desc, id desc), windowed by offset/limit."""
        ...
