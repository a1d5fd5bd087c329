"""
Conversation Repository Port - Interface for conversation persistence.
Implementation: directchat/infrastructure/persistence/prisma_conversation_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from directchat.domain.entities.conversation import Conversation
from directchat.domain.value_objects.conversation_id import ConversationId
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def find_by_pair(
        self, first: UserId, second: UserId
    ) -> Optional[Conversation]:
        """Lookup ignoring order: (first, second) matches (second, first)."""
        ...

    @abstractmethod
    async def create(self, conversation: Conversation) -> Conversation:
        """
        Insert a conversation and return it with its id.

        Raises:
            ConversationAlreadyExistsError: the unordered pair is already stored
        """
        ...

    @abstractmethod
    async def list_for_user(self, user_id: UserId) -> list[Conversation]:
        """Conversations with the user as either party, most recent first."""
        ...

    @abstractmethod
    async def list_referencing_file(self, file_id: FileId) -> list[Conversation]:
        """Conversations containing at least one message that references the file."""
        ...
