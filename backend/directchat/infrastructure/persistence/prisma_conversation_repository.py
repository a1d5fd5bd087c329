"""
Prisma Conversation Repository Implementation.

Mapping:
- Prisma model fields: id, user1_id, user2_id, pair_low, pair_high,
  created_at, updated_at
- Domain entity: Conversation(party_a=user1_id, party_b=user2_id)
- pair_low/pair_high are storage-only: the sorted pair backing the
  @@unique([pair_low, pair_high]) constraint that allows one row per
  unordered pair of users
"""

from typing import Optional

from prisma import Prisma
from prisma.errors import UniqueViolationError
from prisma.models import Conversation as PrismaConversation

from directchat.infrastructure.persistence._serial_range import storable
from directchat.domain.entities.conversation import Conversation, canonical_pair
from directchat.domain.exceptions import ConversationAlreadyExistsError
from directchat.domain.ports.repositories import ConversationRepository
from directchat.domain.value_objects.conversation_id import ConversationId
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.user_id import UserId

# Most recently active first; id breaks ties so the order is stable
RECENCY_ORDER = [{"updated_at": "desc"}, {"id": "desc"}]


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaConversation) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            party_a=UserId(record.user1_id),
            party_b=UserId(record.user2_id),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        if not storable(conversation_id.value):
            return None
        record = await self._prisma.conversation.find_unique(
            where={"id": conversation_id.value}
        )
        return self._to_entity(record) if record else None

    async def find_by_pair(
        self, first: UserId, second: UserId
    ) -> Optional[Conversation]:
        low, high = canonical_pair(first, second)
        if not storable(low.value, high.value):
            return None
        record = await self._prisma.conversation.find_unique(
            where={"pair_low_pair_high": {"pair_low": low.value, "pair_high": high.value}}
        )
        return self._to_entity(record) if record else None

    async def create(self, conversation: Conversation) -> Conversation:
        low, high = conversation.canonical_pair
        try:
            record = await self._prisma.conversation.create(
                data={
                    "user1_id": conversation.party_a.value,
                    "user2_id": conversation.party_b.value,
                    "pair_low": low.value,
                    "pair_high": high.value,
                    "created_at": conversation.created_at,
                    "updated_at": conversation.updated_at,
                }
            )
        except UniqueViolationError as e:
            raise ConversationAlreadyExistsError() from e
        return self._to_entity(record)

    async def list_for_user(self, user_id: UserId) -> list[Conversation]:
        if not storable(user_id.value):
            return []
        records = await self._prisma.conversation.find_many(
            where={
                "OR": [
                    {"user1_id": user_id.value},
                    {"user2_id": user_id.value},
                ]
            },
            order=RECENCY_ORDER,
        )
        return [self._to_entity(r) for r in records]

    async def list_referencing_file(self, file_id: FileId) -> list[Conversation]:
        if not storable(file_id.value):
            return []
        records = await self._prisma.conversation.find_many(
            where={"messages": {"some": {"file_id": file_id.value}}},
            order=RECENCY_ORDER,
        )
        return [self._to_entity(r) for r in records]
