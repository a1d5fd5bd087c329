"""
Prisma Message Repository Implementation.

Prisma Message Model (from schema.prisma):
    model Message {
        id              Int          @id @default(autoincrement())
        conversation_id Int
        sender_id       Int
        content         String
        message_type    MessageType  @default(text)
        file_id         Int?
        created_at      DateTime     @default(now())
    }

Ordering:
- History is read newest first: created_at desc, then id desc. The serial id
  follows insertion order, so messages stamped with the same instant still
  come back in a stable order and offset paging never skips or repeats.
"""

from prisma import Prisma
from prisma.models import Message as PrismaMessage

from directchat.infrastructure.persistence._serial_range import storable
from directchat.domain.entities.message import Message
from directchat.domain.ports.repositories.message_repository import MessageRepository
from directchat.domain.value_objects.conversation_id import ConversationId
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.message_id import MessageId
from directchat.domain.value_objects.message_kind import MessageKind
from directchat.domain.value_objects.user_id import UserId


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        """
        Map Prisma record to domain entity.

        Args:
            record: Prisma Message model instance

        Returns:
            Domain Message entity with value objects
        """
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            sender_id=UserId(record.sender_id),
            content=record.content,
            kind=MessageKind(record.message_type),
            file_id=FileId(record.file_id) if record.file_id else None,
            created_at=record.created_at,
        )

    async def append(self, message: Message) -> Message:
        """
        Insert a message and bump its conversation in one transaction.

        Readers never see the message without the conversation's updated_at
        being at least message.created_at. The bump uses the message
        timestamp itself, so a conversation's recency always equals its
        latest message time.

        Args:
            message: New Message entity (id is None)

        Returns:
            The stored message, with its serial id
        """
        async with self._prisma.tx() as tx:
            record = await tx.message.create(
                data={
                    "conversation_id": message.conversation_id.value,
                    "sender_id": message.sender_id.value,
                    "content": message.content,
                    "message_type": message.kind.value,
                    "file_id": message.file_id.value if message.file_id else None,
                    "created_at": message.created_at,
                }
            )
            await tx.conversation.update_many(
                where={
                    "id": message.conversation_id.value,
                    "updated_at": {"lt": record.created_at},
                },
                data={"updated_at": record.created_at},
            )

        return self._to_entity(record)

    async def list_for_conversation(
        self, conversation_id: ConversationId, limit: int, offset: int
    ) -> list[Message]:
        """
        Get one page of a conversation's messages, newest first.

        Args:
            conversation_id: ConversationId value object
            limit: Maximum number of messages to return
            offset: Number of newest messages to skip

        Returns:
            List of Message entities, newest first
        """
        if not storable(conversation_id.value):
            return []
        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id.value},
            order=[{"created_at": "desc"}, {"id": "desc"}],
            take=limit,
            skip=offset,
        )
        return [self._to_entity(record) for record in records]
