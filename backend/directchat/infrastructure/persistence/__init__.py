"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from directchat.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)
from directchat.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from directchat.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from directchat.infrastructure.persistence.prisma_file_repository import (
    PrismaFileRepository,
)

__all__ = [
    "PrismaUserRepository",
    "PrismaConversationRepository",
    "PrismaMessageRepository",
    "PrismaFileRepository",
]
