"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the use cases need
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from directchat.domain.ports.repositories.user_repository import UserRepository
from directchat.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from directchat.domain.ports.repositories.message_repository import MessageRepository
from directchat.domain.ports.repositories.file_repository import FileRepository

__all__ = [
    "UserRepository",
    "ConversationRepository",
    "MessageRepository",
    "FileRepository",
]
