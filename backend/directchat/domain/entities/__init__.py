"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier (None until the store assigns one)
- Has behavior (methods)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from directchat.domain.entities.user import User
from directchat.domain.entities.conversation import Conversation
from directchat.domain.entities.message import Message
from directchat.domain.entities.file import File, MAX_FILE_SIZE_BYTES

__all__ = [
    "User",
    "Conversation",
    "Message",
    "File",
    "MAX_FILE_SIZE_BYTES",
]
