"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from directchat.domain.value_objects.user_id import UserId
from directchat.domain.value_objects.user_email import UserEmail
from directchat.domain.value_objects.username import Username
from directchat.domain.value_objects.conversation_id import ConversationId
from directchat.domain.value_objects.message_id import MessageId
from directchat.domain.value_objects.message_kind import MessageKind
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.file_locator import FileLocator

__all__ = [
    "UserId",
    "UserEmail",
    "Username",
    "ConversationId",
    "MessageId",
    "MessageKind",
    "FileId",
    "FileLocator",
]
