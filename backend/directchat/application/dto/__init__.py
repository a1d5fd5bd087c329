"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- user.py         → PublicUserDTO, AuthResultDTO
- conversation.py → ConversationDTO
- chat.py         → MessageDTO
- file.py         → FileDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from directchat.application.dto.user import PublicUserDTO, AuthResultDTO
from directchat.application.dto.conversation import ConversationDTO
from directchat.application.dto.chat import MessageDTO
from directchat.application.dto.file import FileDTO

__all__ = [
    "PublicUserDTO",
    "AuthResultDTO",
    "ConversationDTO",
    "MessageDTO",
    "FileDTO",
]
