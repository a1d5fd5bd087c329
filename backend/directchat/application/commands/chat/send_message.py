"""
SendMessage Command - Append a message to a two-party conversation.

Handler:
1. Load conversation from repo (ConversationNotFoundError)
2. Verify sender is one of the two parties (SenderNotParticipantError)
3. For file messages: file_id required (MissingFileReferenceError) and the
   file must exist (FileRecordNotFoundError). Ownership is not checked; once
   sent, the file becomes readable by the other party.
4. Append message; the repository bumps conversation.updated_at in the same
   transaction
5. Return the stored message

Not idempotent: a retried call stores a second message.
Push delivery to the other party is not part of this command.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from directchat.application.common.interfaces import Command, CommandHandler
from directchat.domain.entities.message import Message
from directchat.domain.exceptions import (
    ConversationNotFoundError,
    DomainValidationError,
    FileRecordNotFoundError,
    MissingFileReferenceError,
    SenderNotParticipantError,
)
from directchat.domain.ports.repositories import (
    ConversationRepository,
    FileRepository,
    MessageRepository,
)
from directchat.domain.services.authorization_policy import can_participate
from directchat.domain.value_objects.conversation_id import ConversationId
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.message_kind import MessageKind
from directchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    conversation_id: ConversationId
    sender_id: UserId
    content: str
    kind: MessageKind = MessageKind.TEXT
    file_id: Optional[FileId] = None


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
        file_repo: FileRepository,
    ):
        self.conv_repo = conv_repo
        self.msg_repo = msg_repo
        self.file_repo = file_repo

    async def execute(self, command: SendMessageCommand) -> Message:
        conversation = await self.conv_repo.get_by_id(command.conversation_id)
        if not conversation:
            raise ConversationNotFoundError()

        if not can_participate(command.sender_id, conversation):
            raise SenderNotParticipantError()

        if command.kind is MessageKind.FILE:
            if command.file_id is None:
                raise MissingFileReferenceError()
            if await self.file_repo.get_by_id(command.file_id) is None:
                raise FileRecordNotFoundError()
        elif command.file_id is not None:
            raise DomainValidationError("Text messages cannot reference a file")

        message = await self.msg_repo.append(
            Message.create(
                conversation_id=command.conversation_id,
                sender_id=command.sender_id,
                content=command.content,
                kind=command.kind,
                file_id=command.file_id,
            )
        )
        logger.debug(
            f"[Chat] Message {message.id.value} appended to conversation "
            f"{command.conversation_id.value} by {command.sender_id.value}"
        )
        return message
