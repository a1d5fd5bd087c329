"""
Conversations API Router - FastAPI endpoints for conversations and messages.

- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Domain errors propagate to the app-level handlers in presentation/errors.py

Flow:
  HTTP Request → Router → Command → Handler → Repository → Database
                                 ↓
  HTTP Response ← Router ← Result ←
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from directchat.application.commands.chat import SendMessageCommand, SendMessageHandler
from directchat.application.commands.conversations import (
    CreateConversationCommand,
    CreateConversationHandler,
)
from directchat.application.dto.chat import MessageDTO
from directchat.application.dto.conversation import ConversationDTO
from directchat.application.queries.chat import GetMessagesHandler, GetMessagesQuery
from directchat.application.queries.conversations import (
    ListConversationsHandler,
    ListConversationsQuery,
)
from directchat.config.settings import Config
from directchat.domain.value_objects.conversation_id import ConversationId
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.message_kind import MessageKind
from directchat.domain.value_objects.user_id import UserId
from directchat.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateConversationRequest(BaseModel):
    """The other party; the caller is always the first party."""

    participant_id: int


class ListConversationsResponse(BaseModel):
    conversations: list[ConversationDTO]


class SendMessageRequest(BaseModel):
    content: str
    message_type: MessageKind = MessageKind.TEXT
    file_id: Optional[int] = None


class ListMessagesResponse(BaseModel):
    messages: list[MessageDTO]


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ConversationDTO)
@inject
async def create_conversation(
    request: CreateConversationRequest,
    handler: FromDishka[CreateConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Return the conversation between the caller and the participant, creating it if needed."""
    command = CreateConversationCommand(
        user_a=current_user.id,
        user_b=UserId(request.participant_id),
    )
    conversation = await handler.execute(command)
    return ConversationDTO.from_entity(conversation)


@router.get("", response_model=ListConversationsResponse)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List the caller's conversations, most recently active first."""
    conversations = await handler.execute(
        ListConversationsQuery(user_id=current_user.id)
    )
    return ListConversationsResponse(
        conversations=[ConversationDTO.from_entity(c) for c in conversations]
    )


@router.post(
    "/{conversation_id}/messages",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    conversation_id: int,
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Append a message; the caller is the sender."""
    command = SendMessageCommand(
        conversation_id=ConversationId(conversation_id),
        sender_id=current_user.id,
        content=request.content,
        kind=request.message_type,
        file_id=FileId(request.file_id) if request.file_id is not None else None,
    )
    message = await handler.execute(command)
    logger.info(
        f"Message {message.id} appended to conversation {conversation_id} "
        f"by user {current_user.id}"
    )
    return MessageDTO.from_entity(message)


@router.get("/{conversation_id}/messages", response_model=ListMessagesResponse)
@inject
async def list_messages(
    conversation_id: int,
    handler: FromDishka[GetMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
    limit: int = Config.MESSAGE_PAGE_SIZE,
    offset: int = 0,
):
    """
    Page through a conversation, newest first.

    ``offset`` counts from the newest message, so page N is
    ``offset = N * limit``.
    """
    query = GetMessagesQuery(
        conversation_id=ConversationId(conversation_id),
        requester_id=current_user.id,
        limit=limit,
        offset=offset,
    )
    messages = await handler.execute(query)
    return ListMessagesResponse(messages=[MessageDTO.from_entity(m) for m in messages])
