"""
GetMessages Query - One page of a conversation's history, newest first.

Paging with limit=k and offset=0, k, 2k, ... walks the whole history with no
gaps or repeats, since the order (created_at desc, id desc) is total.
"""

from dataclasses import dataclass

from directchat.application.common.interfaces import Query, QueryHandler
from directchat.config.settings import Config
from directchat.domain.entities.message import Message
from directchat.domain.exceptions import AccessDeniedError, DomainValidationError
from directchat.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from directchat.domain.services.authorization_policy import can_participate
from directchat.domain.value_objects.conversation_id import ConversationId
from directchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetMessagesQuery(Query[list[Message]]):
    conversation_id: ConversationId
    requester_id: UserId
    limit: int = Config.MESSAGE_PAGE_SIZE
    offset: int = 0


class GetMessagesHandler(QueryHandler[list[Message]]):
    """
    Handler for GetMessagesQuery.

    An unknown conversation id yields an empty page rather than an error.
    A known conversation is only readable by its two parties.
    """

    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo

    async def execute(self, query: GetMessagesQuery) -> list[Message]:
        """
        Raises:
            DomainValidationError: negative limit or offset
            AccessDeniedError: requester is not a party of the conversation
        """
        if query.limit < 0 or query.offset < 0:
            raise DomainValidationError("limit and offset must be non-negative")

        conversation = await self._conv_repo.get_by_id(query.conversation_id)
        if conversation is None:
            return []

        if not can_participate(query.requester_id, conversation):
            raise AccessDeniedError("You don't have access to this conversation")

        if query.limit == 0:
            return []

        return await self._msg_repo.list_for_conversation(
            query.conversation_id, limit=query.limit, offset=query.offset
        )
