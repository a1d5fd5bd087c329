"""
Create Conversation Command - create-or-get for an unordered pair of users.

Steps:
1. Reject a user talking to themselves
2. One existence check over both ids: exactly two users must match
3. Symmetric lookup; an existing conversation is returned unchanged
4. Otherwise insert with party_a/party_b in the order requested
5. If the insert hits the pair's unique constraint, a concurrent caller won:
   return the row they created

Safe to retry: repeated calls converge on the same conversation.
"""

import logging
from dataclasses import dataclass

from directchat.application.common.interfaces import Command, CommandHandler
from directchat.domain.entities.conversation import Conversation
from directchat.domain.exceptions import (
    ConversationAlreadyExistsError,
    SelfConversationError,
    UnknownUserError,
)
from directchat.domain.ports.repositories import (
    ConversationRepository,
    UserRepository,
)
from directchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateConversationCommand(Command[Conversation]):
    user_a: UserId
    user_b: UserId


class CreateConversationHandler(CommandHandler[Conversation]):
    _conversation_repository: ConversationRepository
    _user_repository: UserRepository

    def __init__(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
    ):
        self._conversation_repository = conversation_repository
        self._user_repository = user_repository

    async def execute(self, command: CreateConversationCommand) -> Conversation:
        user_a, user_b = command.user_a, command.user_b
        if user_a == user_b:
            raise SelfConversationError()

        if await self._user_repository.count_existing([user_a, user_b]) != 2:
            raise UnknownUserError()

        existing = await self._conversation_repository.find_by_pair(user_a, user_b)
        if existing:
            return existing

        try:
            conversation = await self._conversation_repository.create(
                Conversation.start(party_a=user_a, party_b=user_b)
            )
        except ConversationAlreadyExistsError:
            logger.info(
                f"[Conversations] Concurrent create for pair "
                f"({user_a.value}, {user_b.value}), using existing row"
            )
            winner = await self._conversation_repository.find_by_pair(user_a, user_b)
            if winner is None:
                raise
            return winner

        logger.info(
            f"[Conversations] Created conversation {conversation.id.value} "
            f"between {user_a.value} and {user_b.value}"
        )
        return conversation
