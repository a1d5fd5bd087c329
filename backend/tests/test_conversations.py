"""
Tests for the conversation registry (create-or-get, listing).

Run with: pytest tests/test_conversations.py -v
"""

import asyncio
from datetime import timedelta

import pytest

from directchat.application.commands.chat import SendMessageCommand
from directchat.application.commands.conversations import CreateConversationCommand
from directchat.application.queries.conversations import ListConversationsQuery
from directchat.domain.entities.conversation import Conversation
from directchat.domain.exceptions import SelfConversationError, UnknownUserError
from directchat.domain.value_objects import UserId


class TestCreateConversation:
    async def test_creates_with_caller_as_first_party(
        self, make_user, create_conversation_handler
    ):
        alice, bob = await make_user("alice"), await make_user("bob")

        conversation = await create_conversation_handler.execute(
            CreateConversationCommand(user_a=alice.id, user_b=bob.id)
        )

        assert conversation.id is not None
        assert conversation.party_a == alice.id
        assert conversation.party_b == bob.id
        assert conversation.created_at == conversation.updated_at

    async def test_pair_is_symmetric(self, make_user, create_conversation_handler):
        """(A, B) then (B, A) returns the same, untouched conversation."""
        alice, bob = await make_user("alice"), await make_user("bob")

        first = await create_conversation_handler.execute(
            CreateConversationCommand(user_a=alice.id, user_b=bob.id)
        )
        second = await create_conversation_handler.execute(
            CreateConversationCommand(user_a=bob.id, user_b=alice.id)
        )

        assert second.id == first.id
        assert second.party_a == alice.id
        assert second.updated_at == first.updated_at

    async def test_self_conversation_rejected(
        self, make_user, create_conversation_handler, store
    ):
        alice = await make_user("alice")

        with pytest.raises(SelfConversationError):
            await create_conversation_handler.execute(
                CreateConversationCommand(user_a=alice.id, user_b=alice.id)
            )
        assert store.conversations == {}

    async def test_self_check_comes_before_user_lookup(
        self, create_conversation_handler
    ):
        with pytest.raises(SelfConversationError):
            await create_conversation_handler.execute(
                CreateConversationCommand(user_a=UserId(99), user_b=UserId(99))
            )

    async def test_unknown_user_rejected(
        self, make_user, create_conversation_handler, store
    ):
        alice = await make_user("alice")

        with pytest.raises(UnknownUserError):
            await create_conversation_handler.execute(
                CreateConversationCommand(user_a=alice.id, user_b=UserId(404))
            )
        assert store.conversations == {}

    async def test_concurrent_creates_yield_one_conversation(
        self, make_user, create_conversation_handler, store
    ):
        """Both orderings racing each other end up on the same row."""
        alice, bob = await make_user("alice"), await make_user("bob")

        results = await asyncio.gather(
            create_conversation_handler.execute(
                CreateConversationCommand(user_a=alice.id, user_b=bob.id)
            ),
            create_conversation_handler.execute(
                CreateConversationCommand(user_a=bob.id, user_b=alice.id)
            ),
            create_conversation_handler.execute(
                CreateConversationCommand(user_a=alice.id, user_b=bob.id)
            ),
        )

        assert len({c.id for c in results}) == 1
        assert len(store.conversations) == 1

    async def test_lost_race_falls_back_to_existing_row(
        self, make_user, create_conversation_handler, conv_repo, monkeypatch
    ):
        """Lookup misses, insert hits the unique pair: the winner is returned."""
        alice, bob = await make_user("alice"), await make_user("bob")
        winner = await conv_repo.create(Conversation.start(party_a=bob.id, party_b=alice.id))

        real_find = conv_repo.find_by_pair
        calls = []

        async def find_missing_once(first, second):
            calls.append((first, second))
            if len(calls) == 1:
                return None
            return await real_find(first, second)

        monkeypatch.setattr(conv_repo, "find_by_pair", find_missing_once)

        result = await create_conversation_handler.execute(
            CreateConversationCommand(user_a=alice.id, user_b=bob.id)
        )

        assert result.id == winner.id
        assert len(calls) == 2


class TestListConversations:
    async def test_lists_only_own_conversations_by_recency(
        self,
        make_user,
        create_conversation_handler,
        list_conversations_handler,
        send_message_handler,
        store,
    ):
        alice, bob, carol = (
            await make_user("alice"),
            await make_user("bob"),
            await make_user("carol"),
        )
        with_bob = await create_conversation_handler.execute(
            CreateConversationCommand(user_a=alice.id, user_b=bob.id)
        )
        with_carol = await create_conversation_handler.execute(
            CreateConversationCommand(user_a=carol.id, user_b=alice.id)
        )
        bob_carol = await create_conversation_handler.execute(
            CreateConversationCommand(user_a=bob.id, user_b=carol.id)
        )

        # Push the carol conversation back in time, then revive bob's
        stored = store.conversations[with_carol.id.value]
        stored.updated_at = stored.updated_at - timedelta(minutes=5)
        await send_message_handler.execute(
            SendMessageCommand(
                conversation_id=with_bob.id, sender_id=bob.id, content="hi"
            )
        )

        conversations = await list_conversations_handler.execute(
            ListConversationsQuery(user_id=alice.id)
        )

        assert [c.id for c in conversations] == [with_bob.id, with_carol.id]
        assert bob_carol.id not in [c.id for c in conversations]

    async def test_ties_broken_by_id_desc(
        self, make_user, conv_repo, list_conversations_handler
    ):
        alice, bob, carol = (
            await make_user("alice"),
            await make_user("bob"),
            await make_user("carol"),
        )
        first = Conversation.start(party_a=alice.id, party_b=bob.id)
        second = Conversation.start(party_a=alice.id, party_b=carol.id)
        second.created_at = second.updated_at = first.updated_at
        first = await conv_repo.create(first)
        second = await conv_repo.create(second)

        conversations = await list_conversations_handler.execute(
            ListConversationsQuery(user_id=alice.id)
        )

        assert [c.id for c in conversations] == [second.id, first.id]

    async def test_no_conversations(self, make_user, list_conversations_handler):
        alice = await make_user("alice")

        assert (
            await list_conversations_handler.execute(
                ListConversationsQuery(user_id=alice.id)
            )
            == []
        )
