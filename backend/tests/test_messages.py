"""
Tests for the message log (append + paginated history).

Run with: pytest tests/test_messages.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from directchat.application.commands.chat import SendMessageCommand
from directchat.application.commands.conversations import CreateConversationCommand
from directchat.application.queries.chat import GetMessagesQuery
from directchat.domain.entities.file import File
from directchat.domain.entities.message import Message
from directchat.domain.exceptions import (
    AccessDeniedError,
    ConversationNotFoundError,
    DomainValidationError,
    FileRecordNotFoundError,
    MissingFileReferenceError,
    SenderNotParticipantError,
)
from directchat.domain.value_objects import (
    ConversationId,
    FileId,
    FileLocator,
    MessageKind,
)


@pytest.fixture()
async def chat(make_user, create_conversation_handler):
    """alice and bob share a conversation; carol is an outsider."""
    alice, bob, carol = (
        await make_user("alice"),
        await make_user("bob"),
        await make_user("carol"),
    )
    conversation = await create_conversation_handler.execute(
        CreateConversationCommand(user_a=alice.id, user_b=bob.id)
    )
    return alice, bob, carol, conversation


class TestSendMessage:
    async def test_participant_can_send_and_bumps_recency(
        self, chat, send_message_handler, store
    ):
        alice, bob, _, conversation = chat

        message = await send_message_handler.execute(
            SendMessageCommand(
                conversation_id=conversation.id, sender_id=bob.id, content="hello"
            )
        )

        assert message.id is not None
        assert message.kind is MessageKind.TEXT
        assert message.file_id is None
        stored = store.conversations[conversation.id.value]
        assert stored.updated_at == message.created_at

    async def test_unknown_conversation(self, chat, send_message_handler):
        alice, *_ = chat

        with pytest.raises(ConversationNotFoundError):
            await send_message_handler.execute(
                SendMessageCommand(
                    conversation_id=ConversationId(999),
                    sender_id=alice.id,
                    content="anyone?",
                )
            )

    async def test_non_participant_rejected(self, chat, send_message_handler, store):
        _, _, carol, conversation = chat

        with pytest.raises(SenderNotParticipantError):
            await send_message_handler.execute(
                SendMessageCommand(
                    conversation_id=conversation.id,
                    sender_id=carol.id,
                    content="let me in",
                )
            )
        assert store.messages == {}

    async def test_membership_checked_before_file_reference(
        self, chat, send_message_handler
    ):
        _, _, carol, conversation = chat

        with pytest.raises(SenderNotParticipantError):
            await send_message_handler.execute(
                SendMessageCommand(
                    conversation_id=conversation.id,
                    sender_id=carol.id,
                    content="",
                    kind=MessageKind.FILE,
                )
            )

    async def test_file_message_requires_file_id(self, chat, send_message_handler, store):
        alice, _, _, conversation = chat

        with pytest.raises(MissingFileReferenceError):
            await send_message_handler.execute(
                SendMessageCommand(
                    conversation_id=conversation.id,
                    sender_id=alice.id,
                    content="see attached",
                    kind=MessageKind.FILE,
                )
            )
        assert store.messages == {}

    async def test_file_message_with_unknown_file(self, chat, send_message_handler):
        alice, _, _, conversation = chat

        with pytest.raises(FileRecordNotFoundError):
            await send_message_handler.execute(
                SendMessageCommand(
                    conversation_id=conversation.id,
                    sender_id=alice.id,
                    content="see attached",
                    kind=MessageKind.FILE,
                    file_id=FileId(42),
                )
            )

    async def test_file_message_with_someone_elses_file(
        self, chat, send_message_handler, file_repo
    ):
        """Any existing file may be attached; ownership is not checked."""
        _, bob, carol, conversation = chat
        file = await file_repo.create(
            File.record(
                original_name="notes.txt",
                locator=FileLocator("uploads/3/notes.txt"),
                size_bytes=10,
                media_type="text/plain",
                uploaded_by=carol.id,
            )
        )

        message = await send_message_handler.execute(
            SendMessageCommand(
                conversation_id=conversation.id,
                sender_id=bob.id,
                content="forwarding",
                kind=MessageKind.FILE,
                file_id=file.id,
            )
        )

        assert message.kind is MessageKind.FILE
        assert message.file_id == file.id

    async def test_text_message_cannot_reference_file(self, chat, send_message_handler):
        alice, _, _, conversation = chat

        with pytest.raises(DomainValidationError):
            await send_message_handler.execute(
                SendMessageCommand(
                    conversation_id=conversation.id,
                    sender_id=alice.id,
                    content="hi",
                    file_id=FileId(1),
                )
            )


class TestGetMessages:
    async def _send(self, handler, conversation, sender, count):
        sent = []
        for i in range(count):
            sent.append(
                await handler.execute(
                    SendMessageCommand(
                        conversation_id=conversation.id,
                        sender_id=sender.id,
                        content=f"message {i}",
                    )
                )
            )
        return sent

    async def test_newest_first(self, chat, send_message_handler, get_messages_handler):
        alice, bob, _, conversation = chat
        sent = await self._send(send_message_handler, conversation, alice, 3)

        messages = await get_messages_handler.execute(
            GetMessagesQuery(conversation_id=conversation.id, requester_id=bob.id)
        )

        assert [m.id for m in messages] == [m.id for m in reversed(sent)]

    async def test_pages_are_disjoint_and_cover_history(
        self, chat, send_message_handler, get_messages_handler
    ):
        alice, _, _, conversation = chat
        sent = await self._send(send_message_handler, conversation, alice, 7)

        seen = []
        for offset in range(0, 9, 3):
            page = await get_messages_handler.execute(
                GetMessagesQuery(
                    conversation_id=conversation.id,
                    requester_id=alice.id,
                    limit=3,
                    offset=offset,
                )
            )
            seen.extend(m.id for m in page)

        assert seen == [m.id for m in reversed(sent)]
        assert len(set(seen)) == 7

    async def test_same_timestamp_ordered_by_id(
        self, chat, msg_repo, get_messages_handler
    ):
        alice, bob, _, conversation = chat
        at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        first = await msg_repo.append(
            Message(conversation.id, alice.id, "a", MessageKind.TEXT, at)
        )
        second = await msg_repo.append(
            Message(conversation.id, bob.id, "b", MessageKind.TEXT, at)
        )
        older = await msg_repo.append(
            Message(conversation.id, bob.id, "c", MessageKind.TEXT, at - timedelta(seconds=1))
        )

        messages = await get_messages_handler.execute(
            GetMessagesQuery(conversation_id=conversation.id, requester_id=alice.id)
        )

        assert [m.id for m in messages] == [second.id, first.id, older.id]

    async def test_unknown_conversation_is_empty(self, chat, get_messages_handler):
        alice, *_ = chat

        assert (
            await get_messages_handler.execute(
                GetMessagesQuery(
                    conversation_id=ConversationId(999), requester_id=alice.id
                )
            )
            == []
        )

    async def test_non_participant_denied(self, chat, get_messages_handler):
        _, _, carol, conversation = chat

        with pytest.raises(AccessDeniedError):
            await get_messages_handler.execute(
                GetMessagesQuery(conversation_id=conversation.id, requester_id=carol.id)
            )

    async def test_zero_limit_and_offset_past_end(
        self, chat, send_message_handler, get_messages_handler
    ):
        alice, _, _, conversation = chat
        await self._send(send_message_handler, conversation, alice, 2)

        assert (
            await get_messages_handler.execute(
                GetMessagesQuery(
                    conversation_id=conversation.id, requester_id=alice.id, limit=0
                )
            )
            == []
        )
        assert (
            await get_messages_handler.execute(
                GetMessagesQuery(
                    conversation_id=conversation.id, requester_id=alice.id, offset=10
                )
            )
            == []
        )

    async def test_negative_window_rejected(self, chat, get_messages_handler):
        alice, _, _, conversation = chat

        with pytest.raises(DomainValidationError):
            await get_messages_handler.execute(
                GetMessagesQuery(
                    conversation_id=conversation.id, requester_id=alice.id, offset=-1
                )
            )
