"""
Storage-level guarantees of the Prisma repositories, against a real database.

Needs a generated Prisma client (`prisma generate --schema backend/schema.prisma`)
and DATABASE_URL pointing at a database with the schema applied
(`prisma db push`). Skipped otherwise.

Run with: pytest tests/test_prisma_repositories.py -v -m db
"""

import asyncio
import os
import uuid

import pytest

if not os.getenv("DATABASE_URL"):
    pytest.skip("DATABASE_URL is not set", allow_module_level=True)

from directchat.application.commands.conversations import (  # noqa: E402
    CreateConversationCommand,
    CreateConversationHandler,
)
from directchat.domain.entities.conversation import Conversation  # noqa: E402
from directchat.domain.entities.message import Message  # noqa: E402
from directchat.domain.entities.user import User  # noqa: E402
from directchat.domain.exceptions import ConversationAlreadyExistsError  # noqa: E402
from directchat.domain.value_objects import (  # noqa: E402
    ConversationId,
    UserEmail,
    UserId,
    Username,
)

pytestmark = pytest.mark.db


@pytest.fixture()
def created_users() -> list[int]:
    return []


@pytest.fixture()
async def prisma(created_users):
    try:
        from prisma import Prisma
    except RuntimeError as e:
        pytest.skip(f"Prisma client not generated: {e}")

    client = Prisma()
    await client.connect()
    yield client
    if created_users:
        await client.message.delete_many(where={"sender_id": {"in": created_users}})
        await client.conversation.delete_many(
            where={
                "OR": [
                    {"user1_id": {"in": created_users}},
                    {"user2_id": {"in": created_users}},
                ]
            }
        )
        await client.user.delete_many(where={"id": {"in": created_users}})
    await client.disconnect()


@pytest.fixture()
def repos(prisma):
    from directchat.infrastructure.persistence import (
        PrismaConversationRepository,
        PrismaMessageRepository,
        PrismaUserRepository,
    )

    return (
        PrismaUserRepository(prisma),
        PrismaConversationRepository(prisma),
        PrismaMessageRepository(prisma),
    )


async def _user(created_users, user_repo) -> User:
    tag = uuid.uuid4().hex[:12]
    user = await user_repo.create(
        User.register(UserEmail(f"{tag}@example.com"), Username(f"u_{tag}"), "x")
    )
    created_users.append(user.id.value)
    return user


class TestConversationPairConstraint:
    async def test_second_insert_for_pair_is_rejected(self, prisma, repos, created_users):
        user_repo, conv_repo, _ = repos
        a, b = await _user(created_users, user_repo), await _user(created_users, user_repo)

        first = await conv_repo.create(Conversation.start(party_a=a.id, party_b=b.id))

        with pytest.raises(ConversationAlreadyExistsError):
            await conv_repo.create(Conversation.start(party_a=b.id, party_b=a.id))
        assert (await conv_repo.find_by_pair(b.id, a.id)).id == first.id

    async def test_concurrent_create_or_get(self, prisma, repos, created_users):
        user_repo, conv_repo, _ = repos
        a, b = await _user(created_users, user_repo), await _user(created_users, user_repo)
        handler = CreateConversationHandler(conv_repo, user_repo)

        results = await asyncio.gather(
            *[
                handler.execute(CreateConversationCommand(user_a=x, user_b=y))
                for x, y in [(a.id, b.id), (b.id, a.id)] * 4
            ]
        )

        assert len({c.id for c in results}) == 1
        assert await prisma.conversation.count(
            where={"user1_id": {"in": [a.id.value, b.id.value]}}
        ) == 1


class TestMessageAppend:
    async def test_append_bumps_recency_in_same_transaction(self, prisma, repos, created_users):
        user_repo, conv_repo, msg_repo = repos
        a, b = await _user(created_users, user_repo), await _user(created_users, user_repo)
        conversation = await conv_repo.create(
            Conversation.start(party_a=a.id, party_b=b.id)
        )

        message = await msg_repo.append(
            Message.create(conversation_id=conversation.id, sender_id=a.id, content="hi")
        )

        stored = await conv_repo.get_by_id(conversation.id)
        assert stored.updated_at == message.created_at

        listed = await msg_repo.list_for_conversation(conversation.id, limit=10, offset=0)
        assert [m.id for m in listed] == [message.id]

    async def test_out_of_range_ids_are_not_found(self, repos):
        user_repo, conv_repo, msg_repo = repos

        assert await user_repo.get_by_id(UserId(0)) is None
        assert await user_repo.count_existing([UserId(-1), UserId(2**40)]) == 0
        assert await conv_repo.get_by_id(ConversationId(2**40)) is None
        assert await msg_repo.list_for_conversation(ConversationId(0), 10, 0) == []
