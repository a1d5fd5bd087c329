"""
Prisma User Repository Implementation.

Mapping:
- Prisma model fields: id, email, username, password_hash, created_at, updated_at
- Domain entity: User with value objects (UserId, UserEmail, Username)
"""

from typing import Any, Dict, Optional

from prisma import Prisma
from prisma.errors import UniqueViolationError
from prisma.models import User as PrismaUser

from directchat.infrastructure.persistence._serial_range import storable
from directchat.domain.entities.user import User
from directchat.domain.exceptions import ConflictError
from directchat.domain.ports.repositories import UserRepository
from directchat.domain.value_objects.user_email import UserEmail
from directchat.domain.value_objects.user_id import UserId
from directchat.domain.value_objects.username import Username


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        """Map Prisma record to domain entity."""
        return User(
            id=UserId(record.id),
            email=UserEmail(record.email),
            username=Username(record.username),
            password_hash=record.password_hash,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        if not storable(user_id.value):
            return None
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None

    async def get_by_email(self, email: UserEmail) -> Optional[User]:
        # Postgres text comparison is case-sensitive, matching registration
        record = await self._prisma.user.find_unique(where={"email": email.value})
        return self._to_entity(record) if record else None

    async def find_by_email_or_username(
        self, email: UserEmail, username: Username
    ) -> list[User]:
        records = await self._prisma.user.find_many(
            where={
                "OR": [
                    {"email": email.value},
                    {"username": username.value},
                ]
            }
        )
        return [self._to_entity(r) for r in records]

    async def count_existing(self, user_ids: list[UserId]) -> int:
        ids = [i for i in {u.value for u in user_ids} if storable(i)]
        if not ids:
            return 0
        return await self._prisma.user.count(where={"id": {"in": ids}})

    async def create(self, user: User) -> User:
        try:
            record = await self._prisma.user.create(
                data={
                    "email": user.email.value,
                    "username": user.username.value,
                    "password_hash": user.password_hash,
                    "created_at": user.created_at,
                    "updated_at": user.updated_at,
                }
            )
        except UniqueViolationError as e:
            raise ConflictError("Email or username already exists") from e
        return self._to_entity(record)

    async def search(
        self,
        search: Optional[str],
        exclude_user_id: Optional[UserId],
        limit: int,
    ) -> list[User]:
        """Search by username/email substring, ignoring case."""
        conditions: list[Dict[str, Any]] = []
        if search:
            conditions.append(
                {
                    "OR": [
                        {"username": {"contains": search, "mode": "insensitive"}},
                        {"email": {"contains": search, "mode": "insensitive"}},
                    ]
                }
            )
        if exclude_user_id is not None and storable(exclude_user_id.value):
            conditions.append({"id": {"not": exclude_user_id.value}})

        records = await self._prisma.user.find_many(
            where={"AND": conditions} if conditions else None,
            order={"id": "asc"},
            take=limit,
        )
        return [self._to_entity(r) for r in records]
