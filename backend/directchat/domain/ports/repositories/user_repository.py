"""
User Repository Port - Credential store.
Implementation: directchat/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from directchat.domain.entities.user import User
from directchat.domain.value_objects.user_email import UserEmail
from directchat.domain.value_objects.user_id import UserId
from directchat.domain.value_objects.username import Username


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: UserEmail) -> Optional[User]:
        """Exact, case-sensitive match."""
        ...

    @abstractmethod
    async def find_by_email_or_username(
        self, email: UserEmail, username: Username
    ) -> list[User]: ...

    @abstractmethod
    async def count_existing(self, user_ids: list[UserId]) -> int:
        """Number of distinct users among ``user_ids`` that exist."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user and return it with its id.

        Raises:
            ConflictError: email or username already taken at insert time
        """
        ...

    @abstractmethod
    async def search(
        self,
        search: Optional[str],
        exclude_user_id: Optional[UserId],
        limit: int,
    ) -> list[User]:
        """Case-insensitive substring match on username or email."""
        ...
