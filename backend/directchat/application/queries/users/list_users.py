"""List Users Query - find chat partners by username or email."""

from dataclasses import dataclass
from typing import Optional

from directchat.application.common.interfaces import Query, QueryHandler
from directchat.config.settings import Config
from directchat.domain.entities.user import User
from directchat.domain.ports.repositories import UserRepository
from directchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListUsersQuery(Query[list[User]]):
    search: Optional[str] = None
    exclude_user_id: Optional[UserId] = None
    limit: int = Config.USER_SEARCH_LIMIT


class ListUsersHandler(QueryHandler[list[User]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListUsersQuery) -> list[User]:
        search = query.search.strip() if query.search else None
        limit = min(query.limit, Config.USER_SEARCH_LIMIT)
        return await self._user_repository.search(
            search or None, query.exclude_user_id, limit
        )
