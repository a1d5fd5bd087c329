"""User directory queries."""

from directchat.application.queries.users.list_users import (
    ListUsersQuery,
    ListUsersHandler,
)

__all__ = [
    "ListUsersQuery",
    "ListUsersHandler",
]
