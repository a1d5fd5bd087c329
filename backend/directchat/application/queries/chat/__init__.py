"""Chat-related queries."""

from directchat.application.queries.chat.get_messages import (
    GetMessagesQuery,
    GetMessagesHandler,
)

__all__ = [
    "GetMessagesQuery",
    "GetMessagesHandler",
]
