"""Chat commands."""

from directchat.application.commands.chat.send_message import (
    SendMessageCommand,
    SendMessageHandler,
)

__all__ = [
    "SendMessageCommand",
    "SendMessageHandler",
]
