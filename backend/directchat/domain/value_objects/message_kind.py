"""
MessageKind - Tag distinguishing plain text from file-attachment messages.
"""

from enum import Enum


class MessageKind(str, Enum):
    TEXT = "text"
    FILE = "file"
