"""
File-related commands.
"""

from directchat.application.commands.files.upload_file import (
    UploadFileCommand,
    UploadFileHandler,
    StoreFileCommand,
    StoreFileHandler,
)

__all__ = [
    "UploadFileCommand",
    "UploadFileHandler",
    "StoreFileCommand",
    "StoreFileHandler",
]
