"""File-related queries."""

from directchat.application.queries.files.get_file import (
    GetFileInfoQuery,
    GetFileInfoHandler,
    DownloadFileQuery,
    DownloadFileHandler,
)

__all__ = [
    "GetFileInfoQuery",
    "GetFileInfoHandler",
    "DownloadFileQuery",
    "DownloadFileHandler",
]
