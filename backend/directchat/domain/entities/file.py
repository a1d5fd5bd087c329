"""
File Entity - Metadata for an uploaded artifact.

A File is private to its uploader until a message references it; that
sharing is derived from messages on every request and never stored here.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from directchat.domain.exceptions.validation_error import DomainValidationError
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.file_locator import FileLocator
from directchat.domain.value_objects.user_id import UserId

MAX_FILE_SIZE_BYTES = 50 * 1024 * 1024


@dataclass
class File:
    original_name: str
    locator: FileLocator
    size_bytes: int
    media_type: str
    uploaded_by: UserId
    created_at: datetime
    id: Optional[FileId] = None

    def __post_init__(self):
        if not self.original_name or not self.original_name.strip():
            raise DomainValidationError("File name cannot be empty")
        if not self.media_type or not self.media_type.strip():
            raise DomainValidationError("Media type cannot be empty")
        if self.size_bytes < 0:
            raise DomainValidationError("File size cannot be negative")
        if self.size_bytes > MAX_FILE_SIZE_BYTES:
            raise DomainValidationError(
                f"File size {self.size_bytes} exceeds the "
                f"{MAX_FILE_SIZE_BYTES // (1024 * 1024)} MB limit"
            )

    @classmethod
    def record(
        cls,
        original_name: str,
        locator: FileLocator,
        size_bytes: int,
        media_type: str,
        uploaded_by: UserId,
    ) -> File:
        return cls(
            original_name=original_name,
            locator=locator,
            size_bytes=size_bytes,
            media_type=media_type,
            uploaded_by=uploaded_by,
            created_at=datetime.now(timezone.utc),
        )

    def is_uploaded_by(self, user_id: UserId) -> bool:
        return self.uploaded_by == user_id
