"""File DTOs for API request/response."""

from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel

from directchat.domain.entities.file import File


class FileDTO(BaseModel):
    """File metadata, as returned by upload and file-info endpoints."""

    id: int
    original_name: str
    file_path: str
    file_size: int
    mime_type: str
    uploaded_by: int
    created_at: datetime
    download_url: str

    @classmethod
    def from_entity(cls, file: File) -> FileDTO:
        return cls(
            id=file.id.value,
            original_name=file.original_name,
            file_path=file.locator.value,
            file_size=file.size_bytes,
            mime_type=file.media_type,
            uploaded_by=file.uploaded_by.value,
            created_at=file.created_at,
            download_url=f"/files/{file.id.value}/download",
        )
