"""
Prisma File Repository - Implements FileRepository port.
"""

from typing import Optional

from prisma import Prisma

from directchat.infrastructure.persistence._serial_range import storable
from directchat.domain.entities.file import File
from directchat.domain.ports.repositories.file_repository import FileRepository
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.file_locator import FileLocator
from directchat.domain.value_objects.user_id import UserId


class PrismaFileRepository(FileRepository):
    """Prisma implementation of FileRepository."""

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record) -> File:
        """Map Prisma record to domain entity."""
        return File(
            id=FileId(record.id),
            original_name=record.original_name,
            locator=FileLocator(record.file_path),
            size_bytes=int(record.file_size),
            media_type=record.mime_type,
            uploaded_by=UserId(record.uploaded_by),
            created_at=record.created_at,
        )

    async def get_by_id(self, file_id: FileId) -> Optional[File]:
        """Get file by ID."""
        if not storable(file_id.value):
            return None
        record = await self._prisma.filerecord.find_unique(
            where={"id": file_id.value}
        )
        return self._to_entity(record) if record else None

    async def create(self, file: File) -> File:
        """
        Create a new file record.

        Args:
            file: File entity (id should be None)

        Returns:
            File with generated id
        """
        record = await self._prisma.filerecord.create(
            data={
                "original_name": file.original_name,
                "file_path": file.locator.value,
                "file_size": file.size_bytes,
                "mime_type": file.media_type,
                "uploaded_by": file.uploaded_by.value,
                "created_at": file.created_at,
            }
        )
        return self._to_entity(record)
