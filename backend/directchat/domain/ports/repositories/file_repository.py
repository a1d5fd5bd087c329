"""
File Repository Port - Interface for uploaded-file metadata.
Implementation: directchat/infrastructure/persistence/prisma_file_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from directchat.domain.entities.file import File
from directchat.domain.value_objects.file_id import FileId


class FileRepository(ABC):
    @abstractmethod
    async def get_by_id(self, file_id: FileId) -> Optional[File]: ...

    @abstractmethod
    async def create(self, file: File) -> File: ...
