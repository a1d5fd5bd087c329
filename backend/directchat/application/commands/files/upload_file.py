"""
Upload File Commands - record metadata for an uploaded artifact.

Two entry points:
- UploadFileCommand: the bytes are already stored; record name, locator, size
  and media type for the owner
- StoreFileCommand: write the bytes through the ArtifactStore first, then
  record them the same way

The 50 MB ceiling is checked by the request schema and again by the File
entity; over-limit sizes are rejected, never truncated.

Locators must resolve inside the ArtifactStore. If recording fails after the
bytes were written, the bytes are deleted again.
"""

import logging
from dataclasses import dataclass

from directchat.application.common.interfaces import Command, CommandHandler
from directchat.domain.entities.file import File, MAX_FILE_SIZE_BYTES
from directchat.domain.exceptions import DomainValidationError, UnknownUserError
from directchat.domain.ports import ArtifactStore
from directchat.domain.ports.repositories import FileRepository, UserRepository
from directchat.domain.value_objects.file_locator import FileLocator
from directchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


# ==================== RECORD METADATA ====================


@dataclass(frozen=True)
class UploadFileCommand(Command[File]):
    owner_id: UserId
    original_name: str
    locator: FileLocator
    size_bytes: int
    media_type: str


class UploadFileHandler(CommandHandler[File]):
    def __init__(
        self,
        file_repo: FileRepository,
        user_repo: UserRepository,
        artifact_store: ArtifactStore,
    ):
        self._file_repo = file_repo
        self._user_repo = user_repo
        self._artifact_store = artifact_store

    async def execute(self, command: UploadFileCommand) -> File:
        if await self._user_repo.get_by_id(command.owner_id) is None:
            raise UnknownUserError("User not found")

        # Download serves bytes from the locator, so it must stay inside the store
        if not self._artifact_store.contains(command.locator):
            raise DomainValidationError("File path is outside the upload directory")

        file = File.record(
            original_name=command.original_name,
            locator=command.locator,
            size_bytes=command.size_bytes,
            media_type=command.media_type,
            uploaded_by=command.owner_id,
        )
        file = await self._file_repo.create(file)
        logger.info(
            f"[Files] User {command.owner_id.value} uploaded file {file.id.value} "
            f"({file.original_name}, {file.size_bytes} bytes)"
        )
        return file


# ==================== STORE BYTES + RECORD ====================


@dataclass(frozen=True)
class StoreFileCommand(Command[File]):
    owner_id: UserId
    filename: str
    content: bytes
    media_type: str


class StoreFileHandler(CommandHandler[File]):
    def __init__(
        self,
        upload_handler: UploadFileHandler,
        user_repo: UserRepository,
        artifact_store: ArtifactStore,
    ):
        self._upload_handler = upload_handler
        self._user_repo = user_repo
        self._artifact_store = artifact_store

    async def execute(self, command: StoreFileCommand) -> File:
        # Checked before anything touches the disk
        if await self._user_repo.get_by_id(command.owner_id) is None:
            raise UnknownUserError("User not found")
        if len(command.content) > MAX_FILE_SIZE_BYTES:
            raise DomainValidationError("File too large")

        directory = self._artifact_store.create_upload_dir(
            str(command.owner_id.value)
        )
        locator = FileLocator(
            self._artifact_store.save_file(command.content, directory, command.filename)
        )

        try:
            return await self._upload_handler.execute(
                UploadFileCommand(
                    owner_id=command.owner_id,
                    original_name=command.filename,
                    locator=locator,
                    size_bytes=len(command.content),
                    media_type=command.media_type,
                )
            )
        except Exception:
            # No record points at the bytes, remove them
            logger.warning(
                f"[Files] Recording {locator.value} failed, deleting stored bytes"
            )
            self._artifact_store.delete_file(locator)
            raise
