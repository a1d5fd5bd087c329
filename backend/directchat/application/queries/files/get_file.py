"""
File queries - metadata lookup and download, both access-controlled.

Usage in presentation layer:
    handler: FromDishka[DownloadFileHandler]
    file = await handler.execute(
        DownloadFileQuery(file_id=FileId(file_id), requester_id=current_user.id)
    )
    return FileResponse(path=file.locator.value, filename=file.original_name)

Access control (see domain.services.authorization_policy):
- Requester uploaded the file, OR
- Requester is a party of a conversation where a message references the file

Error order:
1. FileRecordNotFoundError - no such record (checked before any access rule)
2. AccessDeniedError
3. ArtifactMissingError (download only) - record exists, bytes are gone
"""

import logging
from dataclasses import dataclass

from directchat.application.common.interfaces import Query, QueryHandler
from directchat.domain.entities.file import File
from directchat.domain.exceptions import (
    AccessDeniedError,
    ArtifactMissingError,
    FileRecordNotFoundError,
)
from directchat.domain.ports import ArtifactStore
from directchat.domain.ports.repositories import (
    ConversationRepository,
    FileRepository,
)
from directchat.domain.services.authorization_policy import can_access_file
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("directchat.audit")


async def load_accessible_file(
    file_repo: FileRepository,
    conv_repo: ConversationRepository,
    file_id: FileId,
    requester_id: UserId,
) -> File:
    file = await file_repo.get_by_id(file_id)
    if file is None:
        raise FileRecordNotFoundError()

    # Uploader needs no conversation lookup
    if file.is_uploaded_by(requester_id):
        return file

    conversations = await conv_repo.list_referencing_file(file_id)
    if not can_access_file(requester_id, file, conversations):
        raise AccessDeniedError(
            "Access denied: User does not have permission to view this file"
        )
    return file


# ==================== FILE INFO ====================


@dataclass(frozen=True)
class GetFileInfoQuery(Query[File]):
    file_id: FileId
    requester_id: UserId


class GetFileInfoHandler(QueryHandler[File]):
    def __init__(
        self,
        file_repository: FileRepository,
        conversation_repository: ConversationRepository,
    ):
        self._file_repo = file_repository
        self._conv_repo = conversation_repository

    async def execute(self, query: GetFileInfoQuery) -> File:
        return await load_accessible_file(
            self._file_repo, self._conv_repo, query.file_id, query.requester_id
        )


# ==================== DOWNLOAD ====================


@dataclass(frozen=True)
class DownloadFileQuery(Query[File]):
    file_id: FileId
    requester_id: UserId


class DownloadFileHandler(QueryHandler[File]):
    def __init__(
        self,
        file_repository: FileRepository,
        conversation_repository: ConversationRepository,
        artifact_store: ArtifactStore,
    ):
        self._file_repo = file_repository
        self._conv_repo = conversation_repository
        self._artifact_store = artifact_store

    async def execute(self, query: DownloadFileQuery) -> File:
        file = await load_accessible_file(
            self._file_repo, self._conv_repo, query.file_id, query.requester_id
        )

        if not self._artifact_store.file_exists(file.locator):
            logger.warning(
                f"[Files] File {file.id.value} is registered but missing at "
                f"{file.locator.value}"
            )
            raise ArtifactMissingError()

        self._audit(file, query.requester_id)
        return file

    def _audit(self, file: File, requester_id: UserId) -> None:
        """Record who downloaded what. Best effort: never fails the download."""
        try:
            audit_logger.info(
                "File download: user %s downloading file %s (%s)",
                requester_id.value,
                file.id.value,
                file.original_name,
            )
        except Exception as e:
            logger.warning(f"[Files] Download audit record failed: {e}")
