"""
Files API Router - FastAPI endpoints for file operations.

Endpoints:
- POST /files                 - Record metadata for an already stored file
- POST /files/upload          - Upload bytes (multipart/form-data), store, record
- GET  /files/{file_id}       - File metadata (uploader or conversation participant)
- GET  /files/{file_id}/download - File content, same access rule

Access control lives in the query handlers; a file is visible to its uploader
and to participants of any conversation with a message referencing it.
"""

import logging

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import FileResponse
from pydantic import BaseModel, Field

from directchat.application.commands.files import (
    StoreFileCommand,
    StoreFileHandler,
    UploadFileCommand,
    UploadFileHandler,
)
from directchat.application.dto.file import FileDTO
from directchat.application.queries.files import (
    DownloadFileHandler,
    DownloadFileQuery,
    GetFileInfoHandler,
    GetFileInfoQuery,
)
from directchat.config.settings import Config
from directchat.domain.value_objects.file_id import FileId
from directchat.domain.value_objects.file_locator import FileLocator
from directchat.presentation.dependencies.auth import AuthUser, get_current_user

logger = logging.getLogger(__name__)

# Maximum upload size in bytes (from Config)
MAX_UPLOAD_BYTES = int(Config.MAX_UPLOAD_MB * 1024 * 1024)

PAYLOAD_TOO_LARGE = 413


# ==================== REQUEST MODELS ====================


class RecordFileRequest(BaseModel):
    """Metadata for a file the client already placed in storage."""

    original_name: str = Field(min_length=1, max_length=255)
    file_path: str = Field(min_length=1)
    file_size: int = Field(ge=0, le=MAX_UPLOAD_BYTES)
    mime_type: str = Field(min_length=1, max_length=100)


# ==================== ROUTER ====================

router = APIRouter(prefix="/files", tags=["files"])


@router.post("", response_model=FileDTO, status_code=status.HTTP_201_CREATED)
@inject
async def record_file(
    request: RecordFileRequest,
    handler: FromDishka[UploadFileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Record an uploaded file's metadata; the caller becomes the uploader."""
    command = UploadFileCommand(
        owner_id=current_user.id,
        original_name=request.original_name,
        locator=FileLocator(request.file_path),
        size_bytes=request.file_size,
        media_type=request.mime_type,
    )
    file = await handler.execute(command)
    return FileDTO.from_entity(file)


@router.post("/upload", response_model=FileDTO, status_code=status.HTTP_201_CREATED)
@inject
async def upload_file(
    handler: FromDishka[StoreFileHandler],
    current_user: AuthUser = Depends(get_current_user),
    file: UploadFile = File(...),
):
    """
    Upload a file.

    Request: multipart/form-data with a single ``file`` part.
    Max file size: Config.MAX_UPLOAD_MB (50 MB by default).
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=PAYLOAD_TOO_LARGE,
            detail=f"File too large. Maximum upload size is {Config.MAX_UPLOAD_MB} MB.",
        )

    command = StoreFileCommand(
        owner_id=current_user.id,
        filename=file.filename or "unknown",
        content=content,
        media_type=file.content_type or "application/octet-stream",
    )
    stored = await handler.execute(command)
    logger.info(f"User {current_user.id} uploaded file {stored.id} ({len(content)} bytes)")
    return FileDTO.from_entity(stored)


@router.get("/{file_id}", response_model=FileDTO)
@inject
async def get_file_info(
    file_id: int,
    handler: FromDishka[GetFileInfoHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """File metadata for the uploader or a participant of a sharing conversation."""
    query = GetFileInfoQuery(file_id=FileId(file_id), requester_id=current_user.id)
    return FileDTO.from_entity(await handler.execute(query))


@router.get("/{file_id}/download")
@inject
async def download_file(
    file_id: int,
    handler: FromDishka[DownloadFileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Download a file by its ID.

    Returns:
        FileResponse with the file content as attachment
    """
    query = DownloadFileQuery(file_id=FileId(file_id), requester_id=current_user.id)
    file = await handler.execute(query)

    return FileResponse(
        path=file.locator.value,
        filename=file.original_name,
        media_type=file.media_type or "application/octet-stream",
    )
