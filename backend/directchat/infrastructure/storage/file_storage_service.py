"""
FileStorageService - Pure disk I/O operations.

Implements the ArtifactStore port:
- Save uploaded bytes to disk
- Check that a recorded locator still points at a file
- Confine every locator to the upload base (no reads outside it)

This is a SYNC service - no database, no async.
For database operations, use FileRepository.
"""

import os
import re
import logging
from datetime import datetime
from typing import Optional

from directchat.config.settings import Config
from directchat.domain.ports.artifact_store import ArtifactStore
from directchat.domain.value_objects.file_locator import FileLocator

logger = logging.getLogger(__name__)


class FileStorageService(ArtifactStore):
    """
    Pure file system operations service.

    All methods are synchronous since file I/O in Python is sync.
    """

    def __init__(self, upload_base: Optional[str] = None):
        """
        Initialize FileStorageService.

        Args:
            upload_base: Base directory for uploads (default: Config.UPLOAD_BASE)
        """
        self.upload_base = upload_base or Config.UPLOAD_BASE

    def save_file(
        self,
        content: bytes,
        directory: str,
        filename: str,
        make_unique: bool = True,
    ) -> str:
        """
        Save file content to disk.

        Args:
            content: File content as bytes
            directory: Target directory (will be created if not exists)
            filename: Original filename
            make_unique: If True, prepend timestamp to make filename unique

        Returns:
            Path to saved file
        """
        os.makedirs(directory, exist_ok=True)

        safe_filename = self._sanitize_filename(filename)
        if make_unique:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S%f")
            safe_filename = f"{timestamp}_{safe_filename}"

        file_path = os.path.join(directory, safe_filename)

        with open(file_path, "wb") as f:
            f.write(content)

        logger.debug(f"[FileStorage] Saved file: {file_path} ({len(content)} bytes)")
        return file_path

    def contains(self, locator: FileLocator) -> bool:
        """
        Check that the locator resolves to a path under the upload base.

        Symlinks and ".." segments are resolved first, so neither can be
        used to step outside the base.
        """
        base = os.path.realpath(self.upload_base)
        target = os.path.realpath(locator.value)
        return os.path.commonpath([base, target]) == base and target != base

    def file_exists(self, locator: FileLocator) -> bool:
        """Check if the artifact is still on disk, inside the upload base."""
        return self.contains(locator) and os.path.isfile(locator.value)

    def delete_file(self, locator: FileLocator) -> None:
        """Remove a stored artifact. Locators outside the upload base are ignored."""
        if not self.file_exists(locator):
            return
        try:
            os.remove(locator.value)
            logger.debug(f"[FileStorage] Deleted file: {locator.value}")
        except OSError as e:
            logger.warning(f"[FileStorage] Could not delete {locator.value}: {e}")

    def create_upload_dir(self, owner_id: str) -> str:
        """
        Create upload directory for a user.

        Directory structure: {upload_base}/{owner_id}/
        """
        directory = os.path.join(self.upload_base, owner_id)
        os.makedirs(directory, exist_ok=True)
        logger.debug(f"[FileStorage] Created upload dir: {directory}")
        return directory

    def _sanitize_filename(self, filename: str) -> str:
        """
        Sanitize filename to remove unsafe characters.

        Args:
            filename: Original filename

        Returns:
            Sanitized filename safe for file system
        """
        # Drop any directory part a client may have sent
        safe = os.path.basename(filename.replace("\\", "/"))
        # Replace unsafe characters with underscore
        safe = re.sub(r"[^\w\-_\. ]", "_", safe)
        safe = safe.strip()
        if not safe or safe in {".", ".."}:
            safe = "unnamed_file"
        return safe
