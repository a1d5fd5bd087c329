"""
Artifact Store Port - Where the bytes behind a File record live.
Implementation: directchat/infrastructure/storage/file_storage_service.py
"""

from abc import ABC, abstractmethod

from directchat.domain.value_objects.file_locator import FileLocator


class ArtifactStore(ABC):
    @abstractmethod
    def contains(self, locator: FileLocator) -> bool:
        """True iff the locator points inside this store's upload area."""
        ...

    @abstractmethod
    def file_exists(self, locator: FileLocator) -> bool:
        """True iff the store holds bytes at the locator (inside the store only)."""
        ...

    @abstractmethod
    def save_file(self, content: bytes, directory: str, filename: str) -> str:
        """Persist content and return the locator it can be found at."""
        ...

    @abstractmethod
    def delete_file(self, locator: FileLocator) -> None: ...

    @abstractmethod
    def create_upload_dir(self, owner_id: str) -> str: ...
