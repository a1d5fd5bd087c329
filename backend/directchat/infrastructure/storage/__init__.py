from directchat.infrastructure.storage.file_storage_service import FileStorageService

__all__ = ["FileStorageService"]
