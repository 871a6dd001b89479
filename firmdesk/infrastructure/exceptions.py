"""Infrastructure exceptions for file storage.

Storage errors extend FirmDeskException so presentation can map them
to HTTP responses consistently.
"""

from firmdesk.domain.exceptions import FirmDeskException


class StorageException(FirmDeskException):
    """Base exception for storage operations."""


class StorageNotFoundError(StorageException):
    """Stored file is missing."""

    def __init__(self, storage_ref: str) -> None:
        super().__init__(
            "Stored file not found",
            "STORAGE_NOT_FOUND",
            {"storage_ref": storage_ref},
        )


class StorageWriteError(StorageException):
    """Writing a file to storage failed."""

    def __init__(self, storage_ref: str, reason: str) -> None:
        super().__init__(
            "Failed to store file",
            "STORAGE_WRITE_ERROR",
            {"storage_ref": storage_ref, "reason": reason},
        )


class StoragePermissionError(StorageException):
    """Storage reference resolves outside the storage root."""

    def __init__(self, storage_ref: str) -> None:
        super().__init__(
            "Invalid storage path",
            "STORAGE_PERMISSION_ERROR",
            {"storage_ref": storage_ref},
        )
