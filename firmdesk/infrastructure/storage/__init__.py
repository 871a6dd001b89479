"""File storage backends."""

from firmdesk.infrastructure.storage.local_storage import LocalFileStorage

__all__ = ["LocalFileStorage"]
