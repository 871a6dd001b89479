"""Local filesystem storage for uploaded documents.

Files live under storage_root at "<yyyy>/<mm>/<cuid><ext>". Every storage
reference is resolved and checked against the root before use, and writes go
through a temp file + rename so a crashed upload never leaves a partial file
under its final name.
"""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from pathlib import Path

import aiofiles
import aiofiles.os

from firmdesk.infrastructure.exceptions import (
    StorageNotFoundError,
    StoragePermissionError,
    StorageWriteError,
)
from firmdesk.shared.utils.datetime import utc_now
from firmdesk.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


def _safe_extension(filename: str) -> str:
    """Lower-cased extension of the basename, limited to alphanumerics."""
    ext = os.path.splitext(os.path.basename(filename))[1].lower()
    if ext and ext[1:].isalnum() and len(ext) <= 16:
        return ext
    return ""


class LocalFileStorage:
    """Store, stream and delete files under a single root directory."""

    CHUNK_SIZE = 64 * 1024

    def __init__(self, storage_root: str) -> None:
        self.storage_root = Path(storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)

    def _resolve(self, storage_ref: str) -> Path:
        """Absolute path for storage_ref; StoragePermissionError if it escapes the root."""
        full_path = (self.storage_root / storage_ref).resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            raise StoragePermissionError(storage_ref) from e
        if full_path == self.storage_root:
            raise StoragePermissionError(storage_ref)
        return full_path

    def new_ref(self, filename: str) -> str:
        now = utc_now()
        return f"{now:%Y}/{now:%m}/{generate_cuid()}{_safe_extension(filename)}"

    async def save(self, content: bytes, filename: str) -> str:
        """Write content and return its storage reference."""
        storage_ref = self.new_ref(filename)
        target = self._resolve(storage_ref)
        temp = target.with_name(f".tmp_{target.name}")
        try:
            await aiofiles.os.makedirs(target.parent, exist_ok=True)
            async with aiofiles.open(temp, "wb") as f:
                await f.write(content)
            await aiofiles.os.rename(temp, target)
        except OSError as e:
            if temp.exists():
                temp.unlink()
            raise StorageWriteError(storage_ref, str(e)) from e
        logger.debug("Stored %d bytes at %s", len(content), storage_ref)
        return storage_ref

    async def exists(self, storage_ref: str) -> bool:
        return self._resolve(storage_ref).is_file()

    async def stream(self, storage_ref: str) -> AsyncIterator[bytes]:
        """Yield the file in CHUNK_SIZE pieces."""
        path = self._resolve(storage_ref)
        if not path.is_file():
            raise StorageNotFoundError(storage_ref)
        async with aiofiles.open(path, "rb") as f:
            while True:
                chunk = await f.read(self.CHUNK_SIZE)
                if not chunk:
                    break
                yield chunk

    async def delete(self, storage_ref: str) -> bool:
        """Remove the file; False if it was already gone."""
        path = self._resolve(storage_ref)
        if not path.is_file():
            return False
        await aiofiles.os.remove(path)
        return True
