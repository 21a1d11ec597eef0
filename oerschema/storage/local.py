"""
Local filesystem storage backend.
Writes the static vocabulary site under a single output directory.
"""

from pathlib import Path

import aiofiles
import aiofiles.os

from oerschema.config import get_settings
from oerschema.core.exceptions import StorageException
from oerschema.storage.base import StorageBackend


class LocalStorageBackend(StorageBackend):
    """
    Local filesystem storage implementation.

    Documents are stored under the configured STATIC_OUTPUT_DIR directory.
    """

    def __init__(self, base_path: str | Path | None = None):
        """
        Initialize local storage backend.

        Args:
            base_path: Output directory. Defaults to settings.STATIC_OUTPUT_DIR
        """
        self.base_path = Path(base_path or get_settings().STATIC_OUTPUT_DIR)
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageException(
                message=f"Failed to create output directory: {e}",
                details={"path": str(self.base_path)},
            )

    def _get_full_path(self, path: str) -> Path:
        """Get full filesystem path for a storage path, refusing to leave base_path."""
        full_path = (self.base_path / path).resolve()
        if not full_path.is_relative_to(self.base_path.resolve()):
            raise StorageException(
                message=f"Path escapes storage root: {path}",
                details={"path": path},
            )
        return full_path

    async def write_text(self, path: str, content: str) -> str:
        """Write a UTF-8 text document."""
        full_path = self._get_full_path(path)

        try:
            await aiofiles.os.makedirs(full_path.parent, exist_ok=True)
            async with aiofiles.open(full_path, "w", encoding="utf-8", newline="") as f:
                await f.write(content)
            return path

        except OSError as e:
            raise StorageException(
                message=f"Failed to write file: {e}",
                details={"path": path},
            )

    async def read_text(self, path: str) -> str:
        """Read a UTF-8 text document."""
        full_path = self._get_full_path(path)

        if not await aiofiles.os.path.isfile(full_path):
            raise StorageException(
                message=f"File not found: {path}",
                details={"path": path},
            )

        try:
            async with aiofiles.open(full_path, "r", encoding="utf-8", newline="") as f:
                return await f.read()

        except OSError as e:
            raise StorageException(
                message=f"Failed to read file: {e}",
                details={"path": path},
            )

    async def exists(self, path: str) -> bool:
        """Check if a file exists."""
        return await aiofiles.os.path.isfile(self._get_full_path(path))
