"""
Abstract storage backend interface.
Defines the contract static output is written through.
"""

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """
    Abstract base class for storage backends.

    Paths are relative, slash-separated storage keys such as
    "schema/class/Course.ttl".
    """

    @abstractmethod
    async def write_text(self, path: str, content: str) -> str:
        """
        Write a text document, replacing any existing one.

        Args:
            path: Destination path in storage
            content: Document text, stored as UTF-8

        Returns:
            The storage path where the document was saved

        Raises:
            StorageException: If the write fails
        """
        pass

    @abstractmethod
    async def read_text(self, path: str) -> str:
        """
        Read a text document.

        Raises:
            StorageException: If the document is missing or unreadable
        """
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check if a document exists in storage."""
        pass
