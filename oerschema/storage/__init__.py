"""
Storage abstraction layer for static vocabulary output.
"""

from oerschema.storage.base import StorageBackend
from oerschema.storage.local import LocalStorageBackend

__all__ = [
    "StorageBackend",
    "LocalStorageBackend",
]
