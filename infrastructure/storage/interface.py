"""
Storage Interface
=================

Abstract base class defining the contract for image file storage operations.
Product images are uploaded out of band; the marketplace only needs to list and
remove them.
"""

from abc import ABC, abstractmethod
from typing import List


class StorageInterface(ABC):
    """
    Abstract interface for image storage.

    Concrete implementations:
        - LocalStorageAdapter: local product image directory
    """

    @abstractmethod
    def list_files(self) -> List[str]:
        """
        List the filenames stored at the storage root.

        Returns:
            Filenames (no directories), empty if the root does not exist yet

        Raises:
            StorageException: If the root cannot be read
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Delete a file from storage.

        Args:
            key: Filename to delete

        Returns:
            True if the file was removed, False if it did not exist

        Raises:
            StorageException: If deletion fails
        """
        pass


class StorageException(Exception):
    """Base exception for storage operations."""

    pass
