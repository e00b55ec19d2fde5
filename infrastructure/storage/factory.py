"""
Storage Factory
===============

Factory pattern for creating image storage instances.
"""

import logging
from typing import Optional

from django.conf import settings

from .interface import StorageInterface
from .local_adapter import LocalStorageAdapter

logger = logging.getLogger(__name__)


class StorageFactory:
    """
    Factory for creating the image storage backend.

    Usage:
        storage = StorageFactory.create()
    """

    @staticmethod
    def create(backend: Optional[str] = None) -> StorageInterface:
        """
        Create a storage backend instance.

        Args:
            backend: Backend name; defaults to INFRASTRUCTURE["STORAGE_BACKEND"]

        Raises:
            ValueError: If the backend is unknown
        """
        backend = backend or settings.INFRASTRUCTURE.get("STORAGE_BACKEND", "local")

        if backend == "local":
            logger.info("Creating local image storage backend")
            return LocalStorageAdapter()

        raise ValueError(f"Unknown storage backend: {backend}")

    @staticmethod
    def create_local(location: Optional[str] = None) -> LocalStorageAdapter:
        """Create the local storage backend explicitly."""
        return LocalStorageAdapter(location=location)
