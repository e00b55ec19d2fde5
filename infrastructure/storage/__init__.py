"""
Storage Abstraction Layer
==========================

Provides a unified interface for product image file operations.
"""

from .factory import StorageFactory
from .interface import StorageException, StorageInterface
from .local_adapter import LocalStorageAdapter

__all__ = [
    "StorageInterface",
    "StorageException",
    "LocalStorageAdapter",
    "StorageFactory",
]
