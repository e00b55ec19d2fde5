"""
Local Storage Adapter
=====================

Concrete implementation of StorageInterface over the local product image
directory, using Django's FileSystemStorage.
"""

import logging
import os
from typing import List, Optional

from django.conf import settings
from django.core.files.storage import FileSystemStorage

from .interface import StorageException, StorageInterface

logger = logging.getLogger(__name__)


class LocalStorageAdapter(StorageInterface):
    """
    Product image directory storage.

    Configuration (in settings.py):
        INFRASTRUCTURE["PRODUCT_IMAGE_DIR"]: directory holding product images
    """

    def __init__(self, location: Optional[str] = None):
        self._location = location or settings.INFRASTRUCTURE["PRODUCT_IMAGE_DIR"]
        self.storage = FileSystemStorage(location=self._location, base_url="/images/product/")

    def list_files(self) -> List[str]:
        if not os.path.isdir(self._location):
            logger.warning(f"Image directory {self._location} does not exist")
            return []

        try:
            _directories, files = self.storage.listdir("")
        except OSError as e:
            logger.error(f"Failed to list image directory {self._location}: {e}")
            raise StorageException(f"Listing failed: {str(e)}")

        return sorted(files)

    def delete(self, key: str) -> bool:
        try:
            if not self.storage.exists(key):
                logger.info(f"File {key} doesn't exist, won't remove it")
                return False

            self.storage.delete(key)
            logger.info(f"Removed image file: {key}")
            return True

        except OSError as e:
            logger.error(f"Error occurred while trying to remove file {key}: {e}")
            raise StorageException(f"Deletion failed: {str(e)}")
