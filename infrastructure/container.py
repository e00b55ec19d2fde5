"""
Dependency Injection Container
================================

Simple service locator for infrastructure dependencies and domain services.

Usage:
    from infrastructure.container import container

    db = container.database()
    catalog = container.catalog_service()
"""

import logging
from typing import Optional

from pymongo.database import Database

from .database import MongoConnection
from .storage import StorageFactory, StorageInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for infrastructure dependencies.

    Implements lazy initialization and caching of service instances.
    Singleton: every ``ServiceContainer()`` call returns the same instance.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._mongo: Optional[MongoConnection] = None
            self._database: Optional[Database] = None
            self._storage: Optional[StorageInterface] = None

            # Domain Services
            self._hashtag_service = None
            self._seller_service = None
            self._catalog_service = None
            self._search_service = None
            self._chat_service = None

            self._initialized = True
            logger.info("Service container initialized")

    def mongo(self) -> MongoConnection:
        if self._mongo is None:
            self._mongo = MongoConnection()
        return self._mongo

    def database(self) -> Database:
        """Get the MongoDB database handle (cached)."""
        if self._database is None:
            self._database = self.mongo().database()
            logger.debug(f"Created database handle: {self._database.name}")
        return self._database

    def storage(self) -> StorageInterface:
        """Get the product image storage (cached)."""
        if self._storage is None:
            self._storage = StorageFactory.create()
            logger.debug(f"Created storage service: {type(self._storage).__name__}")
        return self._storage

    def hashtag_service(self):
        if self._hashtag_service is None:
            from marketplace.catalog.domain.services import HashtagService

            self._hashtag_service = HashtagService(self.database())
            logger.debug("Created HashtagService")
        return self._hashtag_service

    def seller_service(self):
        if self._seller_service is None:
            from marketplace.catalog.domain.services import SellerService

            self._seller_service = SellerService(self.database())
            logger.debug("Created SellerService")
        return self._seller_service

    def catalog_service(self):
        """Get CatalogService instance."""
        if self._catalog_service is None:
            from marketplace.catalog.domain.services import CatalogService

            self._catalog_service = CatalogService(
                db=self.database(),
                storage=self.storage(),
                hashtag_service=self.hashtag_service(),
                seller_service=self.seller_service(),
            )
            logger.debug("Created CatalogService")
        return self._catalog_service

    def search_service(self):
        """Get SearchService instance."""
        if self._search_service is None:
            from marketplace.catalog.domain.services import SearchService

            self._search_service = SearchService(self.database())
            logger.debug("Created SearchService")
        return self._search_service

    def chat_service(self):
        """Get ChatService instance."""
        if self._chat_service is None:
            from chat.domain.services.chat_service import ChatService

            self._chat_service = ChatService(self.database())
            logger.debug("Created ChatService")
        return self._chat_service

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or when switching between environments.
        """
        if self._mongo is not None:
            self._mongo.close()
        self._mongo = None
        self._database = None
        self._storage = None
        self._hashtag_service = None
        self._seller_service = None
        self._catalog_service = None
        self._search_service = None
        self._chat_service = None
        logger.info("Service container reset")

    def configure_for_testing(self, database: Database, storage: Optional[StorageInterface] = None):
        """
        Wire the container to a test database (e.g. a mongomock database) and storage.
        """
        self.reset()
        self._database = database
        self._storage = storage
        logger.info("Service container configured for testing")


# Global singleton instance
container = ServiceContainer()
