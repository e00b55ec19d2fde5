"""
MongoDB Connection
==================

Lazily created pymongo client and database handle, plus the index set the
marketplace queries rely on.
"""

import logging
from typing import List, Optional

from django.conf import settings
from pymongo import ASCENDING, DESCENDING, GEOSPHERE, MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

PRODUCTS = "products"
CHATS = "chats"
HASHTAGS = "hashtags"
USERS = "users"


class MongoConnection:
    """
    Owns a single MongoClient for the process.

    Configuration (in settings.py):
        INFRASTRUCTURE["MONGO_URI"]: connection string
        INFRASTRUCTURE["MONGO_DB_NAME"]: database name
        INFRASTRUCTURE["MONGO_SERVER_SELECTION_TIMEOUT_MS"]: server selection timeout
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        db_name: Optional[str] = None,
        timeout_ms: Optional[int] = None,
    ):
        config = settings.INFRASTRUCTURE
        self.uri = uri or config["MONGO_URI"]
        self.db_name = db_name or config["MONGO_DB_NAME"]
        self.timeout_ms = timeout_ms or config.get("MONGO_SERVER_SELECTION_TIMEOUT_MS", 5000)
        self._client: Optional[MongoClient] = None

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            # MongoClient connects in the background; nothing blocks here
            self._client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms, tz_aware=True)
            logger.info(f"MongoDB client created for database '{self.db_name}'")
        return self._client

    def database(self) -> Database:
        return self.client[self.db_name]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB client closed")


def ensure_indexes(db: Database) -> List[str]:
    """
    Create the indexes used by product discovery and chat lookups.

    Geo coordinates are stored as [longitude, latitude], which is what the
    2dsphere index on ``address.location`` expects.

    Returns:
        Names of the indexes ensured
    """
    created = [
        db[PRODUCTS].create_index([("address.location", GEOSPHERE)], name="address_location_2dsphere"),
        db[PRODUCTS].create_index([("category", ASCENDING)], name="category_1"),
        db[PRODUCTS].create_index([("seller", ASCENDING)], name="seller_1"),
        db[PRODUCTS].create_index([("tag", ASCENDING)], name="tag_1"),
        db[CHATS].create_index(
            [("participants", ASCENDING), ("lastUpdated", DESCENDING)], name="participants_1_lastUpdated_-1"
        ),
        db[CHATS].create_index(
            [("product", ASCENDING), ("buyer", ASCENDING), ("seller", ASCENDING)],
            name="product_buyer_seller",
            unique=True,
        ),
        db[HASHTAGS].create_index([("name", ASCENDING)], name="name_1", unique=True),
    ]
    logger.info(f"Ensured {len(created)} MongoDB indexes")
    return created
