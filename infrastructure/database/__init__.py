"""
Document Database Layer
=======================

MongoDB access through pymongo.
"""

from .documents import parse_object_id, to_json_safe
from .mongo import CHATS, HASHTAGS, PRODUCTS, USERS, MongoConnection, ensure_indexes

__all__ = [
    "MongoConnection",
    "ensure_indexes",
    "parse_object_id",
    "to_json_safe",
    "PRODUCTS",
    "CHATS",
    "HASHTAGS",
    "USERS",
]
