"""Helpers for moving MongoDB documents across the HTTP boundary."""

from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return ``value`` as an ObjectId, or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def to_json_safe(value: Any) -> Any:
    """
    Convert a document (or any nested value) into JSON-serializable data.

    ObjectIds become their hex string and datetimes ISO 8601 strings.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: to_json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(item) for item in value]
    return value
