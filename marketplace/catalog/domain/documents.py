"""
Product document shape.

Products are stored in the ``products`` collection; this module is the one
place that knows the field names written there.
"""

import os
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

IMAGE_NAME_SEPARATOR = "---"


def geo_point(longitude: float, latitude: float) -> Dict[str, Any]:
    """
    GeoJSON point for ``address.location``.

    Coordinates are always [longitude, latitude] floats, the order the
    2dsphere index and $geoNear expect.
    """
    return {"type": "Point", "coordinates": [float(longitude), float(latitude)]}


def image_matches_tag(filename: str, tag: str) -> bool:
    """
    Whether an uploaded image belongs to the product carrying ``tag``.

    Upload names look like ``<timestamp>---<original>---<tag>.<ext>``; the third
    ``---`` segment of the stem must contain the tag.
    """
    if not tag:
        return False
    stem, _ext = os.path.splitext(os.path.basename(filename))
    segments = stem.split(IMAGE_NAME_SEPARATOR)
    return len(segments) > 2 and tag in segments[2]


def images_for_tag(filenames: Iterable[str], tag: str) -> List[str]:
    return [name for name in filenames if image_matches_tag(name, tag)]


def collect_hashtags(hashtags: Optional[Iterable[str]], category: str) -> List[str]:
    """Request hashtags plus the lower-cased category, without duplicates, order kept."""
    tags = [tag.strip() for tag in (hashtags or []) if tag and tag.strip()]
    if category:
        tags.append(category.lower())
    return list(dict.fromkeys(tags))


def build_product_document(
    data: Dict[str, Any],
    seller_username: str,
    images: List[str],
    hashtags: List[str],
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Assemble the document inserted for a new product.

    Args:
        data: Validated create-product payload
        seller_username: Username copied from the seller's user document
        images: Image filenames attached to the product
        hashtags: Final hashtag list
        now: Creation timestamp (defaults to the current UTC time)
    """
    now = now or datetime.now(timezone.utc)
    return {
        "name": data["name"],
        "price": data["price"],
        "description": data["description"],
        "note": data.get("note") or "",
        "modelNo": data.get("modelNo") or "",
        "category": data.get("category") or "",
        "seller": data["seller"],
        "sellerUname": seller_username or "",
        "boughtBy": data.get("boughtBy"),
        "tag": data["tag"],
        "productImages": images,
        "created": now,
        "lastUpdated": now,
        "hashtags": hashtags,
        "metadata": data.get("metadata") or {},
        "address": {
            "location": geo_point(data["longitude"], data["latitude"]),
            "state": data["state"],
            "pin": data["pincode"],
            "meta": data.get("locationMeta") or [],
        },
    }
