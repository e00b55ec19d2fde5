"""
Product page query construction.

Turns page/limit/category/coordinate parameters into a MongoDB aggregation
pipeline, and filters the returned page by the sub-category levels the
pipeline does not express.

Category filters are pipe-delimited: ``"Electronics|Mobiles|Apple,Samsung"``
matches Electronics in the database, then keeps products whose metadata has
Mobiles as subCategory/genre/brand and Apple or Samsung among its values.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

CATEGORY_SEPARATOR = "|"
VALUE_SEPARATOR = ","
# Metadata keys compared against the first sub-category level
LEVEL_ONE_KEYS = ("subCategory", "genre", "brand")
DISTANCE_FIELD = "dist.calculated"
# Largest $skip a BSON int64 can carry
MAX_SKIP = 2**63 - 1


class InvalidQueryError(ValueError):
    """Raised when page query parameters cannot be interpreted."""


@dataclass
class ProductPageQuery:
    page: int
    limit: int
    category: Optional[str] = None
    sub_category: Optional[str] = None
    sub_values: List[str] = field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def is_geo(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def has_post_filters(self) -> bool:
        return bool(self.sub_category or self.sub_values)

    @property
    def skip(self) -> int:
        return self.page * self.limit


def _blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def _to_int(name: str, value: Any) -> int:
    try:
        number = int(str(value).strip())
    except ValueError:
        raise InvalidQueryError(f"{name} must be an integer")
    if number < 0:
        raise InvalidQueryError(f"{name} must not be negative")
    return number


def _to_coordinate(name: str, value: Any, bound: float) -> Optional[float]:
    if _blank(value):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        raise InvalidQueryError(f"{name} must be a number")
    if not -bound <= number <= bound:
        raise InvalidQueryError(f"{name} must be between {-bound} and {bound}")
    return number


def parse_category_filter(raw: Optional[str]) -> Tuple[Optional[str], Optional[str], List[str]]:
    """
    Split a pipe-delimited category filter into (category, level one, level two values).

    Empty segments are treated as absent.
    """
    if _blank(raw):
        return None, None, []

    segments = str(raw).split(CATEGORY_SEPARATOR)
    category = segments[0].strip() or None
    sub_category = segments[1].strip() if len(segments) > 1 and segments[1].strip() else None
    sub_values = []
    if len(segments) > 2:
        sub_values = [value.strip() for value in segments[2].split(VALUE_SEPARATOR) if value.strip()]
    return category, sub_category, sub_values


def parse_page_params(
    params: Mapping[str, Any], default_limit: int = 25, max_limit: int = 100
) -> ProductPageQuery:
    """
    Build a ProductPageQuery from request query parameters.

    A missing page or limit, or a zero limit, falls back to page 0 and the
    default limit. Pages are 0-based. Limits above ``max_limit`` and pages whose
    offset would not fit a 64-bit integer are rejected.

    Raises:
        InvalidQueryError: for non-numeric or out-of-range values
    """
    raw_page, raw_limit = params.get("page"), params.get("limit")
    page = 0 if _blank(raw_page) else _to_int("page", raw_page)
    limit = 0 if _blank(raw_limit) else _to_int("limit", raw_limit)
    if limit == 0:
        limit = default_limit
    if limit > max_limit:
        raise InvalidQueryError(f"limit must not exceed {max_limit}")
    if page * limit > MAX_SKIP:
        raise InvalidQueryError("page is too large")

    category, sub_category, sub_values = parse_category_filter(params.get("category"))

    latitude = _to_coordinate("latitude", params.get("latitude"), 90)
    longitude = _to_coordinate("longitude", params.get("longitude"), 180)

    return ProductPageQuery(
        page=page,
        limit=limit,
        category=category,
        sub_category=sub_category,
        sub_values=sub_values,
        latitude=latitude,
        longitude=longitude,
    )


def build_category_match(category: Optional[str]) -> Dict[str, Any]:
    if category:
        return {"$match": {"category": {"$in": [category]}}}
    return {"$match": {"category": {"$regex": "."}}}


def build_page_pipeline(query: ProductPageQuery, max_distance: int) -> List[Dict[str, Any]]:
    """
    Aggregation pipeline for one product page.

    With coordinates the pipeline opens with $geoNear (results come back sorted
    by distance, capped at ``max_distance`` metres); otherwise with the plain
    category match. Both end in a $facet holding the page and the total count.
    """
    pipeline: List[Dict[str, Any]] = []
    if query.is_geo:
        pipeline.append(
            {
                "$geoNear": {
                    "near": {"type": "Point", "coordinates": [query.longitude, query.latitude]},
                    "key": "address.location",
                    "distanceField": DISTANCE_FIELD,
                    "maxDistance": max_distance,
                    "spherical": True,
                }
            }
        )
    pipeline.append(build_category_match(query.category))
    pipeline.append(
        {
            "$facet": {
                "products": [{"$skip": query.skip}, {"$limit": query.limit}],
                "totalProducts": [{"$count": "count"}],
            }
        }
    )
    return pipeline


def matches_sub_filters(product: Dict[str, Any], sub_category: Optional[str], sub_values: List[str]) -> bool:
    if not sub_category and not sub_values:
        return True

    metadata = product.get("metadata")
    if not metadata:
        return False

    if sub_category and sub_category not in [metadata.get(key) for key in LEVEL_ONE_KEYS]:
        return False

    if sub_values:
        values = list(metadata.values())
        if not any(value in values for value in sub_values):
            return False

    return True


def apply_post_filter(
    products: List[Dict[str, Any]], sub_category: Optional[str], sub_values: List[str]
) -> List[Dict[str, Any]]:
    """Keep the products whose metadata matches both sub-category levels."""
    return [product for product in products if matches_sub_filters(product, sub_category, sub_values)]


def extract_facet(facet_result: List[Dict[str, Any]]) -> Tuple[List[Dict[str, Any]], int]:
    """Unpack the single $facet output document into (products, total count)."""
    if not facet_result:
        return [], 0
    facet = facet_result[0]
    totals = facet.get("totalProducts") or []
    total = totals[0]["count"] if totals else 0
    return list(facet.get("products") or []), total
