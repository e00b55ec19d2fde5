"""
SearchService - Product Discovery

Paged product browsing (category facets, geo-proximity ordering, sub-category
post-filtering) and Atlas Search backed text search with autocomplete.
"""

import time
from typing import Any, Dict, List, Mapping, Optional

from django.conf import settings
from pymongo.database import Database
from pymongo.errors import PyMongoError

from infrastructure.database import PRODUCTS
from infrastructure.observability.tracing import add_span_attributes, get_tracer
from marketplace.catalog.domain.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from marketplace.catalog.domain.services.product_query import (
    InvalidQueryError,
    apply_post_filter,
    build_page_pipeline,
    extract_facet,
    parse_page_params,
)
from marketplace.infra.observability.metrics import product_queries_total, product_query_duration, product_search_total

tracer = get_tracer(__name__)

SEARCH_PROJECTION = {"name": 1, "category": 1}
FUZZY = {"maxEdits": 2, "prefixLength": 3}


class SearchService(BaseService):
    """
    Service for product discovery.

    Responsibilities:
    - Paged product listing by category, optionally ordered by distance
    - Secondary filtering by sub-category/brand metadata
    - Fuzzy text search merged with name autocomplete
    """

    def __init__(self, db: Database, config: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.collection = db[PRODUCTS]
        self.config = config or settings.MARKETPLACE

    @BaseService.log_performance
    def page_products(self, params: Mapping[str, Any]) -> ServiceResult[Dict[str, Any]]:
        """
        Fetch one page of products.

        Args:
            params: Query parameters (page, limit, category, latitude, longitude)

        Returns:
            ServiceResult with ``products``, ``count``, ``page`` and ``limit``.
            When sub-category filters apply, ``count`` is the number of
            products left on this page after filtering.

        Example:
            >>> result = search_service.page_products({"page": "0", "limit": "10", "category": "Books|Fiction|"})
            >>> if result.ok:
            ...     products = result.value["products"]
        """
        try:
            query = parse_page_params(
                params,
                default_limit=self.config["DEFAULT_PAGE_LIMIT"],
                max_limit=self.config["MAX_PAGE_LIMIT"],
            )
        except InvalidQueryError as e:
            return service_err(ErrorCodes.INVALID_INPUT, str(e))

        mode = "geo" if query.is_geo else "plain"
        with tracer.start_as_current_span("search_page_products") as span:
            add_span_attributes(span, mode=mode, page=query.page, limit=query.limit, category=query.category)

            pipeline = build_page_pipeline(query, self.config["GEO_MAX_DISTANCE_METERS"])
            start_time = time.time()
            try:
                facet_result = list(self.collection.aggregate(pipeline))
            except PyMongoError as e:
                self.logger.error(f"Error fetching product page: mode={mode}, error={e}", exc_info=True)
                span.record_exception(e)
                return service_err(ErrorCodes.DATABASE_ERROR, str(e))
            finally:
                product_query_duration.labels(mode=mode).observe(time.time() - start_time)
            product_queries_total.labels(mode=mode).inc()

            products, total = extract_facet(facet_result)
            if query.has_post_filters:
                products = apply_post_filter(products, query.sub_category, query.sub_values)
                total = len(products)

            span.set_attribute("result.count", total)

        self.logger.info(
            f"Product page: mode={mode}, category={query.category}, page={query.page}, "
            f"limit={query.limit}, returned={len(products)}, count={total}"
        )

        return service_ok({"products": products, "count": total, "page": query.page, "limit": query.limit})

    def _atlas_search(self, index: str, operator: str, options: Dict[str, Any]) -> List[Dict[str, Any]]:
        pipeline = [
            {"$search": {"index": index, operator: options}},
            {"$project": {**SEARCH_PROJECTION, "score": {"$meta": "searchScore"}}},
            {"$sort": {"score": -1}},
            {"$limit": self.config["SEARCH_RESULT_LIMIT"]},
        ]
        return list(self.collection.aggregate(pipeline))

    @BaseService.log_performance
    def search(self, term: str) -> ServiceResult[List[Dict[str, Any]]]:
        """
        Fuzzy full-text search with name autocomplete.

        Text hits come first; autocomplete hits not already present are
        appended, and the union is sorted by search score, best first.

        Example:
            >>> result = search_service.search("iphon")
            >>> if result.ok:
            ...     names = [hit["name"] for hit in result.value]
        """
        term = (term or "").strip()
        try:
            autocomplete = self._atlas_search(
                self.config["AUTOCOMPLETE_INDEX"],
                "autocomplete",
                {"query": term, "path": "name", "fuzzy": FUZZY},
            )
            results = self._atlas_search(
                self.config["TEXT_SEARCH_INDEX"],
                "text",
                {"query": term, "path": {"wildcard": "*"}, "fuzzy": FUZZY},
            )
        except PyMongoError as e:
            self.logger.error(f"Error searching products: term='{term}', error={e}", exc_info=True)
            product_search_total.labels(status="error").inc()
            return service_err(ErrorCodes.DATABASE_ERROR, str(e))

        seen = {str(hit["_id"]) for hit in results}
        for hit in autocomplete:
            if str(hit["_id"]) not in seen:
                seen.add(str(hit["_id"]))
                results.append(hit)

        results.sort(key=lambda hit: hit.get("score", 0), reverse=True)
        product_search_total.labels(status="ok").inc()

        self.logger.info(f"Search: term='{term}', text+autocomplete results={len(results)}")

        return service_ok(results)
