from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from marketplace.catalog.domain.services import ErrorCodes, SearchService


CONFIG = {
    "DEFAULT_PAGE_LIMIT": 25,
    "MAX_PAGE_LIMIT": 100,
    "GEO_MAX_DISTANCE_METERS": 1000000,
    "SEARCH_RESULT_LIMIT": 5,
    "AUTOCOMPLETE_INDEX": "searchProducts",
    "TEXT_SEARCH_INDEX": "searchProductsTxt",
}


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def search_service(collection):
    db = MagicMock()
    db.__getitem__.return_value = collection
    return SearchService(db, config=CONFIG)


def facet(products, count):
    return [{"products": products, "totalProducts": [{"count": count}] if count else []}]


@pytest.mark.unit
class TestPageProducts:
    def test_page_uses_facet_total(self, search_service, collection):
        products = [{"_id": ObjectId(), "name": f"p{i}", "category": "Books"} for i in range(3)]
        collection.aggregate.return_value = iter(facet(products, 42))

        result = search_service.page_products({"page": "1", "limit": "3", "category": "Books"})

        assert result.ok is True
        assert result.value["count"] == 42
        assert result.value["products"] == products
        assert (result.value["page"], result.value["limit"]) == (1, 3)

        pipeline = collection.aggregate.call_args[0][0]
        assert pipeline[0] == {"$match": {"category": {"$in": ["Books"]}}}
        assert pipeline[1]["$facet"]["products"] == [{"$skip": 3}, {"$limit": 3}]

    def test_geo_page_orders_by_distance(self, search_service, collection):
        collection.aggregate.return_value = iter(facet([], 0))

        result = search_service.page_products({"latitude": "12.97", "longitude": "77.59"})

        assert result.ok is True
        pipeline = collection.aggregate.call_args[0][0]
        assert pipeline[0]["$geoNear"]["near"]["coordinates"] == [77.59, 12.97]
        assert pipeline[0]["$geoNear"]["maxDistance"] == CONFIG["GEO_MAX_DISTANCE_METERS"]

    def test_post_filter_overrides_count(self, search_service, collection):
        products = [
            {"name": "iphone", "metadata": {"subCategory": "Mobiles", "brand": "Apple"}},
            {"name": "galaxy", "metadata": {"subCategory": "Mobiles", "brand": "Samsung"}},
            {"name": "xps", "metadata": {"subCategory": "Laptops", "brand": "Dell"}},
        ]
        collection.aggregate.return_value = iter(facet(products, 120))

        result = search_service.page_products({"category": "Electronics|Mobiles|Apple"})

        assert result.ok is True
        assert [p["name"] for p in result.value["products"]] == ["iphone"]
        assert result.value["count"] == 1

    def test_invalid_params(self, search_service, collection):
        result = search_service.page_products({"page": "first"})

        assert result.ok is False
        assert result.error == ErrorCodes.INVALID_INPUT
        collection.aggregate.assert_not_called()

    def test_database_error(self, search_service, collection):
        collection.aggregate.side_effect = ServerSelectionTimeoutError("no servers")

        result = search_service.page_products({})

        assert result.ok is False
        assert result.error == ErrorCodes.DATABASE_ERROR


@pytest.mark.unit
class TestSearch:
    def test_merges_autocomplete_into_text_hits(self, search_service, collection):
        shared, text_only, auto_only = ObjectId(), ObjectId(), ObjectId()
        autocomplete = [
            {"_id": shared, "name": "iPhone 12", "score": 3.0},
            {"_id": auto_only, "name": "iPhone", "score": 5.0},
        ]
        text = [
            {"_id": shared, "name": "iPhone 12", "score": 2.5},
            {"_id": text_only, "name": "Phone case", "score": 1.0},
        ]
        collection.aggregate.side_effect = [iter(autocomplete), iter(text)]

        result = search_service.search("  iphon ")

        assert result.ok is True
        assert [hit["_id"] for hit in result.value] == [auto_only, shared, text_only]

        autocomplete_pipeline = collection.aggregate.call_args_list[0][0][0]
        search_stage = autocomplete_pipeline[0]["$search"]
        assert search_stage["index"] == "searchProducts"
        assert search_stage["autocomplete"]["query"] == "iphon"
        assert search_stage["autocomplete"]["fuzzy"] == {"maxEdits": 2, "prefixLength": 3}
        assert autocomplete_pipeline[-1] == {"$limit": 5}

        text_pipeline = collection.aggregate.call_args_list[1][0][0]
        assert text_pipeline[0]["$search"]["index"] == "searchProductsTxt"
        assert text_pipeline[0]["$search"]["text"]["path"] == {"wildcard": "*"}

    def test_no_hits(self, search_service, collection):
        collection.aggregate.side_effect = [iter([]), iter([])]

        result = search_service.search("zzz")

        assert result.ok is True
        assert result.value == []

    def test_database_error(self, search_service, collection):
        collection.aggregate.side_effect = ServerSelectionTimeoutError("no servers")

        result = search_service.search("phone")

        assert result.ok is False
        assert result.error == ErrorCodes.DATABASE_ERROR
