from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from infrastructure.database import ensure_indexes, parse_object_id, to_json_safe


@pytest.mark.unit
class TestDocuments:
    def test_parse_object_id(self):
        object_id = ObjectId()

        assert parse_object_id(str(object_id)) == object_id
        assert parse_object_id(object_id) is object_id
        assert parse_object_id("xyz") is None
        assert parse_object_id(None) is None

    def test_to_json_safe(self):
        object_id = ObjectId()
        created = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

        safe = to_json_safe({"_id": object_id, "created": created, "items": [object_id, {"at": created}], "n": 3})

        assert safe == {
            "_id": str(object_id),
            "created": "2024-05-01T12:30:00+00:00",
            "items": [str(object_id), {"at": "2024-05-01T12:30:00+00:00"}],
            "n": 3,
        }


@pytest.mark.unit
class TestEnsureIndexes:
    def test_creates_indexes(self):
        db = MagicMock()
        db.__getitem__.return_value.create_index.side_effect = lambda keys, name, **kwargs: name

        names = ensure_indexes(db)

        assert names[0] == "address_location_2dsphere"
        assert "name_1" in names
        products = db.__getitem__.return_value
        products.create_index.assert_any_call([("address.location", "2dsphere")], name="address_location_2dsphere")
        products.create_index.assert_any_call([("name", 1)], name="name_1", unique=True)
        products.create_index.assert_any_call(
            [("product", 1), ("buyer", 1), ("seller", 1)], name="product_buyer_seller", unique=True
        )
