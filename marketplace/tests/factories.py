import random
import secrets
from datetime import datetime, timezone

import factory
from bson import ObjectId
from faker import Faker

from marketplace.catalog.domain.documents import geo_point

fake = Faker()  # Instantiate Faker once


class UserDocumentFactory(factory.DictFactory):
    _id = factory.LazyFunction(ObjectId)
    username = factory.Sequence(lambda n: f"user_{n}")
    email = factory.Sequence(lambda n: f"user_{n}@example.com")
    products = factory.LazyFunction(list)


class AddressFactory(factory.DictFactory):
    location = factory.LazyFunction(lambda: geo_point(fake.longitude(), fake.latitude()))
    state = "Karnataka"
    pin = factory.LazyFunction(lambda: str(random.randint(100000, 999999)))
    meta = factory.LazyFunction(list)


class ProductDocumentFactory(factory.DictFactory):
    """Product as stored in the ``products`` collection."""

    _id = factory.LazyFunction(ObjectId)
    name = factory.Sequence(lambda n: f"Product {n}")
    price = factory.LazyFunction(lambda: round(random.uniform(10, 5000), 2))
    description = factory.LazyFunction(lambda: fake.sentence())
    note = ""
    modelNo = ""
    category = "Electronics"
    seller = factory.LazyFunction(lambda: str(ObjectId()))
    sellerUname = factory.Sequence(lambda n: f"seller_{n}")
    boughtBy = None
    tag = factory.LazyFunction(lambda: secrets.token_hex(16))
    productImages = factory.LazyFunction(list)
    hashtags = factory.LazyFunction(list)
    metadata = factory.LazyFunction(lambda: {"subCategory": "Mobiles", "brand": "Apple"})
    address = factory.SubFactory(AddressFactory)
    created = factory.LazyFunction(lambda: datetime.now(timezone.utc))
    lastUpdated = factory.LazyFunction(lambda: datetime.now(timezone.utc))


def product_payload(**overrides):
    """A valid create-product request body."""
    payload = {
        "name": "iPhone 12",
        "price": 450.0,
        "description": "Lightly used, with charger",
        "category": "Electronics",
        "seller": str(ObjectId()),
        "tag": secrets.token_hex(16),
        "state": "Karnataka",
        "pincode": "560001",
        "longitude": 77.5946,
        "latitude": 12.9716,
        "note": "",
        "modelNo": "A2403",
        "hashtags": ["iphone", "apple"],
        "metadata": {"subCategory": "Mobiles", "brand": "Apple"},
        "locationMeta": [],
    }
    payload.update(overrides)
    return payload
