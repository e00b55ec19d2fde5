"""
SellerService - read access to seller user documents.

User accounts are owned by the authentication service; the marketplace only
reads usernames and records which products a seller listed.
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.database import Database

from infrastructure.database import USERS, parse_object_id
from marketplace.catalog.domain.services.base import BaseService


class SellerService(BaseService):
    def __init__(self, db: Database):
        super().__init__()
        self.collection = db[USERS]

    @staticmethod
    def _user_filter(seller_id: str) -> Dict[str, Any]:
        object_id = parse_object_id(seller_id)
        if object_id is None:
            return {"_id": seller_id}
        return {"_id": {"$in": [object_id, str(seller_id)]}}

    def get_seller(self, seller_id: str) -> Optional[Dict[str, Any]]:
        """Seller user document, or None when no such user exists."""
        return self.collection.find_one(self._user_filter(seller_id), {"username": 1})

    def add_product(self, seller_id: str, product_id: ObjectId) -> bool:
        """
        Append ``product_id`` to the seller's product list.

        Returns:
            False when the seller does not exist
        """
        result = self.collection.update_one(self._user_filter(seller_id), {"$addToSet": {"products": product_id}})
        if result.matched_count == 0:
            self.logger.warning(f"Seller {seller_id} not found while recording product {product_id}")
            return False
        return True
