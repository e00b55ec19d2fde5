"""
CatalogService - Product CRUD

Handles product creation, lookup and deletion over the ``products``
collection. Product images are uploaded before the product exists and are
linked to it through the product tag; deleting a product removes its image
files from storage.
"""

import re
import secrets
from typing import Any, Dict, List

from pymongo.database import Database
from pymongo.errors import PyMongoError

from infrastructure.database import PRODUCTS, parse_object_id
from infrastructure.observability.tracing import get_tracer
from infrastructure.storage.interface import StorageException, StorageInterface
from marketplace.catalog.domain.category_config import is_known_state
from marketplace.catalog.domain.documents import build_product_document, collect_hashtags, images_for_tag
from marketplace.catalog.domain.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from marketplace.catalog.domain.services.hashtag_service import HashtagService
from marketplace.catalog.domain.services.seller_service import SellerService
from marketplace.infra.observability.metrics import (
    product_images_removed_total,
    products_created_total,
    products_deleted_total,
)

tracer = get_tracer(__name__)

PIN_PATTERN = re.compile(r"^\d{6}$")


class CatalogService(BaseService):
    """
    Service for managing the product catalog.

    Responsibilities:
    - Create products (location, seller name, images and hashtags resolved here)
    - Get products individually, in bulk or by id list
    - Delete products together with their image files
    - Issue product tags for image uploads

    All operations return ServiceResult.
    """

    def __init__(
        self,
        db: Database,
        storage: StorageInterface,
        hashtag_service: HashtagService,
        seller_service: SellerService,
    ):
        """
        Initialize CatalogService.

        Args:
            db: MongoDB database handle
            storage: Product image storage (injected via DI container)
            hashtag_service: Hashtag usage counter
            seller_service: Seller user lookups
        """
        super().__init__()
        self.collection = db[PRODUCTS]
        self.storage = storage
        self.hashtag_service = hashtag_service
        self.seller_service = seller_service

    def create_tag(self) -> str:
        """Random 32 hex character tag that uploaded image names carry."""
        return secrets.token_hex(16)

    @BaseService.log_performance
    def create_product(self, data: Dict[str, Any]) -> ServiceResult[Dict[str, Any]]:
        """
        Create a product from a validated payload.

        Args:
            data: name, price, description, category, seller, tag, state,
                pincode, longitude, latitude and optional note, modelNo,
                hashtags, metadata, locationMeta

        Returns:
            ServiceResult with ``productId``. Errors: INVALID_LOCATION,
            STORAGE_ERROR, CREATION_FAILED, USER_NOT_FOUND, DATABASE_ERROR

        Example:
            >>> result = catalog_service.create_product(serializer.validated_data)
            >>> if result.ok:
            ...     product_id = result.value["productId"]
        """
        if not is_known_state(data.get("state", "")) or not PIN_PATTERN.match(str(data.get("pincode", ""))):
            return service_err(ErrorCodes.INVALID_LOCATION, "Invalid PIN/State information")

        with tracer.start_as_current_span("catalog_create_product") as span:
            span.set_attribute("category", data.get("category", ""))

            try:
                seller = self.seller_service.get_seller(data["seller"])
            except PyMongoError as e:
                self.logger.error(f"Error looking up seller {data['seller']}: {e}", exc_info=True)
                return service_err(ErrorCodes.DATABASE_ERROR, str(e))
            seller_username = seller.get("username", "") if seller else ""

            try:
                images = images_for_tag(self.storage.list_files(), data["tag"])
            except StorageException as e:
                self.logger.error(f"Error reading product images for tag {data['tag']}: {e}")
                return service_err(ErrorCodes.STORAGE_ERROR, str(e))
            span.set_attribute("images.count", len(images))

            hashtags = collect_hashtags(data.get("hashtags"), data.get("category", ""))
            hashtag_result = self.hashtag_service.create_or_update(hashtags)
            if not hashtag_result.ok:
                self.logger.warning(f"Hashtags not updated for new product: {hashtag_result.error_detail}")

            document = build_product_document(data, seller_username, images, hashtags)
            try:
                product_id = self.collection.insert_one(document).inserted_id
            except PyMongoError as e:
                self.logger.error(f"Product creation failed: {e}", exc_info=True)
                products_created_total.labels(status="failed").inc()
                span.record_exception(e)
                return service_err(ErrorCodes.CREATION_FAILED, "Product Creation Failure")

            products_created_total.labels(status="created").inc()
            span.set_attribute("product.id", str(product_id))

            try:
                seller_updated = self.seller_service.add_product(data["seller"], product_id)
            except PyMongoError as e:
                self.logger.error(f"Error recording product {product_id} for seller: {e}", exc_info=True)
                return service_err(ErrorCodes.DATABASE_ERROR, str(e))
            if not seller_updated:
                return service_err(ErrorCodes.USER_NOT_FOUND, "User Not Found")

        self.logger.info(f"Created product {product_id} with {len(images)} images")

        return service_ok({"productId": product_id})

    @BaseService.log_performance
    def list_products(self) -> ServiceResult[List[Dict[str, Any]]]:
        try:
            return service_ok(list(self.collection.find()))
        except PyMongoError as e:
            self.logger.error(f"Error listing products: {e}", exc_info=True)
            return service_err(ErrorCodes.DATABASE_ERROR, str(e))

    @BaseService.log_performance
    def get_product(self, product_id: str) -> ServiceResult[Dict[str, Any]]:
        """
        Get a product by id.

        Returns:
            ServiceResult with the product document, PRODUCT_NOT_FOUND for
            malformed or unknown ids
        """
        object_id = parse_object_id(product_id)
        if object_id is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} not found")

        try:
            product = self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            self.logger.error(f"Error fetching product {product_id}: {e}", exc_info=True)
            return service_err(ErrorCodes.DATABASE_ERROR, str(e))

        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} not found")
        return service_ok(product)

    @BaseService.log_performance
    def get_products_by_ids(self, id_list: List[str]) -> ServiceResult[List[Dict[str, Any]]]:
        """Products whose ids are in ``id_list``; any malformed id fails the lookup."""
        object_ids = [parse_object_id(product_id) for product_id in id_list]
        if any(object_id is None for object_id in object_ids):
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Malformed product id in id list")

        try:
            return service_ok(list(self.collection.find({"_id": {"$in": object_ids}})))
        except PyMongoError as e:
            self.logger.error(f"Error fetching products by id list: {e}", exc_info=True)
            return service_err(ErrorCodes.DATABASE_ERROR, str(e))

    @BaseService.log_performance
    def delete_product(self, product_id: str) -> ServiceResult[Dict[str, Any]]:
        """
        Delete a product and its image files.

        Image files that are already gone are skipped; a storage failure on
        one file is logged and does not undo the deletion.

        Returns:
            ServiceResult with ``removedImages``
        """
        object_id = parse_object_id(product_id)
        if object_id is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} not found")

        try:
            product = self.collection.find_one_and_delete({"_id": object_id})
        except PyMongoError as e:
            self.logger.error(f"Error deleting product {product_id}: {e}", exc_info=True)
            return service_err(ErrorCodes.DATABASE_ERROR, str(e))

        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} not found")
        products_deleted_total.inc()

        removed = 0
        for filename in product.get("productImages") or []:
            try:
                if self.storage.delete(filename):
                    removed += 1
            except StorageException as e:
                self.logger.error(f"Error removing image {filename} of product {product_id}: {e}")
        product_images_removed_total.inc(removed)

        self.logger.info(f"Deleted product {product_id}, removed {removed} image files")

        return service_ok({"removedImages": removed})
