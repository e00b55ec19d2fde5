# Marketplace API Serializers

# Import response serializers for API documentation
from .response_serializers import (
    CategoriesResponseSerializer,
    ErrorResponseSerializer,
    FieldsResponseSerializer,
    MessageResponseSerializer,
    ProductCreatedResponseSerializer,
    ProductListResponseSerializer,
    ProductPageResponseSerializer,
    ProductResponseSerializer,
    ProductTagResponseSerializer,
    SearchResponseSerializer,
)


__all__ = [
    "CategoriesResponseSerializer",
    "ErrorResponseSerializer",
    "FieldsResponseSerializer",
    "MessageResponseSerializer",
    "ProductCreatedResponseSerializer",
    "ProductListResponseSerializer",
    "ProductPageResponseSerializer",
    "ProductResponseSerializer",
    "ProductTagResponseSerializer",
    "SearchResponseSerializer",
]
