from .product_serializers import FlexibleJSONField, ProductCreateSerializer, ProductIdListSerializer

__all__ = ["FlexibleJSONField", "ProductCreateSerializer", "ProductIdListSerializer"]
