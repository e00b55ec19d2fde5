"""
Response Serializers for Marketplace API Documentation

These serializers define the structure of API responses for OpenAPI schema generation.
They are NOT used for data validation, only for documentation in Swagger/ReDoc.
"""

from rest_framework import serializers

# ===== Common Response Serializers =====


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    message = serializers.CharField(help_text="Generic error message")
    data = serializers.JSONField(allow_null=True, help_text="Always null for errors")


class MessageResponseSerializer(serializers.Serializer):
    """Generic success response"""

    message = serializers.CharField(help_text="Success message")


# ===== Product Response Serializers =====


class ProductDocumentSerializer(serializers.Serializer):
    """Stored product document"""

    _id = serializers.CharField(help_text="Product id")
    name = serializers.CharField()
    price = serializers.FloatField()
    description = serializers.CharField()
    category = serializers.CharField()
    seller = serializers.CharField()
    sellerUname = serializers.CharField()
    productImages = serializers.ListField(child=serializers.CharField(), help_text="Image filenames")
    hashtags = serializers.ListField(child=serializers.CharField())
    metadata = serializers.DictField(help_text="Category-specific metadata")
    address = serializers.DictField(help_text="location (GeoJSON point, [longitude, latitude]), state, pin, meta")
    created = serializers.DateTimeField()
    lastUpdated = serializers.DateTimeField()


class ProductResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = ProductDocumentSerializer()


class ProductListResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = ProductDocumentSerializer(many=True)


class ProductCreatedResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    productId = serializers.CharField(help_text="Id of the created product")


class ProductTagResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = serializers.CharField(help_text="32 hex character product tag")


class TotalCountSerializer(serializers.Serializer):
    count = serializers.IntegerField()


class ProductFacetSerializer(serializers.Serializer):
    products = ProductDocumentSerializer(many=True)
    totalProducts = TotalCountSerializer(many=True)


class ProductPageResponseSerializer(serializers.Serializer):
    """Paged product response"""

    message = serializers.CharField()
    data = ProductFacetSerializer(many=True, help_text="Single facet document with the page and its count")
    page = serializers.IntegerField(help_text="0-based page number")
    limit = serializers.IntegerField(help_text="Page size")


class SearchHitSerializer(serializers.Serializer):
    _id = serializers.CharField()
    name = serializers.CharField()
    category = serializers.CharField()
    score = serializers.FloatField(help_text="Atlas Search relevance score")


class SearchResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = SearchHitSerializer(many=True)


# ===== Category Response Serializers =====


class CategoryFacetSerializer(serializers.Serializer):
    category = serializers.CharField()
    options = serializers.ListField(child=serializers.CharField())
    subOptions = serializers.ListField(child=serializers.DictField(), help_text="{category, field, options}")


class CategoriesResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = serializers.ListField(child=serializers.CharField(), help_text="Category names")
    metadata = CategoryFacetSerializer(many=True)


class FieldsResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = serializers.ListField(child=serializers.DictField(), help_text="Form field descriptors")
