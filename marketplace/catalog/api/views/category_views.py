from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.response import Response

from marketplace.api.serializers import CategoriesResponseSerializer, FieldsResponseSerializer
from marketplace.catalog.domain.category_config import (
    PRODUCT_CATEGORIES,
    build_category_facets,
    build_create_product_fields,
)


class CategoryViewSet(viewsets.ViewSet):
    """
    Read-only category configuration: facet options and the create-product form.
    """

    @extend_schema(
        operation_id="products_categories",
        summary="List categories with facet options",
        responses={200: CategoriesResponseSerializer},
        tags=["Marketplace - Categories"],
    )
    def categories(self, request):
        return Response(
            {
                "message": "Fetched product categories",
                "data": PRODUCT_CATEGORIES,
                "metadata": build_category_facets(),
            }
        )

    @extend_schema(
        operation_id="products_fields",
        summary="Create-product form fields",
        responses={200: FieldsResponseSerializer},
        tags=["Marketplace - Categories"],
    )
    def fields(self, request):
        return Response({"message": "Fetched create product fields", "data": build_create_product_fields()})
