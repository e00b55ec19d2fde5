import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.serializers import (
    ErrorResponseSerializer,
    MessageResponseSerializer,
    ProductCreatedResponseSerializer,
    ProductListResponseSerializer,
    ProductPageResponseSerializer,
    ProductResponseSerializer,
    ProductTagResponseSerializer,
)
from marketplace.catalog.api.serializers import ProductCreateSerializer, ProductIdListSerializer
from marketplace.catalog.api.views.responses import envelope, error_response
from marketplace.catalog.domain.services import CatalogService, ErrorCodes, SearchService
from utils.logging_utils import sanitize_payload


logger = logging.getLogger(__name__)

LOGGED_CREATE_FIELDS = ("name", "category", "seller", "tag", "state", "pincode")
VISIBLE_CREATE_FIELDS = ("name", "category", "state")


class ProductViewSet(viewsets.ViewSet):
    """
    ViewSet for products: CRUD, paged discovery and id-list lookups.
    Delegates logic to CatalogService and SearchService.
    """

    lookup_value_regex = "[0-9a-zA-Z]+"

    def get_service(self) -> CatalogService:
        return container.catalog_service()

    def get_search_service(self) -> SearchService:
        return container.search_service()

    @extend_schema(
        operation_id="products_list_all",
        summary="List all products",
        responses={
            200: ProductListResponseSerializer,
            503: OpenApiResponse(response=ErrorResponseSerializer, description="Database unavailable"),
        },
        tags=["Marketplace - Products"],
    )
    def list(self, request):
        result = self.get_service().list_products()
        if not result.ok:
            return error_response(result)
        return envelope("Products fetched successfully!", result.value)

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product details",
        responses={
            200: ProductResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Marketplace - Products"],
    )
    def retrieve(self, request, pk=None):
        result = self.get_service().get_product(pk)
        if not result.ok:
            return error_response(result, "Product Not Found")
        return envelope("Product fetched successfully", result.value)

    @extend_schema(
        operation_id="products_create",
        summary="Create a new product",
        description=(
            "Creates a product. Images uploaded beforehand with the product tag in their "
            "filename are attached; the location is stored as [longitude, latitude]."
        ),
        request=ProductCreateSerializer,
        responses={
            201: ProductCreatedResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
            503: OpenApiResponse(response=ErrorResponseSerializer, description="Product creation failure"),
        },
        tags=["Marketplace - Products"],
    )
    def create(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        if not serializer.is_valid():
            logged = sanitize_payload(request.data, LOGGED_CREATE_FIELDS, visible_keys=VISIBLE_CREATE_FIELDS)
            logger.info(f"Rejected product payload: {logged}")
            if serializer.is_location_error():
                return Response(
                    {"status": "failure", "message": "Invalid PIN/State information"},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            return Response(
                {"message": "Invalid product data", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = self.get_service().create_product(serializer.validated_data)

        if not result.ok:
            if result.error == ErrorCodes.INVALID_LOCATION:
                return Response(
                    {"status": "failure", "message": "Invalid PIN/State information"},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            if result.error == ErrorCodes.USER_NOT_FOUND:
                return error_response(result, "User Not Found")
            return error_response(result, "Product Creation Failure")

        return Response(
            {
                "message": "Product added successfully, User products updated",
                "productId": str(result.value["productId"]),
            },
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        operation_id="products_destroy",
        summary="Delete a product and its images",
        responses={
            200: MessageResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Marketplace - Products"],
    )
    def destroy(self, request, pk=None):
        result = self.get_service().delete_product(pk)
        if not result.ok:
            return error_response(result, "Product Not Found")
        return Response({"message": "Products deleted!"}, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="products_tag",
        summary="Create a product tag",
        description="Issue the tag that image uploads carry before the product is created.",
        request=None,
        responses={201: ProductTagResponseSerializer},
        tags=["Marketplace - Products"],
    )
    @action(detail=False, methods=["post"])
    def tag(self, request):
        return envelope("Created product tag", self.get_service().create_tag(), status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="products_page",
        summary="Page through products",
        description=(
            "Products by category with skip/limit pagination. With latitude and longitude the "
            "results are ordered by distance. The category filter is pipe-delimited: "
            "`Category|SubCategory|value1,value2`."
        ),
        parameters=[
            OpenApiParameter(name="page", type=int, description="0-based page number (default: 0)"),
            OpenApiParameter(name="limit", type=int, description="Items per page (default: 25)"),
            OpenApiParameter(name="category", type=str, description="Pipe-delimited category filter"),
            OpenApiParameter(name="latitude", type=float, description="Latitude for proximity ordering"),
            OpenApiParameter(name="longitude", type=float, description="Longitude for proximity ordering"),
        ],
        responses={
            200: ProductPageResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid query parameters"),
            503: OpenApiResponse(response=ErrorResponseSerializer, description="Database unavailable"),
        },
        tags=["Marketplace - Products"],
    )
    @action(detail=False, methods=["get"])
    def page(self, request):
        result = self.get_search_service().page_products(request.query_params)

        if not result.ok:
            return error_response(result)

        page = result.value
        facet = {"products": page["products"], "totalProducts": [{"count": page["count"]}]}
        return envelope("successfully fetched products", [facet], page=page["page"], limit=page["limit"])

    @extend_schema(
        operation_id="products_by_ids",
        summary="Get products by id list",
        request=ProductIdListSerializer,
        responses={
            200: ProductListResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Marketplace - Products"],
    )
    @action(detail=False, methods=["post"], url_path="by-ids")
    def by_ids(self, request):
        serializer = ProductIdListSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"message": "Invalid id list", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = self.get_service().get_products_by_ids(serializer.validated_data["idList"])
        if not result.ok:
            return error_response(result, "Product Not Found")
        return envelope("Product list by ids fetched successfully", result.value)
