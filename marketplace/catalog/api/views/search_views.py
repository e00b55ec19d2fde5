from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import viewsets

from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer, SearchResponseSerializer
from marketplace.catalog.api.views.responses import envelope
from marketplace.catalog.domain.services import SearchService


class SearchViewSet(viewsets.ViewSet):
    """
    ViewSet for product text search.
    Delegates logic to SearchService.
    """

    def get_service(self) -> SearchService:
        return container.search_service()

    @extend_schema(
        operation_id="products_search",
        summary="Search products",
        description=(
            "Fuzzy text search over all product fields merged with name autocomplete, "
            "best matches first."
        ),
        parameters=[
            OpenApiParameter(name="search_item", type=str, location=OpenApiParameter.PATH, description="Search term"),
        ],
        responses={
            200: SearchResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Search failed"),
        },
        tags=["Marketplace - Search"],
    )
    def search(self, request, search_item=None):
        result = self.get_service().search(search_item)

        # Search failures surface as "not found", never as a server error
        if not result.ok:
            return envelope("Product Not Found", None, 404)

        return envelope("Success", result.value)
