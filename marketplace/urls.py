from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .api.views import prometheus_metrics
from .catalog.api.views import CategoryViewSet, ProductViewSet, SearchViewSet

# Create the main router
router = DefaultRouter()
router.register(r"products", ProductViewSet, basename="product")

app_name = "marketplace"

urlpatterns = [
    # Category configuration and search (declared before the router's products/<pk>/)
    path("products/categories/", CategoryViewSet.as_view({"get": "categories"}), name="product-categories"),
    path("products/fields/", CategoryViewSet.as_view({"get": "fields"}), name="product-fields"),
    path("products/search/<str:search_item>/", SearchViewSet.as_view({"get": "search"}), name="product-search"),
    # Main API routes
    path("", include(router.urls)),
    # Prometheus metrics endpoint
    path("metrics/", prometheus_metrics.marketplace_prometheus_metrics, name="marketplace-metrics"),
]
