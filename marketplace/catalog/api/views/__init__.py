from .category_views import CategoryViewSet
from .product_views import ProductViewSet
from .search_views import SearchViewSet

__all__ = ["CategoryViewSet", "ProductViewSet", "SearchViewSet"]
