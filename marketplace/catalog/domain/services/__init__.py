from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from .catalog_service import CatalogService
from .hashtag_service import HashtagService
from .search_service import SearchService
from .seller_service import SellerService


__all__ = [
    "BaseService",
    "ErrorCodes",
    "ServiceResult",
    "service_err",
    "service_ok",
    "CatalogService",
    "HashtagService",
    "SearchService",
    "SellerService",
]
