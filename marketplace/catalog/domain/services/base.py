"""
Base classes and utilities for the marketplace service layer.

Services report expected failures through ServiceResult instead of raising,
so views can map error codes onto HTTP statuses in one place.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Outcome of a service operation.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code from ErrorCodes (present if ok=False)
        error_detail: Human-readable error message (present if ok=False)

    Examples:
        >>> result = service_ok({"productId": "65f0..."})
        >>> result.ok
        True

        >>> result = service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product 65f0... does not exist")
        >>> result.error
        'product_not_found'
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None


def service_ok(value: T) -> ServiceResult[T]:
    """Create a successful ServiceResult."""
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "") -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code (e.g., "product_not_found", "invalid_input")
        error_detail: Human-readable error message, defaults to the code
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error)


class BaseService:
    """
    Base class for marketplace services.

    Provides a logger named after the concrete class and a timing decorator.

    Usage:
        class CatalogService(BaseService):
            def __init__(self, db):
                super().__init__()
                self.db = db

            @BaseService.log_performance
            def get_product(self, product_id):
                ...
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{type(self).__module__}.{type(self).__name__}")

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator logging execution time and outcome of a service method.

        Failed ServiceResults are logged as warnings; exceptions are logged
        and re-raised.
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            started = time.perf_counter()
            name = f"{type(self).__name__}.{func.__name__}"
            self.logger.debug(f"{name} started")

            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                elapsed_ms = (time.perf_counter() - started) * 1000
                self.logger.error(f"{name} raised after {elapsed_ms:.2f}ms: {e}", exc_info=True)
                raise

            elapsed_ms = (time.perf_counter() - started) * 1000
            if isinstance(result, ServiceResult) and not result.ok:
                self.logger.warning(f"{name} failed with '{result.error}' in {elapsed_ms:.2f}ms")
            else:
                self.logger.info(f"{name} finished in {elapsed_ms:.2f}ms")
            return result

        return wrapper


class ErrorCodes:
    """Standard error codes used across marketplace services."""

    # Product errors
    PRODUCT_NOT_FOUND = "product_not_found"
    CREATION_FAILED = "creation_failed"

    # Seller errors
    USER_NOT_FOUND = "user_not_found"

    # Validation errors
    INVALID_INPUT = "invalid_input"
    INVALID_LOCATION = "invalid_location"

    # Internal errors
    DATABASE_ERROR = "database_error"
    STORAGE_ERROR = "storage_error"
