"""Shared response shaping for the catalog API."""

from typing import Any, Optional

from rest_framework import status
from rest_framework.response import Response

from infrastructure.database import to_json_safe
from marketplace.catalog.domain.services import ErrorCodes, ServiceResult


ERROR_STATUS = {
    ErrorCodes.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.INVALID_LOCATION: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.CREATION_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCodes.DATABASE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCodes.STORAGE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
}

DEFAULT_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: "Invalid request",
    status.HTTP_404_NOT_FOUND: "Product Not Found",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def envelope(message: str, data: Any = None, http_status: int = status.HTTP_200_OK, **extra) -> Response:
    """``{"message": ..., "data": ...}`` with documents made JSON-safe."""
    body = {"message": message, "data": to_json_safe(data)}
    body.update(to_json_safe(extra))
    return Response(body, status=http_status)


def error_response(result: ServiceResult, message: Optional[str] = None) -> Response:
    """Map a failed ServiceResult onto its HTTP status with a generic message."""
    http_status = ERROR_STATUS.get(result.error, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return envelope(message or DEFAULT_MESSAGES[http_status], None, http_status)
