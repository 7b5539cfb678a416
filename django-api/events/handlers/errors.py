"""Map domain and framework errors to JSON error responses.

Error bodies always look like ``{"error": <message>, "code": <CODE>}``.
"""

import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STATS_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.REPORT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATUS_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return Response(
            {"error": exc.message, "code": exc.code.value},
            status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        )

    if isinstance(exc, ValidationError):
        fields = exc.detail if isinstance(exc.detail, dict) else {}
        message = (
            f"Missing or invalid fields: {', '.join(fields)}"
            if fields
            else "Invalid request"
        )
        return Response(
            {"error": message, "code": "VALIDATION_ERROR", "fields": exc.detail},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail", response.data) if isinstance(response.data, dict) else response.data
        response.data = {
            "error": str(detail),
            "code": str(getattr(exc, "default_code", "error")).upper(),
        }
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled error in %s", type(view).__name__ if view else "request", exc_info=exc
    )
    return Response(
        {"error": str(exc), "code": "INTERNAL_ERROR"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def not_found(request, exception=None):
    """JSON body for URLs that match no route."""
    return JsonResponse(
        {"error": "Not found", "code": "NOT_FOUND"},
        status=status.HTTP_404_NOT_FOUND,
    )
