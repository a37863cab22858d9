"""DRF exception handler giving every error response the same envelope.

Domain errors become ``{"success": false, "code", "detail"}`` with their
mapped status. Errors DRF already knows how to render (404, 401, 403,
validation) keep DRF's status and are wrapped the same way; field-level
validation messages travel under ``errors``.
"""

from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied  # type: ignore
from django.http import Http404  # type: ignore
from rest_framework import exceptions  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler  # type: ignore

from shared.domain.errors import DomainError

logger = logging.getLogger(__name__)


def _error_code(exc) -> str:  # type: ignore
    if isinstance(exc, Http404):
        return exceptions.NotFound.default_code
    if isinstance(exc, PermissionDenied):
        return exceptions.PermissionDenied.default_code
    return getattr(exc, "default_code", "error")


def _envelope(exc, data) -> dict:  # type: ignore
    body = {"success": False, "code": _error_code(exc)}
    if isinstance(exc, exceptions.ValidationError):
        body["detail"] = "Invalid request data"
        body["errors"] = data
    elif isinstance(data, dict) and set(data) == {"detail"}:
        body["detail"] = data["detail"]
    else:
        body["detail"] = data
    return body


def domain_exception_handler(exc, context):  # type: ignore
    """Translate ``DomainError`` subclasses; wrap DRF's own error responses."""

    if isinstance(exc, DomainError):
        view = context.get("view")
        logger.info(
            "Domain error in %s: %s (%s)",
            view.__class__.__name__ if view else "unknown view",
            exc.message,
            exc.code,
        )
        return Response(
            {"success": False, "code": exc.code, "detail": exc.message},
            status=exc.status_code,
        )

    response = drf_exception_handler(exc, context)
    if response is not None:
        response.data = _envelope(exc, response.data)
    return response
