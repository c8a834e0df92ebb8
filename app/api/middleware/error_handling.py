# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any errors that happen in our app and turns them into friendly, consistent error messages
# that the apps can understand, like translating technical problems into helpful responses.
# 🧪 Purpose (Technical Summary):
# Exception handlers rendering LeaflingsException, request validation, pydantic validation,
# HTTPException and unexpected errors as one JSON envelope with request correlation.
# 🔗 Dependencies:
# FastAPI, starlette, pydantic, slowapi, app.shared.core.exceptions, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py (handler registration), all API endpoints

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import pydantic
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import LeaflingsException
from app.shared.utils.logging import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or request_id_var.get() or None


def create_error_response(
    request: Request,
    error_code: str,
    message: str,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    details: Optional[Dict[str, Any]] = None,
    timestamp: Optional[datetime] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """
    Create a standardized error response

    Returns:
        JSON response shaped ``{"error": {code, message, details, timestamp, request_id}}``
    """
    request_id = _request_id(request)
    content = {
        "error": {
            "code": error_code,
            "message": message,
            "details": jsonable_encoder(details or {}),
            "timestamp": (timestamp or datetime.now(timezone.utc)).isoformat(),
            "request_id": request_id,
        }
    }
    response = JSONResponse(status_code=status_code, content=content, headers=headers)
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    response.headers["X-Error-Code"] = error_code
    return response


def _format_validation_errors(errors) -> Dict[str, Any]:
    formatted = []
    for error in errors:
        formatted.append({
            "field": ".".join(str(loc) for loc in error.get("loc", []) if loc != "body"),
            "message": error.get("msg", "Validation error"),
            "type": error.get("type", "validation_error"),
        })
    return {"validation_errors": formatted}


async def leaflings_exception_handler(request: Request, exc: LeaflingsException) -> JSONResponse:
    """Handle custom Leaflings application exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} in {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"Client error {exc.status_code} in {request.method} {request.url.path}: {exc.message}")
    return create_error_response(
        request,
        exc.error_code,
        exc.message,
        status_code=exc.status_code,
        details=exc.details,
        timestamp=exc.timestamp,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Request validation failed for {request.method} {request.url.path}")
    return create_error_response(
        request,
        "VALIDATION_ERROR",
        "Request validation failed",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details=_format_validation_errors(exc.errors()),
    )


async def model_validation_handler(request: Request, exc: pydantic.ValidationError) -> JSONResponse:
    """Domain models validate on assignment; a rejected value is a client error."""
    logger.info(f"Domain validation failed for {request.method} {request.url.path}")
    return create_error_response(
        request,
        "VALIDATION_ERROR",
        "Validation failed",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details=_format_validation_errors(exc.errors()),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = f"Endpoint not found: {request.url.path}"
    else:
        message = str(exc.detail)
    return create_error_response(
        request,
        f"HTTP_{exc.status_code}",
        message,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {request.method} {request.url.path}: {exc.detail}")
    return create_error_response(
        request,
        "RATE_LIMIT_EXCEEDED",
        f"Rate limit exceeded: {exc.detail}",
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        details={"limit": str(exc.detail)},
        headers={"Retry-After": "60"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle 500 Internal Server Error."""
    logger.error(f"Server error in {request.method} {request.url.path}: {exc}", exc_info=exc)
    details = {"error_type": type(exc).__name__, "exception_message": str(exc)} if get_settings().DEBUG else {}
    return create_error_response(
        request,
        "INTERNAL_SERVER_ERROR",
        "An internal server error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details=details,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LeaflingsException, leaflings_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(pydantic.ValidationError, model_validation_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
