# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types Leaflings uses to say what went wrong
# (a missing plant, a wrong password, a free account with too many plants) in a clear way.
# 🧪 Purpose (Technical Summary):
# LeaflingsException and its subclasses: each carries the HTTP status, a stable error code and a
# details dict that the error handlers render into the {"error": {...}} envelope.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# All modules for error handling, app.api.middleware.error_handling, domain services, repositories

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import status


class LeaflingsException(Exception):
    """
    Root of every error the API reports on purpose.
    Handlers turn it into the error envelope using ``status_code`` and ``to_dict()``.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp.isoformat(),
            }
        }


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(LeaflingsException):
    """
    Raised when credentials or bearer tokens are missing, invalid or expired.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="AUTHENTICATION_ERROR"
        )


class AuthorizationError(LeaflingsException):
    """
    Raised when an authenticated caller lacks permission for an action.
    """

    def __init__(
        self,
        message: str = "Access denied",
        required_role: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if required_role:
            details["required_role"] = required_role

        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="AUTHORIZATION_ERROR"
        )


# =============================================================================
# VALIDATION & RESOURCE EXCEPTIONS
# =============================================================================

class ValidationError(LeaflingsException):
    """
    Input that is well-formed but unacceptable: a bad contact number, an unknown care level,
    an ad window that ends before it starts. ``field`` names the offending camelCase field.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            status_code=422,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(LeaflingsException):
    """Lookup by id (or by owner) found nothing."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class ConflictError(LeaflingsException):
    """Raised when a request conflicts with the current state of a resource."""

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="CONFLICT"
        )


class DuplicateResourceError(LeaflingsException):
    """
    A unique value is already taken: an e-mail shared by any person, or a plant a user
    already owns. Repositories also raise it when the database reports an integrity error.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_RESOURCE"
        )


# =============================================================================
# BUSINESS LOGIC EXCEPTIONS
# =============================================================================

class BusinessRuleError(LeaflingsException):
    """
    Exception raised when a domain rule rejects an otherwise well-formed request.
    """

    def __init__(
        self,
        message: str,
        rule: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if rule:
            details["rule"] = rule

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="BUSINESS_RULE_VIOLATION"
        )


class NonPaidUserError(LeaflingsException):
    """
    Raised when a free account tries to own more plants than the free tier allows.
    """

    def __init__(
        self,
        message: str = "Free accounts can only keep a limited number of plants.",
        limit: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if limit is not None:
            details["limit"] = limit

        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="NON_PAID_USER"
        )


class PaymentError(LeaflingsException):
    """Raised when a payment could not be completed."""

    def __init__(
        self,
        message: str = "Payment could not be completed",
        order_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if order_id:
            details["order_id"] = order_id

        super().__init__(
            message=message,
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            details=details,
            error_code="PAYMENT_ERROR"
        )


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class ExternalAPIError(LeaflingsException):
    """
    Raised when a third-party API (PayPal) fails or answers unexpectedly.
    """

    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        upstream_status: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if service:
            details["service"] = service
        if upstream_status is not None:
            details["upstream_status"] = upstream_status

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="EXTERNAL_API_ERROR"
        )


class DatabaseError(LeaflingsException):
    """The database is unreachable, uninitialized or rejected a commit."""

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(LeaflingsException):
    """Raised by repository implementations when a query fails."""

    def __init__(
        self,
        message: str = "Repository operation failed",
        entity: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if entity:
            details["entity"] = entity

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


class FileStorageError(LeaflingsException):
    """
    Raised for rejected or unreadable image uploads.
    """

    def __init__(
        self,
        message: str = "File storage error",
        filename: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if filename:
            details["filename"] = filename

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="FILE_STORAGE_ERROR"
        )
