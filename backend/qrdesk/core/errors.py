"""Error Hierarchy: typed, categorized exceptions for all QRDesk failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
      and the HTTP status the boundary translator answers with
    - to_response() produces the REST envelope {"message": ..., "error": <code>}
    - 500-level errors carry generic messages; underlying exception text stays in logs

Design Decisions:
    - Single hierarchy with QRDeskError base: one FastAPI handler catches all
    - ConflictError answers 400, not 409 (signup contract of the web frontend)
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


class QRDeskError(Exception):
    """Base exception for all QRDesk errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"message": self.message, "error": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(QRDeskError):
    """Missing or malformed input."""
    def __init__(self, message: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class ConflictError(QRDeskError):
    """A user with this email is already registered."""
    def __init__(self):
        super().__init__(
            "User already exists", "USER_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 400,
        )


class NotFoundError(QRDeskError):
    """Requested resource does not exist."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class AuthError(QRDeskError):
    """Bad credentials or missing bearer token."""
    def __init__(
        self,
        message: str,
        code: str = "AUTH_ERROR",
        http_status: int = 401,
    ):
        super().__init__(
            message, code, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, http_status,
        )


class InvalidTokenError(AuthError):
    """Bearer token is malformed, tampered with, or expired."""
    def __init__(self, reason: str = "invalid"):
        super().__init__("Invalid Token", "INVALID_TOKEN", 400)
        self.reason = reason


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InternalError(QRDeskError):
    """Unexpected store or provider failure."""
    def __init__(
        self,
        message: str = "An unexpected error occurred",
        code: str = "INTERNAL_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
    ):
        super().__init__(
            message, code, category, ErrorSeverity.CRITICAL, 500,
        )


class DatabaseError(InternalError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
        )
        self.operation = operation


class PaymentProviderError(QRDeskError):
    """The payment provider rejected or failed the checkout request."""
    def __init__(self, provider_message: str):
        super().__init__(
            "Error creating checkout session", "PAYMENT_PROVIDER_ERROR",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.CRITICAL, 500,
        )
        self.provider_message = provider_message

    def to_response(self) -> dict:
        return {"message": self.message, "error": "Internal server error"}
