"""Error Hierarchy — typed, categorized exceptions for every Cat API failure mode.

Invariants:
    - The closed set of kinds is ErrorKind; each maps to exactly one HTTP status
    - ERROR_TABLE is the only place a kind is paired with status and severity
    - to_response() never includes driver messages or stack traces

Design Decisions:
    - Single hierarchy with CatApiError base: one FastAPI handler catches all
    - NotFound is INFO severity: an expected outcome, not a malfunction
    - Pool and query failures are ERROR severity, logged at error level
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from catapi.core.domain_types import PoolFailure, ValidationFailure


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class ErrorKind(str, Enum):
    """User-facing error kinds. Value doubles as the wire-level code."""
    INVALID_INPUT = "INVALID_INPUT"
    POOL_UNAVAILABLE = "POOL_UNAVAILABLE"
    QUERY_FAILED = "QUERY_FAILED"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class ErrorMapping:
    http_status: int
    category: ErrorCategory
    severity: ErrorSeverity


ERROR_TABLE: dict[ErrorKind, ErrorMapping] = {
    ErrorKind.INVALID_INPUT: ErrorMapping(
        400, ErrorCategory.VALIDATION, ErrorSeverity.WARNING,
    ),
    ErrorKind.POOL_UNAVAILABLE: ErrorMapping(
        500, ErrorCategory.DATABASE, ErrorSeverity.ERROR,
    ),
    ErrorKind.QUERY_FAILED: ErrorMapping(
        500, ErrorCategory.DATABASE, ErrorSeverity.ERROR,
    ),
    ErrorKind.NOT_FOUND: ErrorMapping(
        404, ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO,
    ),
}


@dataclass
class ErrorContext:
    """Context attached to an error for observability and the response body."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    details: dict[str, Any] = field(default_factory=dict)


class CatApiError(Exception):
    """Base exception for all Cat API errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.context = context or ErrorContext()

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def http_status(self) -> int:
        return ERROR_TABLE[self.kind].http_status

    @property
    def category(self) -> ErrorCategory:
        return ERROR_TABLE[self.kind].category

    @property
    def severity(self) -> ErrorSeverity:
        return ERROR_TABLE[self.kind].severity

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "details": self.context.details,
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(CatApiError):
    """Request input rejected before reaching the store."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, ErrorKind.INVALID_INPUT, context)


class CatIdValidationError(InvalidInputError):
    """Path identifier is not an integer in the accepted range."""
    def __init__(self, raw_value: str, reason: ValidationFailure, message: str):
        super().__init__(
            message,
            ErrorContext(details={"reason": reason.value, "field": "id"}),
        )
        self.raw_value = raw_value
        self.reason = reason


class RecordNotFoundError(CatApiError):
    """Identifier is valid but no record matches it."""
    def __init__(self, cat_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.details.setdefault("id", cat_id)
        super().__init__(f"Cat {cat_id} not found", ErrorKind.NOT_FOUND, ctx)
        self.cat_id = cat_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PoolUnavailableError(CatApiError):
    """No connection could be leased from the pool."""
    def __init__(self, reason: PoolFailure, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.details.setdefault("reason", reason.value)
        message = (
            "Connection pool exhausted"
            if reason is PoolFailure.EXHAUSTED
            else "Database unavailable"
        )
        super().__init__(message, ErrorKind.POOL_UNAVAILABLE, ctx)
        self.reason = reason


class QueryFailedError(CatApiError):
    """Store returned an unexpected error while running a query."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.details.setdefault("operation", operation)
        super().__init__(
            f"Database query failed: {operation}", ErrorKind.QUERY_FAILED, ctx,
        )
        self.operation = operation
