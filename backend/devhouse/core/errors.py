"""Error Hierarchy — typed, categorized exceptions for all DevHouse failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() always carries a top-level "Message" key
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DevHouseError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - "Message" kept PascalCase: existing clients read that key from error bodies
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: int | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class DevHouseError(Exception):
    """Base exception for all DevHouse errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "Message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource": self.context.resource,
                    "resource_id": self.context.resource_id,
                    "field": self.context.field,
                },
            },
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidPayloadError(DevHouseError):
    """Request body missing or a required field empty."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidReferenceError(DevHouseError):
    """Foreign key points at a row that does not exist."""
    def __init__(
        self, field_label: str, target_label: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Invalid {field_label}. {target_label} does not exist.",
            "INVALID_REFERENCE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field_label = field_label


class DuplicateResourceError(DevHouseError):
    """Unique field already taken by another row."""
    def __init__(
        self, resource_type: str, value: str, context: ErrorContext | None = None,
        message: str | None = None,
    ):
        super().__init__(
            message or f"{resource_type} '{value}' already exists.",
            "DUPLICATE_RESOURCE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class IdMismatchError(DevHouseError):
    """Path id and body id disagree on a full replace."""
    def __init__(
        self, path_id: int, body_id: int | None, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Id mismatch: path id {path_id} does not match body id {body_id}",
            "ID_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class AuthenticationError(DevHouseError):
    """Bearer token missing, malformed, expired or signed by someone else."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ResourceNotFoundError(DevHouseError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, context: ErrorContext | None = None,
        message: str | None = None,
    ):
        super().__init__(
            message or f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class ResourceInUseError(DevHouseError):
    """Delete blocked because other rows still reference this one."""
    def __init__(
        self, resource_type: str, references: dict[str, int],
        context: ErrorContext | None = None,
    ):
        listed = ", ".join(f"{count} {label}" for label, count in references.items())
        super().__init__(
            f"{resource_type} is still referenced by {listed}",
            "RESOURCE_IN_USE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.references = references


class ConcurrencyError(DevHouseError):
    """Row changed or vanished between load and save."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONCURRENCY_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.CRITICAL, context, 409,
        )


class ConstraintViolationError(DevHouseError):
    """The store refused a write (foreign key or unique constraint)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONSTRAINT_VIOLATION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DevHouseError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
