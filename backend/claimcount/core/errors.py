"""Error Hierarchy — typed exceptions for the ways a claim count can fail.

Invariants:
    - Every error carries code, category, severity and the HTTP status it maps to
    - ValidationError is raised before any collaborator is consulted
    - "Driver not found" is NOT an error (see core/subject.py)
    - A failed lookup or source aborts the count: there is no partial-result error

Design Decisions:
    - One ClaimCountError base so the API registers a single domain handler
    - ErrorContext holds the identifiers shared by responses and log records
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    EXTERNAL_SOURCE = "external_source"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Which count failed: policy, source and driver, when known."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    policy_id: int | None = None
    source: str | None = None
    driver_id: int | None = None
    debug_info: dict[str, Any] | None = None

    def identifiers(self) -> dict[str, Any]:
        """Known identifiers only; unset ones are left out."""
        pairs = (
            ("policy_id", self.policy_id),
            ("source", self.source),
            ("driver_id", self.driver_id),
        )
        return {key: value for key, value in pairs if value is not None}


class ClaimCountError(Exception):
    """Base exception for all claim count errors."""

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

    def log_extra(self) -> dict[str, Any]:
        """Fields for logger.*(extra=...); picked up by JSONFormatter."""
        return {"error_code": self.code, **self.context.identifiers()}

    def to_response(self) -> dict:
        """REST error envelope; debug_info never leaves the process."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": self.context.identifiers(),
            }
        }


# ─── Caller Errors (400) ────────────────────────────────────────

class ValidationError(ClaimCountError):
    """Criteria rejected: missing required field, negative window, unknown enum value."""
    def __init__(
        self,
        message: str,
        fields: list[str],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["fields"] = self.fields
        return response


# ─── Collaborator Errors (503) ──────────────────────────────────

class LookupFailure(ClaimCountError):
    """Subject lookup collaborator unavailable (not the same as driver not found)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Subject lookup failed: {message}",
            "LOOKUP_FAILURE", ErrorCategory.EXTERNAL_SOURCE,
            ErrorSeverity.CRITICAL, context, 503,
        )


class SourceUnavailable(ClaimCountError):
    """A claim source failed; the whole count is aborted."""
    def __init__(
        self, source: str, message: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.source = source
        super().__init__(
            f"Claim source '{source}' unavailable: {message}",
            "SOURCE_UNAVAILABLE", ErrorCategory.EXTERNAL_SOURCE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.source = source


class DatabaseError(ClaimCountError):
    """Raised by the session manager; services translate it to a collaborator error."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
