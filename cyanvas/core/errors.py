"""Error Hierarchy — typed, categorized exceptions for the chart core.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Missing optional assets and empty collections are never errors
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with CyanvasError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_INTEGRITY = "data_integrity"
    DATABASE = "database"
    CACHE = "cache"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    chart_name: str | None = None
    cache_key: str | None = None
    debug_info: dict[str, Any] | None = None


class CyanvasError(Exception):
    """Base exception for all chart core errors."""

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
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "chart_name": self.context.chart_name,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ChartNotFoundError(CyanvasError):
    """Requested chart identifier cannot be resolved by the store."""
    def __init__(self, identifier: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.chart_name = ctx.chart_name or identifier
        super().__init__(
            f"Chart '{identifier}' not found",
            "CHART_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.identifier = identifier


class MissingRequiredFieldError(CyanvasError):
    """A chart lacks a mandatory relationship (data corruption)."""
    def __init__(
        self, field_name: str, chart_name: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.chart_name = ctx.chart_name or chart_name
        super().__init__(
            f"Chart '{chart_name}' is missing required field '{field_name}'",
            "MISSING_REQUIRED_FIELD", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.field_name = field_name


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(CyanvasError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class CacheUnavailableError(CyanvasError):
    """Cache service cannot serve reads or writes."""
    def __init__(self, message: str, cache_key: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.cache_key = ctx.cache_key or cache_key
        super().__init__(
            f"Cache unavailable: {message}",
            "CACHE_UNAVAILABLE", ErrorCategory.CACHE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
