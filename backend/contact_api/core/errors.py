"""Error Hierarchy — typed, categorized exceptions for contact book failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError is a client error (400); ConfigurationError is fatal to startup (500)
    - "Not found" is a valid retrieval result, never an error
    - to_response() produces the REST envelope; no internal details in messages
    - to_log_extra() produces the logging extras JSONFormatter knows how to emit

Design Decisions:
    - Single hierarchy with ContactApiError base: one FastAPI handler catches all
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
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    contact_name: str | None = None
    debug_info: dict[str, Any] | None = None


class ContactApiError(Exception):
    """Base exception for all contact book errors."""

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

    def to_log_extra(self) -> dict:
        """Logger `extra=` fields describing this error and the contact involved."""
        return {
            "error_code": self.code,
            "error_category": self.category.value,
            "contact_name": self.context.contact_name,
            "field": getattr(self, "field", None),
        }

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
                    "contact_name": self.context.contact_name,
                    "field": getattr(self, "field", None),
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(ContactApiError):
    """Contact rejected by a business rule before reaching the store."""
    def __init__(
        self,
        message: str,
        field: str,
        code: str = "VALIDATION_ERROR",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


# ─── Startup Errors (500-level) ─────────────────────────────────

class ConfigurationError(ContactApiError):
    """Application wired without a required collaborator."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
