"""Campfinder error hierarchy.

Every failure the API reports is a CampfinderError subclass. A subclass
declares its wire code, category, severity and HTTP status as class
attributes; instances only carry the message and an optional ErrorContext.

Invariants:
    - 4xx errors describe bad input or missing rights and are safe to show to users
    - 5xx errors (database, storage, configuration) are CRITICAL and logged as errors
    - to_response() is the only shape error handlers put on the wire
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Groups error codes for clients that branch on the kind of failure."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Which listing, user or CSV row an error concerns."""
    campsite_id: str | None = None
    user_id: str | None = None
    row: int | None = None
    debug_info: dict[str, Any] | None = None
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class CampfinderError(Exception):
    code: str = "INTERNAL_ERROR"
    category: ErrorCategory = ErrorCategory.INTERNAL
    severity: ErrorSeverity = ErrorSeverity.ERROR
    http_status: int = 500

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message)
        self.message = message
        self.context = context if context is not None else ErrorContext()

    def to_response(self) -> dict:
        ctx = self.context
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": ctx.occurred_at.isoformat(),
                "context": {"campsite_id": ctx.campsite_id, "row": ctx.row},
            }
        }


# 4xx

class CampsiteValidationError(CampfinderError):
    """Input failed domain validation (CSV rows, uploads, image URLs)."""
    code = "VALIDATION_ERROR"
    category = ErrorCategory.VALIDATION
    http_status = 400

    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(message, context)
        self.field = field


class AuthenticationError(CampfinderError):
    code = "AUTHENTICATION_REQUIRED"
    category = ErrorCategory.AUTHENTICATION
    severity = ErrorSeverity.WARNING
    http_status = 401

    def __init__(self, message: str = "認証されていません", context: ErrorContext | None = None):
        super().__init__(message, context)


class AuthorizationError(CampfinderError):
    code = "FORBIDDEN"
    category = ErrorCategory.AUTHORIZATION
    severity = ErrorSeverity.WARNING
    http_status = 403

    def __init__(self, message: str = "管理者権限が必要です", context: ErrorContext | None = None):
        super().__init__(message, context)


class ResourceNotFoundError(CampfinderError):
    code = "RESOURCE_NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404

    def __init__(
        self, resource_type: str, resource_id: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(f"{resource_type} '{resource_id}' not found", context)
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(CampfinderError):
    """A user with the same unique key already exists."""
    code = "CONFLICT"
    category = ErrorCategory.CONFLICT
    http_status = 409


# 5xx

class _OperationError(CampfinderError):
    subsystem = ""
    severity = ErrorSeverity.CRITICAL

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(f"{self.subsystem} {operation} failed: {message}", context)
        self.operation = operation


class DatabaseError(_OperationError):
    subsystem = "Database"
    code = "DATABASE_ERROR"
    category = ErrorCategory.DATABASE
    http_status = 503


class StorageError(_OperationError):
    """Object storage upload or delete failed."""
    subsystem = "Storage"
    code = "STORAGE_ERROR"
    category = ErrorCategory.EXTERNAL_API
    http_status = 502


class ConfigurationError(CampfinderError):
    code = "CONFIGURATION_ERROR"
    category = ErrorCategory.CONFIGURATION
    severity = ErrorSeverity.CRITICAL
