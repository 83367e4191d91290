"""Type-safe exception hierarchy and error codes.

Provides structured error handling with:
- Domain-specific exception taxonomy
- Structured error details (pydantic) for callers that report errors
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Type-safe error codes."""

    # Validation errors
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_SEQUENCE = "invalid_sequence"

    # Service errors
    HOMOPHONE_SOURCE_UNAVAILABLE = "homophone_source_unavailable"


class ErrorDetail(BaseModel):
    """Structured error information."""

    code: ErrorCode
    message: str
    field: Optional[str] = None
    context: dict = Field(default_factory=dict)


class PhonlevError(Exception):
    """Base exception for all library errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        **context
    ):
        self.code = code
        self.message = message
        self.field = field
        self.context = context
        super().__init__(message)

    def to_detail(self) -> ErrorDetail:
        """Convert to structured error detail."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            field=self.field,
            context=self.context
        )


# ═════════════════════════════════════════════════════════════════════════════
# Validation Errors
# ═════════════════════════════════════════════════════════════════════════════

class ValidationError(PhonlevError):
    """Invalid input data."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_ARGUMENT,
        field: Optional[str] = None,
        **context
    ):
        super().__init__(
            code=code,
            message=message,
            field=field,
            **context
        )


class InvalidArgumentError(ValidationError):
    """Argument is outside its accepted domain."""

    def __init__(self, field: str, value, reason: str):
        super().__init__(
            message=f"Invalid {field}: {value!r} ({reason})",
            code=ErrorCode.INVALID_ARGUMENT,
            field=field,
            value=value,
            reason=reason
        )


class InvalidSequenceError(ValidationError):
    """Sequence input is neither text nor a sequence of code points."""

    def __init__(self, value, reason: str):
        super().__init__(
            message=f"Invalid sequence: {reason}",
            code=ErrorCode.INVALID_SEQUENCE,
            field="sequence",
            value_type=type(value).__name__,
            reason=reason
        )


# ═════════════════════════════════════════════════════════════════════════════
# Service Errors
# ═════════════════════════════════════════════════════════════════════════════

class ServiceError(PhonlevError):
    """External collaborator failure."""

    def __init__(
        self,
        service: str,
        reason: str,
        code: ErrorCode = ErrorCode.HOMOPHONE_SOURCE_UNAVAILABLE,
        **context
    ):
        super().__init__(
            code=code,
            message=f"Service error in {service}: {reason}",
            service=service,
            reason=reason,
            **context
        )


class HomophoneSourceError(ServiceError):
    """Homophone word list could not be read."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            service="homophones",
            reason=f"{source}: {reason}",
            code=ErrorCode.HOMOPHONE_SOURCE_UNAVAILABLE,
            source=source
        )
