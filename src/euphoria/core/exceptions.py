"""
Custom Exceptions for Euphoria
==============================

Structured error handling allows the entry point and the test harness to
handle failures by type rather than by parsing strings.

Error Codes:
- 1xxx: Client errors (invalid or missing input)
- 5xxx: System errors (configuration, unexpected)
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Structured error codes for user-friendly messages"""

    # 1xxx: Client Errors
    VALIDATION_ERROR = 1001

    # 5xxx: System Errors
    INTERNAL_ERROR = 5001
    CONFIGURATION_ERROR = 5003


class EuphoriaError(Exception):
    """Base exception for all Euphoria errors"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging"""
        return {
            'error_type': self.__class__.__name__,
            'error_code': int(self.error_code),
            'message': self.message,
            'details': self.details
        }

    def user_message(self) -> str:
        """Get user-friendly error message based on error code"""
        code_messages = {
            ErrorCode.VALIDATION_ERROR: "Invalid environment configuration",
            ErrorCode.INTERNAL_ERROR: "Internal error",
            ErrorCode.CONFIGURATION_ERROR: "Configuration error",
        }
        return f"Error {self.error_code}: {code_messages.get(self.error_code, self.message)}"


class ConfigurationError(EuphoriaError):
    """Raised when the application configuration cannot be built"""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode = ErrorCode.CONFIGURATION_ERROR,
    ):
        super().__init__(message, error_code, details)


class IssueKind(str, Enum):
    """Why a single environment variable was rejected."""

    MISSING_REQUIRED = "MissingRequired"
    INVALID_VALUE = "InvalidValue"


@dataclass(frozen=True)
class EnvIssue:
    """One rejected environment variable."""

    name: str
    kind: IssueKind
    message: str

    def __str__(self) -> str:
        return f"{self.name} ({self.kind.value}): {self.message}"


class EnvValidationError(ConfigurationError):
    """
    Raised when one or more environment variables fail validation.

    Carries every issue found in the pass, not just the first one.
    """

    def __init__(self, issues: list[EnvIssue] | tuple[EnvIssue, ...]):
        self.issues = tuple(issues)
        message = "Invalid environment variables: " + ", ".join(self.names)
        super().__init__(
            message,
            details={
                'issues': [
                    {'name': i.name, 'kind': i.kind.value, 'message': i.message}
                    for i in self.issues
                ]
            },
            error_code=ErrorCode.VALIDATION_ERROR,
        )

    @property
    def names(self) -> list[str]:
        """Names of every offending variable, in schema order"""
        return [issue.name for issue in self.issues]

    @property
    def missing(self) -> list[str]:
        return [i.name for i in self.issues if i.kind is IssueKind.MISSING_REQUIRED]

    @property
    def invalid(self) -> list[str]:
        return [i.name for i in self.issues if i.kind is IssueKind.INVALID_VALUE]

    def report(self) -> str:
        """Multi-line human readable report, one issue per line"""
        lines = ["Environment validation failed:"]
        lines.extend(f"  - {issue}" for issue in self.issues)
        return "\n".join(lines)
