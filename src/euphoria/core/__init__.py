"""Core euphoria module: errors and logging shared by every component."""

from euphoria.core.exceptions import (
    ConfigurationError,
    EnvIssue,
    EnvValidationError,
    ErrorCode,
    EuphoriaError,
    IssueKind,
)
from euphoria.core.structured_logger import StructuredLogger, configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "configure_logging",
    "EnvIssue",
    "EnvValidationError",
    "ErrorCode",
    "EuphoriaError",
    "get_logger",
    "IssueKind",
    "StructuredLogger",
]
