"""
Environment Schema
==================

Declarative table of every environment variable the bot reads.

Separates the *definition* of the environment from its *validation*: the
validator consumes this table generically, and the `.env.example` generator
renders it for operators. A variable that is not listed here is ignored.
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class LogLevel(IntEnum):
    """Application log level as configured through LOG_LEVEL (0-3)."""

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3

    @property
    def logging_level(self) -> int:
        """Equivalent stdlib logging level"""
        return _STDLIB_LEVELS[self]


_STDLIB_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class Environment(str, Enum):
    """Deployment environment, taken from NODE_ENV."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class EnvKind(str, Enum):
    """How a raw environment string is coerced."""

    STRING = "string"
    INTEGER = "integer"
    PORT = "port"
    LOG_LEVEL = "log_level"
    INT_LIST = "int_list"


@dataclass(frozen=True)
class EnvVar:
    """
    Schema entry for one environment variable.

    `default=...` marks the variable as required. Defaults are stored already
    typed and are never coerced. `description` and `example` only feed the
    generated `.env.example`.
    """

    name: str
    kind: EnvKind = EnvKind.STRING
    default: Any = ...
    description: str = ""
    example: str | None = None

    @property
    def required(self) -> bool:
        return self.default is ...


ENV_SCHEMA: tuple[EnvVar, ...] = (
    # Telegram Bot
    EnvVar(
        "TELEGRAM_API_TOKEN",
        description="Telegram Bot API token from BotFather",
        example="1234567890:ABCDefGhIJKlmNoPQRsTUVwxyZ",
    ),

    # OpenAI
    EnvVar(
        "OPENAI_API_KEY",
        description="OpenAI API key for AI services",
        example="sk-1234567890abcdef1234567890abcdef",
    ),
    EnvVar(
        "GPT_VERSION",
        default="gpt-4-turbo",
        description="OpenAI GPT model version to use",
        example="gpt-4-turbo",
    ),

    # Human Design API
    EnvVar(
        "HUMAN_DESIGN_API_KEY",
        default="",
        description="Human Design API key",
        example="hd-api-key-123456",
    ),
    EnvVar(
        "HUMAN_DESIGN_API_BASE_URL",
        default="",
        description="Human Design API base URL",
        example="https://api.humandesign.com/v1",
    ),

    # MongoDB
    EnvVar("MONGODB_HOST", default="localhost", description="MongoDB host"),
    EnvVar("MONGODB_PORT", EnvKind.PORT, default=27017, description="MongoDB port"),
    EnvVar("MONGODB_USER", default="", description="MongoDB username"),
    EnvVar("MONGODB_PASSWORD", default="", description="MongoDB password"),
    EnvVar("MONGODB_DATABASE", default="euphoria", description="MongoDB database name"),
    EnvVar(
        "MONGO_EXPRESS_PORT",
        EnvKind.PORT,
        default=8081,
        description="Mongo Express admin interface port",
    ),

    # Logging
    EnvVar(
        "LOG_LEVEL",
        EnvKind.LOG_LEVEL,
        default=LogLevel.INFO,
        description="Log level (0=ERROR, 1=WARN, 2=INFO, 3=DEBUG)",
    ),

    # Message settings
    EnvVar(
        "MAX_VOICE_MESSAGE_LENGTH_SECONDS",
        EnvKind.INTEGER,
        default=300,
        description="Maximum length of voice messages in seconds",
    ),

    # Support and monitoring
    EnvVar(
        "SUPPORT_CHAT_ID",
        default="",
        description="Telegram chat ID for admin notifications",
    ),
    EnvVar(
        "ADMIN_CHAT_ID",
        default="",
        description="Telegram chat ID exclusively for critical error alerts",
    ),
    EnvVar(
        "ADMIN_IDS",
        EnvKind.INT_LIST,
        default="",
        description="Comma-separated list of Telegram admin user IDs",
        example="123456789,987654321",
    ),
    EnvVar(
        "NOTIFICATION_ALERT_THRESHOLD",
        EnvKind.INTEGER,
        default=3,
        description="Number of failures before alerting",
    ),
    EnvVar(
        "MAX_NOTIFICATION_RETRIES",
        EnvKind.INTEGER,
        default=3,
        description="Max retries for failed notifications",
    ),

    # Reanalysis batches
    EnvVar(
        "REANALYSIS_BATCH_SIZE",
        EnvKind.INTEGER,
        default=5,
        description="Entries processed per reanalysis batch",
    ),
    EnvVar(
        "REANALYSIS_PROGRESS_INTERVAL",
        EnvKind.INTEGER,
        default=10,
        description="Processed entries between reanalysis progress updates",
    ),
)


def schema_names(schema=ENV_SCHEMA) -> list[str]:
    """Names declared by a schema, in declaration order"""
    return [entry.name for entry in schema]


def render_env_example(schema=ENV_SCHEMA) -> str:
    """
    Render a `.env.example` template from a schema.

    Required variables come first with their example value; optional ones
    follow, set to their default so the file documents the effective values.
    """
    lines = [
        "# Euphoria Configuration",
        "# Copy this to .env (or .env.prod for production) and fill in your values",
        "",
        "# " + "=" * 76,
        "# REQUIRED CONFIGURATION",
        "# " + "=" * 76,
        "",
    ]
    for entry in (e for e in schema if e.required):
        if entry.description:
            lines.append(f"# {entry.description}")
        lines.append(f"{entry.name}={entry.example or ''}")
        lines.append("")

    lines.extend([
        "# " + "=" * 76,
        "# OPTIONAL CONFIGURATION",
        "# " + "=" * 76,
        "",
    ])
    for entry in (e for e in schema if not e.required):
        if entry.description:
            lines.append(f"# {entry.description}")
        if entry.example and entry.example != _format_default(entry.default):
            lines.append(f"# Example: {entry.example}")
        lines.append(f"{entry.name}={_format_default(entry.default)}")
        lines.append("")

    return "\n".join(lines)


def _format_default(value: Any) -> str:
    if isinstance(value, IntEnum):
        return str(int(value))
    return str(value)
