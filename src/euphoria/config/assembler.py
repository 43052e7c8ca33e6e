"""
Configuration Assembler
=======================

Maps a validated environment onto the grouped, immutable configuration the
rest of the bot reads. Pure: no I/O, no access to os.environ.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from euphoria.config.schema import Environment, LogLevel

_MASK = "********"


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')


class TelegramConfig(_Section):
    """Telegram bot configuration"""
    api_token: str = Field(..., description="Telegram Bot API token")
    max_voice_message_length_seconds: int = Field(..., description="Maximum voice message length in seconds")


class OpenAIConfig(_Section):
    """OpenAI configuration"""
    api_key: str = Field(..., description="OpenAI API key")
    gpt_version: str = Field(..., description="GPT model version to use")


class HumanDesignConfig(_Section):
    """Human Design API configuration (empty strings when not configured)"""
    api_key: str = Field("", description="Human Design API key")
    base_url: str = Field("", description="Human Design API base URL")


class DatabaseConfig(_Section):
    """
    MongoDB configuration.

    Ports are kept as strings because the database layer and the Mongo Express
    launcher consume them as strings.
    """
    host: str
    port: str
    user: str
    password: str
    name: str
    express_port: str
    uri: str = Field(..., description="MongoDB connection URI")


class LoggingConfig(_Section):
    """Logging configuration"""
    level: LogLevel = Field(LogLevel.INFO, description="Application log level")


class SupportConfig(_Section):
    """Support and monitoring configuration"""
    support_chat_id: str = Field("", description="Telegram chat ID for admin notifications")
    admin_chat_id: str = Field("", description="Telegram chat ID for critical error alerts")
    admin_ids: tuple[int, ...] = Field((), description="Telegram user IDs with admin rights")
    notification_alert_threshold: int = Field(3, description="Failures before alerting")
    max_notification_retries: int = Field(3, description="Max retries for failed notifications")


class ReanalysisConfig(_Section):
    """Batch reanalysis tuning"""
    batch_size: int = Field(5, description="Entries processed per batch")
    progress_interval: int = Field(10, description="Entries between progress updates")


class AppConfig(_Section):
    """Consolidated application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    telegram: TelegramConfig
    openai: OpenAIConfig
    human_design: HumanDesignConfig
    database: DatabaseConfig
    logging: LoggingConfig
    support: SupportConfig
    reanalysis: ReanalysisConfig

    def redacted(self) -> dict[str, Any]:
        """
        JSON-ready dump with credentials masked.

        Empty secrets stay empty so the dump still shows what is unset.
        """
        data = self.model_dump(mode='json')
        for section, key in (
            ('telegram', 'api_token'),
            ('openai', 'api_key'),
            ('human_design', 'api_key'),
            ('database', 'password'),
        ):
            if data[section][key]:
                data[section][key] = _MASK
        db = self.database
        if db.password:
            data['database']['uri'] = build_mongodb_uri(db.host, db.port, db.user, _MASK, db.name)
        return data


def build_mongodb_uri(host: str, port: int | str, user: str, password: str, database: str) -> str:
    """
    Build the MongoDB connection URI.

    Credentials are only included when a password is set; a user without a
    password is dropped from the URI.
    """
    if password:
        return f"mongodb://{user}:{password}@{host}:{port}/{database}?authSource=admin"
    return f"mongodb://{host}:{port}/{database}"


def parse_admin_ids(raw: str) -> tuple[int, ...]:
    """Parse "123, 456" into (123, 456); a blank string gives ()"""
    if not raw.strip():
        return ()
    return tuple(int(item.strip()) for item in raw.split(","))


def assemble_config(
    env: Mapping[str, Any],
    environment: Environment = Environment.DEVELOPMENT,
) -> AppConfig:
    """
    Build the application configuration from a validated environment.

    Args:
        env: Output of validate_env (every schema key present and typed)
        environment: Deployment environment resolved from NODE_ENV

    Returns:
        Frozen AppConfig
    """
    telegram = TelegramConfig(
        api_token=env["TELEGRAM_API_TOKEN"],
        max_voice_message_length_seconds=env["MAX_VOICE_MESSAGE_LENGTH_SECONDS"],
    )

    openai = OpenAIConfig(
        api_key=env["OPENAI_API_KEY"],
        gpt_version=env["GPT_VERSION"],
    )

    human_design = HumanDesignConfig(
        api_key=env["HUMAN_DESIGN_API_KEY"],
        base_url=env["HUMAN_DESIGN_API_BASE_URL"],
    )

    database = DatabaseConfig(
        host=env["MONGODB_HOST"],
        port=str(env["MONGODB_PORT"]),
        user=env["MONGODB_USER"],
        password=env["MONGODB_PASSWORD"],
        name=env["MONGODB_DATABASE"],
        express_port=str(env["MONGO_EXPRESS_PORT"]),
        uri=build_mongodb_uri(
            env["MONGODB_HOST"],
            env["MONGODB_PORT"],
            env["MONGODB_USER"],
            env["MONGODB_PASSWORD"],
            env["MONGODB_DATABASE"],
        ),
    )

    logging_config = LoggingConfig(level=env["LOG_LEVEL"])

    support = SupportConfig(
        support_chat_id=env["SUPPORT_CHAT_ID"],
        admin_chat_id=env["ADMIN_CHAT_ID"],
        admin_ids=parse_admin_ids(env["ADMIN_IDS"]),
        notification_alert_threshold=env["NOTIFICATION_ALERT_THRESHOLD"],
        max_notification_retries=env["MAX_NOTIFICATION_RETRIES"],
    )

    reanalysis = ReanalysisConfig(
        batch_size=env["REANALYSIS_BATCH_SIZE"],
        progress_interval=env["REANALYSIS_PROGRESS_INTERVAL"],
    )

    return AppConfig(
        environment=environment,
        telegram=telegram,
        openai=openai,
        human_design=human_design,
        database=database,
        logging=logging_config,
        support=support,
        reanalysis=reanalysis,
    )
