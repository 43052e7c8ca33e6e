"""
Backward compatibility aliases for legacy usage.

Older modules read flat names such as MONGODB_URI instead of going through
the configuration sections. These are derived, read-only views of an
AppConfig and are gradually being phased out.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from euphoria.config.assembler import AppConfig

LEGACY_ALIAS_NAMES: tuple[str, ...] = (
    "TELEGRAM_API_TOKEN",
    "MAX_VOICE_MESSAGE_LENGTH_SECONDS",
    "OPENAI_API_KEY",
    "GPT_VERSION",
    "HUMAN_DESIGN_API_KEY",
    "HUMAN_DESIGN_API_BASE_URL",
    "MONGODB_HOST",
    "MONGODB_PORT",
    "MONGODB_USER",
    "MONGODB_PASSWORD",
    "MONGODB_DATABASE",
    "MONGO_EXPRESS_PORT",
    "MONGODB_URI",
    "LOG_LEVEL",
    "SUPPORT_CHAT_ID",
    "ADMIN_CHAT_ID",
    "ADMIN_IDS",
    "NOTIFICATION_ALERT_THRESHOLD",
    "MAX_NOTIFICATION_RETRIES",
    "REANALYSIS_BATCH_SIZE",
    "REANALYSIS_PROGRESS_INTERVAL",
)


def legacy_aliases(config: AppConfig) -> Mapping[str, Any]:
    """Flat, read-only view of every configuration field under its legacy name"""
    return MappingProxyType({
        "TELEGRAM_API_TOKEN": config.telegram.api_token,
        "MAX_VOICE_MESSAGE_LENGTH_SECONDS": config.telegram.max_voice_message_length_seconds,
        "OPENAI_API_KEY": config.openai.api_key,
        "GPT_VERSION": config.openai.gpt_version,
        "HUMAN_DESIGN_API_KEY": config.human_design.api_key,
        "HUMAN_DESIGN_API_BASE_URL": config.human_design.base_url,
        "MONGODB_HOST": config.database.host,
        "MONGODB_PORT": config.database.port,
        "MONGODB_USER": config.database.user,
        "MONGODB_PASSWORD": config.database.password,
        "MONGODB_DATABASE": config.database.name,
        "MONGO_EXPRESS_PORT": config.database.express_port,
        "MONGODB_URI": config.database.uri,
        "LOG_LEVEL": config.logging.level,
        "SUPPORT_CHAT_ID": config.support.support_chat_id,
        "ADMIN_CHAT_ID": config.support.admin_chat_id,
        "ADMIN_IDS": config.support.admin_ids,
        "NOTIFICATION_ALERT_THRESHOLD": config.support.notification_alert_threshold,
        "MAX_NOTIFICATION_RETRIES": config.support.max_notification_retries,
        "REANALYSIS_BATCH_SIZE": config.reanalysis.batch_size,
        "REANALYSIS_PROGRESS_INTERVAL": config.reanalysis.progress_interval,
    })
