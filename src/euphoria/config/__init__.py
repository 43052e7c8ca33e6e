"""
Euphoria configuration.

Public API:
    load_configuration()  Load -> Validate -> Assemble, returns AppConfig
    validate_env()        Schema validation of a raw environment mapping
    assemble_config()     Pure mapping of a validated environment to AppConfig

Legacy flat names (`from euphoria.config import MONGODB_URI`) resolve
lazily through the process-wide configuration.
"""

from euphoria.config.aliases import LEGACY_ALIAS_NAMES, legacy_aliases
from euphoria.config.assembler import (
    AppConfig,
    DatabaseConfig,
    HumanDesignConfig,
    LoggingConfig,
    OpenAIConfig,
    ReanalysisConfig,
    SupportConfig,
    TelegramConfig,
    assemble_config,
    build_mongodb_uri,
    parse_admin_ids,
)
from euphoria.config.loader import env_file_for, load_env_file, resolve_environment
from euphoria.config.schema import ENV_SCHEMA, EnvKind, Environment, EnvVar, LogLevel
from euphoria.config.settings import (
    get_config,
    get_legacy_aliases,
    load_configuration,
    reset_config,
    set_config,
)
from euphoria.config.validator import ValidatedEnv, ValidationMode, validate_env


def __getattr__(name: str):
    if name in LEGACY_ALIAS_NAMES:
        return get_legacy_aliases()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'AppConfig',
    'assemble_config',
    'build_mongodb_uri',
    'DatabaseConfig',
    'ENV_SCHEMA',
    'env_file_for',
    'EnvKind',
    'Environment',
    'EnvVar',
    'get_config',
    'get_legacy_aliases',
    'HumanDesignConfig',
    'LEGACY_ALIAS_NAMES',
    'legacy_aliases',
    'load_configuration',
    'load_env_file',
    'LoggingConfig',
    'LogLevel',
    'OpenAIConfig',
    'parse_admin_ids',
    'ReanalysisConfig',
    'reset_config',
    'resolve_environment',
    'set_config',
    'SupportConfig',
    'TelegramConfig',
    'validate_env',
    'ValidatedEnv',
    'ValidationMode',
]
