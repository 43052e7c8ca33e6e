"""
Configuration Loading
=====================

Load -> Validate -> Assemble. `load_configuration()` is the single entry
point: the bootstrap sequence calls it once and passes the result down.
A process-wide holder is kept for legacy code that cannot take the
configuration as a parameter.
"""

import os
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, Optional

from euphoria.config.aliases import legacy_aliases
from euphoria.config.assembler import AppConfig, assemble_config
from euphoria.config.loader import load_env_file, resolve_environment
from euphoria.config.schema import ENV_SCHEMA
from euphoria.config.validator import ValidationMode, validate_env
from euphoria.core.structured_logger import get_logger

logger = get_logger("Config")


def load_configuration(
    mode: ValidationMode = ValidationMode.THROWING,
    environ: Optional[MutableMapping[str, str]] = None,
    base_dir: Optional[str | Path] = None,
) -> AppConfig:
    """
    Load and validate the application configuration.

    Args:
        mode: Failure behaviour of the validator (raise, or print and exit)
        environ: Environment store to read and to merge the env file into
                 (default: os.environ)
        base_dir: Directory holding .env / .env.prod (default: cwd)

    Returns:
        Frozen AppConfig

    Raises:
        ConfigurationError: If NODE_ENV is unknown
        EnvValidationError: If any variable is missing or invalid (THROWING mode)
    """
    environ = os.environ if environ is None else environ

    # NODE_ENV from the shell picks the file; the merged value names the environment
    load_env_file(resolve_environment(environ), base_dir=base_dir, environ=environ)
    environment = resolve_environment(environ)
    env = validate_env(environ, ENV_SCHEMA, mode=mode)
    config = assemble_config(env, environment)

    logger.info(
        "Configuration loaded",
        environment=environment.value,
        database=config.database.name,
        log_level=config.logging.level.name,
    )
    return config


# Process-wide instance for legacy callers
_global_config: Optional[AppConfig] = None
_global_aliases: Optional[Mapping[str, Any]] = None


def get_config() -> AppConfig:
    """Get the process-wide configuration, loading it on first use"""
    global _global_config
    if _global_config is None:
        set_config(load_configuration())
    return _global_config


def set_config(config: AppConfig) -> None:
    """Install the process-wide configuration"""
    global _global_config, _global_aliases
    _global_config = config
    _global_aliases = legacy_aliases(config)


def reset_config() -> None:
    """Forget the process-wide configuration (tests)"""
    global _global_config, _global_aliases
    _global_config = None
    _global_aliases = None


def get_legacy_aliases() -> Mapping[str, Any]:
    """Flat legacy names for the process-wide configuration, computed once"""
    get_config()
    return _global_aliases
