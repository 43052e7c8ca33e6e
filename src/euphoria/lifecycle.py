"""Lifecycle Management — startup bootstrap for Euphoria."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from euphoria.config.assembler import AppConfig
from euphoria.config.settings import get_legacy_aliases, load_configuration, set_config
from euphoria.config.validator import ValidationMode
from euphoria.core.structured_logger import configure_logging, get_logger

logger = get_logger("Lifecycle")


@dataclass(frozen=True)
class RuntimeContext:
    """Everything collaborators need at startup, passed down explicitly."""

    config: AppConfig
    aliases: Mapping[str, Any]


def bootstrap(
    mode: ValidationMode = ValidationMode.TERMINATING,
    base_dir: str | Path | None = None,
) -> RuntimeContext:
    """
    Load the configuration and prepare process-wide state.

    Runs once, before any other component starts. Logging is configured from
    the loaded log level, and the configuration is also installed as the
    process-wide instance for legacy readers.
    """
    config = load_configuration(mode=mode, base_dir=base_dir)
    configure_logging(config.logging.level.logging_level)
    set_config(config)

    logger.info(
        "Euphoria bootstrapped",
        environment=config.environment.value,
        gpt_version=config.openai.gpt_version,
    )
    return RuntimeContext(config=config, aliases=get_legacy_aliases())
