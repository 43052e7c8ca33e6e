"""
Environment file loader.

Reads `.env` (or `.env.prod` in production) and copies its values into the
process environment without touching variables that are already set, so
values exported by the shell or the container runtime always win.
"""

import os
from collections.abc import Mapping, MutableMapping
from pathlib import Path

from dotenv import dotenv_values

from euphoria.config.schema import Environment
from euphoria.core.exceptions import ConfigurationError
from euphoria.core.structured_logger import get_logger

logger = get_logger("EnvLoader")

DEFAULT_ENV_FILE = ".env"
PRODUCTION_ENV_FILE = ".env.prod"


def resolve_environment(environ: Mapping[str, str] | None = None) -> Environment:
    """
    Determine the deployment environment from NODE_ENV.

    Raises:
        ConfigurationError: If NODE_ENV holds an unknown value
    """
    environ = os.environ if environ is None else environ
    raw = (environ.get("NODE_ENV") or Environment.DEVELOPMENT.value).strip().lower()
    try:
        return Environment(raw)
    except ValueError:
        allowed = ", ".join(e.value for e in Environment)
        raise ConfigurationError(
            f"NODE_ENV must be one of: {allowed}",
            details={'variable': 'NODE_ENV'},
        ) from None


def env_file_for(environment: Environment, base_dir: str | Path | None = None) -> Path:
    """Path of the environment file used for `environment`"""
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    if environment is Environment.PRODUCTION:
        return base / PRODUCTION_ENV_FILE
    return base / DEFAULT_ENV_FILE


def load_env_file(
    environment: Environment,
    base_dir: str | Path | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> Path | None:
    """
    Merge the environment file for `environment` into `environ`.

    Args:
        environment: Deployment environment selecting the file
        base_dir: Directory holding the env files (default: cwd)
        environ: Target mapping (default: os.environ)

    Returns:
        Path of the file that was read, or None if it does not exist

    Raises:
        ConfigurationError: If the file is not valid UTF-8
    """
    environ = os.environ if environ is None else environ
    path = env_file_for(environment, base_dir)

    if not path.is_file():
        logger.debug("No environment file found, using process environment only", path=str(path))
        return None

    try:
        values = dotenv_values(path, encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error("Environment file is not valid UTF-8", path=str(path), position=e.start)
        raise ConfigurationError(
            f"Cannot read {path.name}: not valid UTF-8 (byte offset {e.start})",
            details={'path': str(path)},
        ) from e

    applied = 0
    for key, value in values.items():
        # KEY without "=" parses to None
        if value is None or key in environ:
            continue
        environ[key] = value
        applied += 1

    logger.info("Loaded environment file", path=str(path), applied=applied)
    return path
