"""
Pytest configuration for all Euphoria tests — isolates the process
environment and registers markers.
"""

import sys

import pytest

from euphoria.config.schema import ENV_SCHEMA
from euphoria.config.settings import reset_config

# =============================================================================
# SHARED FIXTURES
# =============================================================================

REQUIRED_ENV = {
    "TELEGRAM_API_TOKEN": "test-token",
    "OPENAI_API_KEY": "test-key",
}


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    """
    Remove every schema variable and NODE_ENV from os.environ.

    Each name is set before being deleted so monkeypatch records it and also
    undoes values written by the env file loader during the test.
    """
    for name in [entry.name for entry in ENV_SCHEMA] + ["NODE_ENV"]:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the process-wide configuration between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def required_env():
    """Smallest raw environment that validates."""
    return dict(REQUIRED_ENV)


@pytest.fixture
def full_env():
    """Raw environment with every schema variable set."""
    return {
        "TELEGRAM_API_TOKEN": "test-token",
        "OPENAI_API_KEY": "test-key",
        "GPT_VERSION": "test-version",
        "HUMAN_DESIGN_API_KEY": "hd-key",
        "HUMAN_DESIGN_API_BASE_URL": "https://hd.example.com/v1",
        "MONGODB_HOST": "test-host",
        "MONGODB_PORT": "12345",
        "MONGODB_USER": "test-user",
        "MONGODB_PASSWORD": "test-password",
        "MONGODB_DATABASE": "test-db",
        "MONGO_EXPRESS_PORT": "8081",
        "LOG_LEVEL": "2",
        "MAX_VOICE_MESSAGE_LENGTH_SECONDS": "300",
        "SUPPORT_CHAT_ID": "test-chat",
        "ADMIN_CHAT_ID": "admin-chat",
        "ADMIN_IDS": "123,456",
        "NOTIFICATION_ALERT_THRESHOLD": "3",
        "MAX_NOTIFICATION_RETRIES": "3",
        "REANALYSIS_BATCH_SIZE": "5",
        "REANALYSIS_PROGRESS_INTERVAL": "10",
    }


@pytest.fixture
def env_dir(tmp_path, monkeypatch):
    """Empty working directory so no stray .env file is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Validate test environment and configure pytest with custom markers."""
    missing = []
    for mod in ("pydantic", "dotenv", "yaml", "click"):
        try:
            __import__(mod)
        except ImportError:
            missing.append(mod)

    if missing:
        print(
            "\n"
            + "=" * 70 + "\n"
            " TEST ENVIRONMENT ERROR\n"
            + "=" * 70 + "\n"
            f"\n"
            f" Missing dependencies: {', '.join(missing)}\n"
            f" Run: pip install -e '.[test]'\n"
            + "=" * 70,
            file=sys.stderr,
        )
        raise SystemExit(1)

    config.addinivalue_line(
        "markers", "e2e: End-to-end tests running the installed CLI"
    )
