"""Tests for euphoria.config.settings — the Load -> Validate -> Assemble pipeline"""

import pytest

from euphoria.config.schema import Environment, LogLevel
from euphoria.config.settings import (
    get_config,
    get_legacy_aliases,
    load_configuration,
    reset_config,
    set_config,
)
from euphoria.config.validator import ValidationMode
from euphoria.core.exceptions import ConfigurationError, EnvValidationError


class TestLoadConfiguration:
    def test_from_mapping(self, required_env, tmp_path):
        config = load_configuration(environ=required_env, base_dir=tmp_path)
        assert config.telegram.api_token == "test-token"
        assert config.environment is Environment.DEVELOPMENT
        assert config.logging.level is LogLevel.INFO

    def test_env_file_supplies_missing_values(self, tmp_path):
        (tmp_path / ".env").write_text(
            "TELEGRAM_API_TOKEN=file-token\nOPENAI_API_KEY=file-key\nMONGODB_PORT=12345\n"
        )
        environ = {"OPENAI_API_KEY": "shell-key"}
        config = load_configuration(environ=environ, base_dir=tmp_path)
        assert config.telegram.api_token == "file-token"
        assert config.openai.api_key == "shell-key"
        assert config.database.port == "12345"

    def test_production_uses_prod_file(self, tmp_path):
        (tmp_path / ".env").write_text("TELEGRAM_API_TOKEN=dev\nOPENAI_API_KEY=dev\n")
        (tmp_path / ".env.prod").write_text(
            "TELEGRAM_API_TOKEN=prod\nOPENAI_API_KEY=prod\nMONGODB_PASSWORD=secret\n"
        )
        config = load_configuration(environ={"NODE_ENV": "production"}, base_dir=tmp_path)
        assert config.environment is Environment.PRODUCTION
        assert config.telegram.api_token == "prod"
        assert config.database.uri.startswith("mongodb://:secret@localhost:27017/")

    def test_node_env_from_env_file(self, required_env, tmp_path):
        (tmp_path / ".env").write_text("NODE_ENV=test\n")
        config = load_configuration(environ=required_env, base_dir=tmp_path)
        assert config.environment is Environment.TEST

    def test_shell_node_env_wins_over_file(self, required_env, tmp_path):
        (tmp_path / ".env").write_text("NODE_ENV=production\n")
        required_env["NODE_ENV"] = "test"
        config = load_configuration(environ=required_env, base_dir=tmp_path)
        assert config.environment is Environment.TEST

    def test_unknown_node_env_in_file(self, required_env, tmp_path):
        (tmp_path / ".env").write_text("NODE_ENV=staging\n")
        with pytest.raises(ConfigurationError, match="NODE_ENV"):
            load_configuration(environ=required_env, base_dir=tmp_path)

    def test_failure_is_atomic(self, tmp_path):
        with pytest.raises(EnvValidationError) as exc_info:
            load_configuration(environ={"LOG_LEVEL": "9"}, base_dir=tmp_path)
        assert exc_info.value.names == ["TELEGRAM_API_TOKEN", "OPENAI_API_KEY", "LOG_LEVEL"]

    def test_terminating_mode(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            load_configuration(ValidationMode.TERMINATING, environ={}, base_dir=tmp_path)
        assert exc_info.value.code == 1

    def test_unknown_node_env(self, required_env, tmp_path):
        required_env["NODE_ENV"] = "staging"
        with pytest.raises(ConfigurationError):
            load_configuration(environ=required_env, base_dir=tmp_path)

    def test_defaults_to_process_environment(self, clean_environ, env_dir):
        clean_environ.setenv("TELEGRAM_API_TOKEN", "os-token")
        clean_environ.setenv("OPENAI_API_KEY", "os-key")
        clean_environ.setenv("LOG_LEVEL", "3")
        config = load_configuration()
        assert config.telegram.api_token == "os-token"
        assert config.logging.level is LogLevel.DEBUG


class TestProcessWideConfig:
    def test_get_config_loads_lazily(self, clean_environ, env_dir):
        clean_environ.setenv("TELEGRAM_API_TOKEN", "lazy-token")
        clean_environ.setenv("OPENAI_API_KEY", "lazy-key")
        config = get_config()
        assert config.telegram.api_token == "lazy-token"
        assert get_config() is config

    def test_get_config_raises_without_env(self, env_dir):
        with pytest.raises(EnvValidationError):
            get_config()

    def test_set_and_reset(self, required_env, tmp_path):
        config = load_configuration(environ=required_env, base_dir=tmp_path)
        set_config(config)
        assert get_config() is config
        assert get_legacy_aliases()["TELEGRAM_API_TOKEN"] == "test-token"
        reset_config()
        required_env["TELEGRAM_API_TOKEN"] = "other"
        set_config(load_configuration(environ=required_env, base_dir=tmp_path))
        assert get_legacy_aliases()["TELEGRAM_API_TOKEN"] == "other"
