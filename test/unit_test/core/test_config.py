"""Unit tests for the environment-driven Settings model."""

from __future__ import annotations

import pytest

from sqlserver_builds.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "SQLSERVER_BUILDS_LOG_LEVEL",
        "SQLSERVER_BUILDS_LOG_FORMAT",
        "SQLSERVER_BUILDS_LOG_FILE_DIR",
        "SQLSERVER_BUILDS_ENABLE_FILE_LOGGING",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsDefaults:
    """Test default values when no environment is set."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        config = Settings(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_format == "detailed"
        assert config.log_file_dir == "logs"
        assert config.enable_file_logging is False


class TestSettingsFromEnvironment:
    """Test values bound from environment variables and .env files."""

    def test_reads_environment_variables(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("SQLSERVER_BUILDS_LOG_LEVEL", "DEBUG")
        clean_env.setenv("SQLSERVER_BUILDS_LOG_FORMAT", "json")
        clean_env.setenv("SQLSERVER_BUILDS_LOG_FILE_DIR", "/var/log/builds")
        clean_env.setenv("SQLSERVER_BUILDS_ENABLE_FILE_LOGGING", "true")

        config = Settings(_env_file=None)

        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.log_file_dir == "/var/log/builds"
        assert config.enable_file_logging is True

    @pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("false", False), ("0", False)])
    def test_file_logging_flag_parsing(self, clean_env: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        clean_env.setenv("SQLSERVER_BUILDS_ENABLE_FILE_LOGGING", raw)

        assert Settings(_env_file=None).enable_file_logging is expected

    def test_env_names_are_case_sensitive(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("sqlserver_builds_log_level", "ERROR")

        assert Settings(_env_file=None).log_level == "INFO"

    def test_reads_dotenv_file(self, clean_env: pytest.MonkeyPatch, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SQLSERVER_BUILDS_LOG_FORMAT=simple\nUNRELATED_SETTING=ignored\n", encoding="utf-8")

        config = Settings(_env_file=env_file)

        assert config.log_format == "simple"
