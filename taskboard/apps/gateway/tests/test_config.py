"""AppConfig 加载测试"""

import pytest
from taskboard.gateway.config import AppConfig, load_app_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "TASKBOARD_ENV",
        "TASKBOARD_HOST",
        "TASKBOARD_PORT",
        "TASKBOARD_LOG_FORMAT",
        "TASKBOARD_LOG_LEVEL",
        "LOGFIRE_SEND_TO_LOGFIRE",
    ):
        monkeypatch.delenv(key, raising=False)


class TestLoadAppConfig:
    def test_defaults(self):
        config = load_app_config()
        assert config.env == "development"
        assert config.host == "127.0.0.1"
        assert config.port == 3000
        assert config.log_format == "dev"
        assert config.log_level == "INFO"
        assert not config.send_to_logfire
        assert config.is_development
        assert config.show_error_stack

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("production", "production"),
            ("prod", "production"),
            ("PROD", "production"),
            ("test", "test"),
            ("development", "development"),
        ],
    )
    def test_env_normalisation(self, monkeypatch, raw, expected):
        monkeypatch.setenv("TASKBOARD_ENV", raw)
        assert load_app_config().env == expected

    def test_unknown_env_falls_back(self, monkeypatch):
        monkeypatch.setenv("TASKBOARD_ENV", "staging")
        assert load_app_config().env == "development"

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("TASKBOARD_PORT", "8080")
        monkeypatch.setenv("TASKBOARD_HOST", "0.0.0.0")
        config = load_app_config()
        assert config.port == 8080
        assert config.host == "0.0.0.0"

    @pytest.mark.parametrize("raw", ["abc", "-1", "0", "70000", "80.5"])
    def test_invalid_port_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv("TASKBOARD_PORT", raw)
        assert load_app_config().port == 3000

    def test_logging_from_env(self, monkeypatch):
        monkeypatch.setenv("TASKBOARD_LOG_FORMAT", "JSON")
        monkeypatch.setenv("TASKBOARD_LOG_LEVEL", "debug")
        monkeypatch.setenv("LOGFIRE_SEND_TO_LOGFIRE", "true")
        config = load_app_config()
        assert config.log_format == "json"
        assert config.log_level == "DEBUG"
        assert config.send_to_logfire

    def test_invalid_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("TASKBOARD_LOG_LEVEL", "verbose")
        monkeypatch.setenv("TASKBOARD_LOG_FORMAT", "pretty")
        config = load_app_config()
        assert config.log_level == "INFO"
        assert config.log_format == "dev"


class TestDerivedFlags:
    def test_production_hides_stack(self):
        config = AppConfig(env="production")
        assert config.is_production
        assert not config.show_error_stack

    def test_test_env_shows_stack(self):
        config = AppConfig(env="test")
        assert config.is_test
        assert config.show_error_stack
