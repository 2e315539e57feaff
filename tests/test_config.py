"""
Settings and logging setup tests.
"""

import logging

from xtream_data import Settings, configure_logging


class TestSettings:
    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("XTREAM_BASE_URL", "http://panel.example:8080")
        monkeypatch.setenv("XTREAM_USERNAME", "demo")
        monkeypatch.setenv("XTREAM_MAX_RETRIES", "5")

        settings = Settings(_env_file=None)
        assert settings.base_url == "http://panel.example:8080"
        assert settings.username == "demo"
        assert settings.max_retries == 5

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("XTREAM_TIMEOUT", raising=False)
        monkeypatch.delenv("XTREAM_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.timeout == 30.0
        assert settings.log_level == "INFO"


class TestConfigureLogging:
    def test_accepts_level_names(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging("debug")
        configure_logging("nonsense")
        configure_logging(logging.WARNING)

        assert [c["level"] for c in calls] == [logging.DEBUG, logging.INFO, logging.WARNING]
