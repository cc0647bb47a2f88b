"""
Unit tests for environment-driven settings.
"""

import logging

from src.config import Settings, load_env_files, load_settings


class TestLoadSettings:

    def test_defaults(self, monkeypatch):
        for name in ["SEARCH_STOP_WORDS", "LOG_LEVEL", "LOG_FILE", "PORT"]:
            monkeypatch.delenv(name, raising=False)

        assert load_settings() == Settings()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SEARCH_STOP_WORDS", "and in on")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FILE", "/tmp/search.log")
        monkeypatch.setenv("PORT", "9000")

        settings = load_settings()
        assert settings.stop_words == "and in on"
        assert settings.log_level == logging.DEBUG
        assert settings.log_file == "/tmp/search.log"
        assert settings.port == 9000

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        assert load_settings().log_level == logging.INFO


class TestLoadEnvFiles:

    def test_no_files(self, tmp_path):
        assert load_env_files(tmp_path) is None

    def test_env_local_has_priority(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SEARCH_STOP_WORDS", raising=False)
        (tmp_path / ".env").write_text("SEARCH_STOP_WORDS=from-env\n")
        (tmp_path / ".env.local").write_text("SEARCH_STOP_WORDS=from-local\n")

        assert load_env_files(tmp_path) == tmp_path / ".env.local"
        assert load_settings().stop_words == "from-local"

    def test_env_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SEARCH_STOP_WORDS", raising=False)
        (tmp_path / ".env").write_text("SEARCH_STOP_WORDS=the\n")

        assert load_env_files(tmp_path) == tmp_path / ".env"
        assert load_settings().stop_words == "the"
