"""
Unit tests for logging setup and session log retention.
"""

import logging

import pytest

from src.logging_config import cleanup_session_logs, setup_logging


@pytest.fixture
def restore_root_logger():
    """Drop the handlers setup_logging installed"""
    root_logger = logging.getLogger()
    original = set(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in original:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


class TestSetupLogging:

    def test_creates_session_log(self, tmp_path, restore_root_logger):
        session_log = setup_logging(log_file=str(tmp_path / "logs" / "search.log"))
        logging.getLogger("src.search").debug("indexed document 7")

        assert session_log.parent == tmp_path / "logs"
        assert session_log.name.startswith("search_")
        assert "indexed document 7" in session_log.read_text(encoding="utf-8")

    def test_console_level(self, tmp_path, restore_root_logger):
        setup_logging(log_file=str(tmp_path / "search.log"), console_level=logging.WARNING)

        root_logger = logging.getLogger()
        levels = sorted(handler.level for handler in root_logger.handlers)
        assert levels == [logging.DEBUG, logging.WARNING]


class TestCleanupSessionLogs:

    def test_keeps_newest(self, tmp_path):
        for day in range(1, 8):
            (tmp_path / f"search_2026010{day}_120000.log").write_text("")

        deleted = cleanup_session_logs(tmp_path / "search.log", keep=5)

        remaining = sorted(path.name for path in tmp_path.iterdir())
        assert len(deleted) == 3
        assert remaining == [f"search_2026010{day}_120000.log" for day in range(4, 8)]

    def test_nothing_to_delete(self, tmp_path):
        (tmp_path / "search_20260101_120000.log").write_text("")
        assert cleanup_session_logs(tmp_path / "search.log") == []
