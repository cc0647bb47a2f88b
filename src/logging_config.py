"""Logging configuration: brief console output plus a detailed rotating session file"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List

KEEP_SESSION_LOGS = 5
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 10

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"


def cleanup_session_logs(log_path: Path, keep: int = KEEP_SESSION_LOGS) -> List[Path]:
    """
    Delete old session logs so that at most `keep` remain after a new one is created.

    Session logs are named {stem}_{YYYYmmdd_HHMMSS}.log next to log_path, so
    lexicographic order is chronological.

    Returns:
        Paths that were deleted
    """
    existing_logs = sorted(log_path.parent.glob(f"{log_path.stem}_*.log"), reverse=True)  # Newest first
    deleted = []
    for old_log in existing_logs[keep - 1:]:
        try:
            old_log.unlink()
            deleted.append(old_log)
        except OSError as e:
            # Another process may hold or have removed the file
            print(f"WARNING: could not delete old log {old_log}: {e}", file=sys.stderr)
    return deleted


def setup_logging(
    log_file: str = "logs/search-server.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging with two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default) with rotation

    Rotation policy:
    - New log file on each start (timestamp-based naming)
    - Keep last 5 session files (auto-cleanup on startup)
    - Auto-rotate when file reaches 10MB

    Args:
        log_file: Base path to log file (relative to working directory)
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of this session's log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    cleanup_session_logs(log_path)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    file_handler = RotatingFileHandler(
        session_log,
        mode="a",
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # Request logs are noisy on the console (still kept in file)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.info(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={session_log} ({logging.getLevelName(file_level)})"
    )
    return session_log
