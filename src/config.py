"""
Application settings from environment variables.

Load order:
1. .env.local (local development, highest priority)
2. .env (fallback)
3. Process environment only, if neither file exists
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


@dataclass(frozen=True)
class Settings:
    stop_words: str = ""
    log_level: int = logging.INFO
    log_file: str = "logs/search-server.log"
    port: int = 8080


def load_env_files(project_root: Path = PROJECT_ROOT) -> Path | None:
    """Load the first existing env file; returns its path, or None"""
    for candidate in (project_root / ".env.local", project_root / ".env"):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            return candidate
    return None


def load_settings() -> Settings:
    """
    Build Settings from the current environment.

    Variables:
        SEARCH_STOP_WORDS: space-separated stop words (default: none)
        LOG_LEVEL: console log level name (default: INFO)
        LOG_FILE: base log file path (default: logs/search-server.log)
        PORT: HTTP port for uvicorn (default: 8080)
    """
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    return Settings(
        stop_words=os.getenv("SEARCH_STOP_WORDS", ""),
        log_level=getattr(logging, log_level_name, logging.INFO),
        log_file=os.getenv("LOG_FILE", "logs/search-server.log"),
        port=int(os.getenv("PORT", "8080")),
    )
