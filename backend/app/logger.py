"""Logging setup: one ``copycraft`` logger tree writing to a run log and the console."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from backend.app.config import Settings, get_settings

ROOT_LOGGER_NAME = "copycraft"

# HTTP and SDK chatter that would drown out our own lines at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "google_genai", "langchain_google_genai")

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
CONSOLE_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def log_file_for(settings: Settings, started: Optional[datetime] = None) -> Path:
    """Path of the per-run log file inside the configured log directory."""
    started = started or datetime.now()
    return Path(settings.log_dir) / f"copycraft_{started.strftime('%Y%m%d_%H%M%S')}.log"


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Attach file and console handlers to the ``copycraft`` logger.

    Safe to call more than once: Streamlit re-runs the page script on every
    interaction, so a logger that already has handlers is returned as-is.
    """
    settings = settings or get_settings()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.handlers:
        return root

    log_file = log_file or log_file_for(settings)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root.setLevel(logging.DEBUG)
    root.propagate = False

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    root.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_level(settings.log_level))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    root.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Child of the ``copycraft`` logger named after the last part of ``name``."""
    return logging.getLogger(ROOT_LOGGER_NAME).getChild(name.rsplit(".", 1)[-1])


LOG_FILE = log_file_for(get_settings())
logger = configure_logging(log_file=LOG_FILE)
