import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from config.config import config

LOG_FILE_NAME = "record_counter.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

CONSOLE_HANDLER = "record_counter.console"
FILE_HANDLER = "record_counter.file"
HANDLER_NAMES = (CONSOLE_HANDLER, FILE_HANDLER)


def _level(name: str, default: int) -> int:
    return getattr(logging, str(name).upper(), default)


def setup_logging(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logger with console (stderr) + rotating file handler.
    Safe to call more than once; handlers are only added the first time.
    Returns a logger for `name`.
    """
    console_level = _level(level or config.LOG_LEVEL, logging.WARNING)
    file_level = _level(config.LOG_FILE_LEVEL, logging.INFO)

    root = logging.getLogger()
    if not any(h.get_name() in HANDLER_NAMES for h in root.handlers):
        # console handler
        ch = logging.StreamHandler()
        ch.set_name(CONSOLE_HANDLER)
        ch.setLevel(console_level)
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(ch)

        # rotating file handler
        if config.LOG_TO_FILE:
            log_dir = Path(config.LOG_DIR)
            log_dir.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                str(log_dir / LOG_FILE_NAME), maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
            fh.set_name(FILE_HANDLER)
            fh.setLevel(file_level)
            fh.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(fh)

    root.setLevel(min(console_level, file_level) if config.LOG_TO_FILE else console_level)
    return logging.getLogger(name)
