"""Process-wide logging configuration for the IFC calendar."""

import logging
import os
from logging.handlers import RotatingFileHandler

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "IFC_CALENDAR_LOG_LEVEL"

# pystray and PIL log backend chatter at DEBUG
NOISY_LOGGERS: tuple[str, ...] = ("PIL", "pystray")

_configured = False


def level_from_env(default: int = logging.WARNING) -> int:
    """Read the log level name from IFC_CALENDAR_LOG_LEVEL."""
    name = os.environ.get(LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(
    *,
    level: int | None = None,
    console: bool = True,
    log_file: str | None = None,
    file_max_bytes: int = 1_000_000,
    file_backup_count: int = 2,
) -> None:
    """Configure root logging once. Call this from the entry point only.

    Modules just use ``logging.getLogger(__name__)``.
    """
    global _configured
    if _configured:
        return

    if level is None:
        level = level_from_env()

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level)

    formatter = logging.Formatter(fmt=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count,
            encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    _configured = True
    logging.getLogger(__name__).debug("Logging initialised (level=%s)",
                                      logging.getLevelName(level))
