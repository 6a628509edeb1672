import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "SCRATCHCARD_LOG_DIR"
DEFAULT_LOG_SUBDIR = Path(".scratchcard") / "logs"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_directory() -> Path:
    """Return the directory log files are written to, creating it if needed."""

    configured = os.getenv(LOG_DIR_ENV_VAR)
    if configured:
        path = Path(configured).expanduser()
    else:
        path = Path.home() / DEFAULT_LOG_SUBDIR

    path.mkdir(parents=True, exist_ok=True)
    return path


def log_filename(name: str) -> str:
    """Map a dotted logger name onto a flat ``.log`` filename."""

    flattened = name.replace("/", "_").replace(os.sep, "_").replace("..", ".")
    return f"{flattened.replace('.', '_') or 'root'}.log"


def _configure_logger(logger: logging.Logger, level_name: str) -> None:
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        # Configured by an earlier call or by the host application.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(
            resolve_log_directory() / log_filename(logger.name),
            maxBytes=MAX_LOG_BYTES,
            backupCount=BACKUP_COUNT,
        ),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr and to a rolling per-module file."""

    logger = logging.getLogger(name)
    _configure_logger(logger, os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper())
    return logger
