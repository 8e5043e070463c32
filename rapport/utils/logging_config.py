"""Logging configuration for Rapport.

Every record carries a correlation id (``-`` outside of ``log_context``) so
the log lines of one network event can be grepped together.
"""

import logging
import sys
import time
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_LOG_FILE = Path(__file__).parent.parent.parent / "logs" / "rapport.log"

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotate at 5 MB, keep 3 old files
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3


class ContextFilter(logging.Filter):
    """Stamp the active correlation id onto each record."""

    def __init__(self) -> None:
        super().__init__()
        self.correlation_id: str | None = None

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = self.correlation_id or "-"
        return True


_context_filter = ContextFilter()


def _resolve_log_path(log_file: str | None) -> Path | None:
    if log_file == "default":
        return DEFAULT_LOG_FILE
    return Path(log_file) if log_file else None


def setup_logging(level: str = "INFO", log_file: str | None = "default") -> None:
    """Configure the root logger.

    Replaces any existing root handlers with a stdout handler and, unless
    log_file is None, a rotating file handler.

    Args:
        level: Level name; unknown names fall back to INFO.
        log_file: "default" for logs/rapport.log, a path, or None for console only.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    log_path = _resolve_log_path(log_file)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        # Filters on a logger don't see records from child loggers
        handler.addFilter(_context_filter)
        root_logger.addHandler(handler)

    if log_path is not None:
        root_logger.info(f"Logging to file: {log_path}")


@contextmanager
def log_context(correlation_id: str | None = None) -> Generator[str]:
    """Tag log records emitted inside the block with a correlation id.

    Args:
        correlation_id: Id to use. A short random one is generated if omitted.

    Yields:
        The correlation id in effect.
    """
    previous = _context_filter.correlation_id
    _context_filter.correlation_id = correlation_id or uuid.uuid4().hex[:8]
    try:
        yield _context_filter.correlation_id
    finally:
        _context_filter.correlation_id = previous


@contextmanager
def log_performance(logger: logging.Logger, operation: str) -> Generator[None]:
    """Log how long the wrapped block took, or how long until it failed."""
    start = time.perf_counter()
    logger.info(f"{operation}: Starting")
    try:
        yield
    except Exception as e:
        logger.error(f"{operation}: Failed after {time.perf_counter() - start:.2f}s - {e}")
        raise
    logger.info(f"{operation}: Completed in {time.perf_counter() - start:.2f}s")
