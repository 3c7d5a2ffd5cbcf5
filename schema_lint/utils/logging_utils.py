import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "schema_lint"

DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below ``threshold``."""

    def __init__(self, threshold: int):
        super().__init__()
        self.threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.threshold


def parse_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name ("debug", "WARNING", ...) to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Route the package's log records to two streams.

    Records below ``stderr_level`` go to stdout, the rest to stderr. Only the
    ``logger_name`` logger is touched, so a host application's root handlers
    are left alone. Calling this again replaces the handlers it installed.
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if getattr(handler, "_schema_lint_stream", False):
            logger.removeHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
    formatter = formatter or logging.Formatter(DEFAULT_FORMAT)
    stderr_level = max(stderr_level, logging.DEBUG)

    low = logging.StreamHandler(stream=sys.stdout)
    low.addFilter(_BelowLevelFilter(stderr_level))
    high = logging.StreamHandler(stream=sys.stderr)
    high.setLevel(stderr_level)

    for handler in (low, high):
        handler.setFormatter(formatter)
        handler._schema_lint_stream = True
        logger.addHandler(handler)

    return logger
