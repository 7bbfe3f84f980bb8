"""Centralized logging configuration for genlab.

Library modules only create module-level loggers. Entry points (the CLI)
call configure_logging() once, early.

Logging Levels:
- DEBUG: Cache hits/misses, task queueing and bucket drains
- INFO: Empty-queue notifications, CLI summaries
- WARNING: Recoverable issues
- ERROR: Failures that affect operation
"""

import logging
import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ComponentFormatter(logging.Formatter):
    """Formatter that extracts component name from logger path.

    Converts full module paths to short component names:
    - genlab.caching.cache -> caching
    - genlab.scheduling.scheduler -> scheduling
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "genlab":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return super().format(record)


def resolve_level(level: str | None = None) -> str:
    """Resolve a log level name, falling back to GENLAB_LOG_LEVEL then INFO."""
    if level is None:
        level = os.environ.get("GENLAB_LOG_LEVEL", "INFO")
    level = level.upper()
    if level not in LOG_LEVELS:
        return "INFO"
    return level


def configure_logging(
    level: str | None = None,
    use_rich: bool = False,
) -> None:
    """Configure logging for genlab.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses GENLAB_LOG_LEVEL env var or INFO.
        use_rich: Use Rich handler for colorful console output.
    """
    log_level = getattr(logging, resolve_level(level))

    console_handler: logging.Handler
    if use_rich:
        from rich.logging import RichHandler

        console_handler = RichHandler(
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=False,
        )
        console_handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(
        level=log_level,
        handlers=[console_handler],
        force=True,
    )
