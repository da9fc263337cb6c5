"""Logging setup: stdlib handlers with structlog on top."""
import os
import sys
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import Optional

from design_patterns.config.schemas import LoggingConfig

PACKAGE_LOGGER = "design_patterns"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds the caller's module, function and line to each record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Console output goes to stderr so it never interleaves with the narrative
    examples print on stdout.

    Args:
        config: Logging configuration. If None, schema defaults are used.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, config.level.upper()))
    package_logger.propagate = False

    log_format = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

    handlers = []

    if config.destination in ("file", "both"):
        log_file = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count
        )
        file_handler.setFormatter(DetailedFormatter(log_format))
        handlers.append(file_handler)

    if config.destination in ("stdout", "both"):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(DetailedFormatter(log_format))
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    # Remove any existing handlers and add new ones
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        package_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger(PACKAGE_LOGGER)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a stdlib logger; names outside the package are nested under it."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to a package logger name."""
    return structlog.get_logger(get_logger(name).name)
