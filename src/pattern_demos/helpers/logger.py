import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from pattern_demos.config.schemas.logging_schema import LogDestination, LoggingConfig

# Shared by structlog-native loggers and by foreign (plain stdlib) records
_PRE_CHAIN = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_handlers(logging_config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    destination = logging_config.destination

    if destination in (LogDestination.FILE, LogDestination.BOTH):
        log_path = os.path.expandvars(os.path.expanduser(logging_config.file_path))
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=logging_config.max_size_mb * 1024 * 1024,
            backupCount=logging_config.backup_count,
        )
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=_PRE_CHAIN,
            )
        )
        handlers.append(file_handler)

    if destination in (LogDestination.CONSOLE, LogDestination.BOTH):
        # Demo output owns stdout, diagnostics go to stderr
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.dev.ConsoleRenderer(colors=False),
                foreign_pre_chain=_PRE_CHAIN,
            )
        )
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    return handlers


def setup_logging(logging_config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        logging_config: Logging section of the application configuration.
                        If None, schema defaults are used.
    Returns:
        Configured structlog logger instance.
    """
    if logging_config is None:
        logging_config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, logging_config.level.value))

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in _build_handlers(logging_config):
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("pattern_demos")
    logger.debug(
        "Logging configured",
        log_level=logging_config.level.value,
        log_destination=logging_config.destination.value,
        log_file=logging_config.file_path,
    )

    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


# Route structlog through stdlib logging from first import, so nothing is
# written to stdout before setup_logging() runs
_configure_structlog()
