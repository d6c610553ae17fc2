"""
Logging Configuration for the Roster Manager

This module provides logging configuration with:
- Rotating file handlers (prevents unbounded log growth)
- Colored console output
- Module-specific loggers for granular control

Usage Example:
    from logging_config import setup_logging, get_logger

    # Setup logging at application startup
    setup_logging(
        level="INFO",
        log_dir="logs",
        enable_console=True,
        enable_file=True
    )

    # Get logger in any module
    logger = get_logger(__name__)
    logger.info("Application started")

Log Files Created:
- logs/roster_manager.log: Main application log (INFO+)
- logs/roster_manager_debug.log: Debug log (DEBUG+)
- logs/roster_manager_error.log: Error log (ERROR+)

Each file rotates at 10MB with 5 backup files.
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from config.roster_settings import RosterSettings


# Log format templates
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "roster_manager"


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output.

    Adds ANSI color codes to log levels.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        """Add color to levelname without leaking it into other handlers"""
        original = record.levelname
        if original in self.COLORS:
            record.levelname = f"{self.COLORS[original]}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _rotating_handler(
    log_dir: str,
    suffix: str,
    level: int,
    log_format: str,
    max_bytes: int,
    backup_count: int
) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, f"{LOG_FILE_PREFIX}{suffix}.log"),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = RosterSettings.LOG_LEVEL,
    log_dir: str = RosterSettings.LOG_DIR,
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Setup application-wide logging configuration.

    Call once at application startup.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        enable_console: Whether to log to console
        enable_file: Whether to log to file
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup files to keep
        format_style: "detailed" or "simple" format

    Raises:
        ValueError: If level is not a logging level name
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    log_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        root_logger.addHandler(
            _rotating_handler(log_dir, "", logging.INFO, log_format, max_bytes, backup_count)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir, "_debug", logging.DEBUG, DETAILED_FORMAT, max_bytes, backup_count)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir, "_error", logging.ERROR, DETAILED_FORMAT, max_bytes, backup_count)
        )

    root_logger.info(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR"
) -> None:
    """
    Log an exception with traceback and context.

    Registry exceptions contribute their error code and context.

    Example:
        >>> try:
        ...     registry.add_person(person)
        ... except RegistryException as e:
        ...     log_exception(logger, e, context={"command": "add"})
    """
    log_level = getattr(logging, level.upper())

    merged = dict(getattr(exception, 'context_dict', None) or {})
    merged.update(context or {})
    error_code = getattr(exception, 'error_code', None)
    if error_code:
        merged['error_code'] = error_code

    context_str = ""
    if merged:
        context_items = [f"{k}={v}" for k, v in merged.items()]
        context_str = f" [{', '.join(context_items)}]"

    logger.log(
        log_level,
        f"Exception occurred{context_str}: {type(exception).__name__}: {str(exception)}",
        exc_info=True
    )


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Configure logging for a specific module.

    Args:
        module_name: Module name (e.g., "player_registry.player_registry")
        level: Log level for this module (None = inherit from root)
        propagate: Whether to propagate to parent loggers
    """
    logger = logging.getLogger(module_name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    logger.propagate = propagate

    return logger


class LogContext:
    """
    Context manager for temporary log level changes.

    Example:
        >>> with LogContext(get_logger("player_registry"), "DEBUG"):
        ...     registry.edit_person(target, edited)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = getattr(logging, level.upper())
        self.original_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.original_level)


def setup_registry_logging(level: str = RosterSettings.REGISTRY_LOG_LEVEL) -> None:
    """
    Configure logging for the player registry and roster aggregates.

    Args:
        level: Log level for registry modules
    """
    configure_module_logger("player_registry", level=level)
    configure_module_logger("player_registry.player_registry", level=level)
    configure_module_logger("roster", level=level)

