"""
Centralized logging setup for the Book Search Engine.

Provides console and rotating file output with configuration from config.json.
Uses a guard to prevent multiple initialization; a forced setup replaces the
handlers installed by the previous one.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List


LOG_FILENAME = "book_search.log"

_logger_initialized = False
_installed_handlers: List[logging.Handler] = []


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    logs_directory: Path = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    force: bool = False
) -> None:
    """
    Initialize the root logger with console and optional file handlers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Format string for log messages.
        logs_directory: Directory for log files. If None, file logging disabled.
        max_file_size_mb: Maximum size of each log file in MB.
        backup_count: Number of backup files to keep.
        force: Reconfigure even if logging was already initialized.
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    root_logger = logging.getLogger()

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if logs_directory:
        logs_directory = Path(logs_directory)

        try:
            logs_directory.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                logs_directory / LOG_FILENAME,
                maxBytes=int(max_file_size_mb) * 1024 * 1024,
                backupCount=int(backup_count),
                encoding="utf-8"
            )
        except OSError as e:
            root_logger.warning(f"File logging disabled, cannot write to {logs_directory}: {e}")
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            _installed_handlers.append(file_handler)

    _logger_initialized = True


def configure_logging(config, force: bool = False) -> None:
    """
    Initialize logging from a loaded Config.

    Args:
        config: Config instance providing logging and paths sections.
        force: Replace an earlier setup, e.g. after loading another config.
    """
    setup_logging(
        log_level=config.logging.level,
        log_format=config.logging.format,
        logs_directory=config.paths.logs_directory,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
        force=force
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Automatically initializes logging from config on first call, falling
    back to console-only defaults when the config cannot be loaded or applied.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Configured Logger instance.
    """
    if not _logger_initialized:
        try:
            from .config_loader import get_config
            configure_logging(get_config())
        except Exception:
            setup_logging()

    return logging.getLogger(name)


if __name__ == "__main__":
    setup_logging(log_level="DEBUG")

    logger = get_logger(__name__)
    logger.debug("Debug message")
    logger.info("Info message")
    logger.warning("Warning message")

    other_logger = get_logger("other_module")
    other_logger.info("Message from another logger")
