"""
File for logging
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from chainparams.core.config import load_settings

__all__ = ["get_logger"]

DEFAULT_FORMAT = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'
DEFAULT_LEVEL = "INFO"


def get_logger(name: str, log_level: Optional[str] = None, log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with the specified configuration.

    Args:
        name: Logger name (typically __name__ from calling module)
        log_level: Logging level. Falls back to CHAINPARAMS_LOG_LEVEL, then INFO (also when that variable is invalid)
        log_file: Optional path to log file for persistent logging
        format_string: Optional custom format string

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Handlers are attached once per logger name
    if logger.handlers:
        return logger

    settings_error = None
    if log_level is None:
        try:
            log_level = load_settings().log_level
        except ValueError as e:
            # Invalid CHAINPARAMS_LOG_LEVEL: fall back, warn once the handlers exist
            log_level, settings_error = DEFAULT_LEVEL, e
    logger.setLevel(getattr(logging, log_level.upper()))

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if settings_error is not None:
        logger.warning(f"{settings_error}; using {DEFAULT_LEVEL}")

    return logger
