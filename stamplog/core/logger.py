"""
Logging configuration module.

This module provides centralized logging setup for the application,
configuring both file and console output with appropriate formatting,
and builds the optional trace callback for interval formatting.
"""

import logging
from typing import Callable, Optional
from stamplog.config.settings import Settings

TRACE_LOGGER_NAME = "stamplog.trace"


def setup_logger(tracing: bool = Settings.TRACING_ENABLED) -> None:
    """
    Configure and initialize the application logger.

    Sets up dual logging output (file and console), creates the logs
    directory if needed, and raises verbosity of the trace logger when
    tracing is enabled.

    The function configures:
        - File logging to Settings.LOG_FILE with UTF-8 encoding at Settings.LOG_LEVEL
        - Console logging to stderr at WARNING so command output stays clean
        - Custom formatters with timestamp, logger name, level, and message

    Args:
        tracing: Emit interval formatting trace messages at DEBUG level

    Returns:
        None

    Raises:
        OSError: If logs directory cannot be created (rare, usually permissions issue)

    Note:
        - Existing handlers are cleared before setup to avoid duplicates
    """
    # Create logs directory if it doesn't exist
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    # Clear any existing handlers to prevent duplicates on re-initialization
    logging.root.handlers.clear()

    # Create formatter with timestamp, logger name, level, and message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_level = logging.DEBUG if tracing else getattr(logging, Settings.LOG_LEVEL, logging.INFO)

    # Handler for file output (UTF-8 encoding for international characters)
    file_handler = logging.FileHandler(Settings.LOG_FILE, encoding='utf-8')
    file_handler.setFormatter(formatter)
    file_handler.setLevel(file_level)

    # Handler for console output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING)

    # Configure root logger with both handlers
    root_logger = logging.getLogger()
    root_logger.setLevel(file_level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(TRACE_LOGGER_NAME).setLevel(logging.DEBUG if tracing else logging.WARNING)


def make_tracer(enabled: bool = Settings.TRACING_ENABLED) -> Optional[Callable[[str], None]]:
    """
    Build the trace callback passed to IntervalFormatter.

    Returns:
        The DEBUG method of the trace logger when enabled, otherwise None
        (the formatter then uses its no-op default)

    Example:
        >>> formatter = IntervalFormatter(trace=make_tracer(Settings.TRACING_ENABLED))
    """
    if not enabled:
        return None
    return logging.getLogger(TRACE_LOGGER_NAME).debug
