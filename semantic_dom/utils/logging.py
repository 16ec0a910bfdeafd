"""
Logging utility module for the converter.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

# Define logging levels dictionary for easy reference
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

ROOT_LOGGER_NAME = "semantic_dom"


class LogFormatter(logging.Formatter):
    """Custom log formatter with colored output for console."""

    # ANSI color codes
    COLORS = {
        'RESET': '\033[0m',
        'RED': '\033[31m',
        'GREEN': '\033[32m',
        'YELLOW': '\033[33m',
        'BLUE': '\033[34m',
        'BOLD': '\033[1m'
    }

    # Level-specific colors
    LEVEL_COLORS = {
        'DEBUG': COLORS['BLUE'],
        'INFO': COLORS['GREEN'],
        'WARNING': COLORS['YELLOW'],
        'ERROR': COLORS['RED'],
        'CRITICAL': COLORS['RED'] + COLORS['BOLD']
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Initialize formatter.

        Args:
            colored: Whether to use colored output
            *args: Additional formatter args
            **kwargs: Additional formatter kwargs
        """
        self.colored = colored and sys.platform != 'win32'  # Disable colors on Windows
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        formatted_msg = super().format(record)

        if self.colored:
            level_name = record.levelname
            if level_name in self.LEVEL_COLORS:
                colored_level = f"{self.LEVEL_COLORS[level_name]}{level_name}{self.COLORS['RESET']}"
                formatted_msg = formatted_msg.replace(level_name, colored_level, 1)

        return formatted_msg


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the converter.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level
        file_level: File logging level
        component: Optional component name for the logger

    Returns:
        logging.Logger: Configured logger
    """
    logger_name = ROOT_LOGGER_NAME
    if component:
        logger_name = f"{logger_name}.{component}"

    logger = logging.getLogger(logger_name)

    # If stream or file handlers already exist, assume logger is already configured
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    console_level_value = LOG_LEVELS.get(console_level.upper(), logging.INFO)
    file_level_value = LOG_LEVELS.get(file_level.upper(), logging.DEBUG)
    logger.setLevel(min(console_level_value, file_level_value) if log_file else console_level_value)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level_value)
    console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    console_handler.setFormatter(LogFormatter(colored=True, fmt=console_format, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level_value)

        # More detailed than console
        file_format = ("%(asctime)s [%(levelname)s] %(name)s "
                       "(%(filename)s:%(lineno)d): %(message)s")
        file_handler.setFormatter(logging.Formatter(file_format, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


class PerformanceLogger:
    """
    Utility class for logging how long conversion steps take.

    ``start``/``end`` pair up through ``start_times`` and suit a single
    thread; ``measure`` keeps its start time on the stack and may be used by
    many threads through one instance.
    """

    def __init__(self, logger: logging.Logger, component: str):
        """
        Initialize performance logger.

        Args:
            logger: Logger to use
            component: Component name
        """
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        End timing an operation and log the duration.

        Args:
            name: Operation name
            level: Log level

        Returns:
            float: Duration in seconds
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        return self._log_duration(name, time.perf_counter() - started, level)

    @contextmanager
    def measure(self, name: str, level: str = "DEBUG") -> Iterator[None]:
        """Time the enclosed block."""
        started = time.perf_counter()
        try:
            yield
        finally:
            self._log_duration(name, time.perf_counter() - started, level)

    def _log_duration(self, name: str, duration: float, level: str) -> float:
        self.logger.log(LOG_LEVELS.get(level.upper(), logging.DEBUG),
                        f"{self.component} {name} took {duration:.4f} seconds")
        return duration
