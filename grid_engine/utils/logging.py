"""
Logging utility module for the engine.
"""

import logging
import os
import sys
import time
from typing import Optional

LOGGER_NAME = "grid_engine"


class LogFormatter(logging.Formatter):
    """Log formatter with colored level names for the console."""

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
        self.colored = colored and sys.platform != 'win32'
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        formatted_msg = super().format(record)

        if self.colored and record.levelname in self.LEVEL_COLORS:
            level_name = record.levelname
            colored_level = f"{self.LEVEL_COLORS[level_name]}{level_name}{self.COLORS['RESET']}"
            formatted_msg = formatted_msg.replace(level_name, colored_level, 1)

        return formatted_msg


def setup_logging(log_file: Optional[str] = None, debug: bool = False) -> logging.Logger:
    """
    Set up logging for the build command.

    Handlers installed by an earlier call are replaced, so a second build in
    the same process logs to its own file.

    Args:
        log_file: Path to log file (None for no file logging)
        debug: Whether the console shows debug messages

    Returns:
        logging.Logger: The ``grid_engine`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_grid_engine", False):
            logger.removeHandler(handler)
            handler.close()

    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    console_handler.setFormatter(LogFormatter(colored=True, fmt=console_format, datefmt='%H:%M:%S'))
    _install(logger, console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        # The file always gets the full debug trace
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_format = ("%(asctime)s [%(levelname)s] %(name)s "
                       "(%(filename)s:%(lineno)d): %(message)s")
        file_handler.setFormatter(logging.Formatter(file_format, datefmt='%Y-%m-%d %H:%M:%S'))
        _install(logger, file_handler)

    return logger


def _install(logger: logging.Logger, handler: logging.Handler) -> None:
    handler._grid_engine = True
    logger.addHandler(handler)



def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception.

    Args:
        logger: Logger to use
        exception: Exception to log
        message: Message to log with the exception
    """
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """Utility class for logging how long operations take."""

    def __init__(self, logger: logging.Logger, component: str):
        """
        Initialize performance logger.

        Args:
            logger: Logger to use
            component: Component name
        """
        self.logger = logger
        self.component = component
        self.start_times = {}

    def start(self, name: str) -> None:
        """Start timing an operation."""
        self.start_times[name] = time.time()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        End timing an operation and log the duration.

        Args:
            name: Operation name
            level: Log level

        Returns:
            float: Duration in seconds
        """
        if name not in self.start_times:
            self.logger.warning(f"No start time found for {name}")
            return 0

        duration = time.time() - self.start_times.pop(name)
        log_func = getattr(self.logger, level.lower())
        log_func(f"{self.component} {name} took {duration:.4f} seconds")

        return duration
