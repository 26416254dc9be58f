"""
Logging utility module for the attribute engine.
"""

import logging
import os
import sys
from typing import Optional, Union

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

ROOT_LOGGER_NAME = "html_attributes"


class LogFormatter(logging.Formatter):
    """Log formatter that colors the level name on console output."""

    RESET = '\033[0m'

    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[31m\033[1m'
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
            colored_level = f"{self.LEVEL_COLORS[record.levelname]}{record.levelname}{self.RESET}"
            formatted_msg = formatted_msg.replace(record.levelname, colored_level, 1)

        return formatted_msg


def resolve_level(level: Union[str, int], default: int) -> int:
    """
    Convert a level name or number to a logging level.

    Args:
        level: A name from LOG_LEVELS (any case) or a numeric level
        default: Returned for unknown level names

    Returns:
        int: Logging level

    Raises:
        TypeError: If level is neither a string nor an int
    """
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    if isinstance(level, str):
        return LOG_LEVELS.get(level.upper(), default)
    raise TypeError(f"Logging level must be a name or a number, got {type(level).__name__}")


def setup_logging(log_file: Optional[str] = None,
                  console_level: Union[str, int] = "WARNING",
                  file_level: Union[str, int] = "DEBUG",
                  component: Optional[str] = None,
                  colored: bool = True) -> logging.Logger:
    """
    Set up logging for the package.

    Library modules only create loggers; handlers are installed here, by the
    command line entry point or by an embedding application.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level
        file_level: File logging level
        component: Optional component name for the logger
        colored: Whether console output is colored

    Returns:
        logging.Logger: Configured logger
    """
    logger_name = ROOT_LOGGER_NAME
    if component:
        logger_name = f"{logger_name}.{component}"

    logger = logging.getLogger(logger_name)

    # If handlers already exist, assume logger is already configured
    if logger.handlers:
        return logger

    console_level_no = resolve_level(console_level, logging.WARNING)
    file_level_no = resolve_level(file_level, logging.DEBUG)
    logger.setLevel(min(console_level_no, file_level_no) if log_file else console_level_no)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level_no)
    console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    console_handler.setFormatter(LogFormatter(colored=colored, fmt=console_format, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level_no)

        # More detailed than console
        file_format = ("%(asctime)s [%(levelname)s] %(name)s "
                       "(%(filename)s:%(lineno)d): %(message)s")
        file_handler.setFormatter(logging.Formatter(file_format, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


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
