"""
Logging setup for the EDR weather client.

Console output for users, an optional detailed log file for diagnostics,
and partial-data reporting that reaches both the log and Python warnings.
"""

import logging
import os
import time
import warnings
from pathlib import Path
from typing import Optional

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s"
CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DEFAULT_LOG_FILE = "logs/edr_weather.log"


def _resolve_level(log_level: Optional[str]) -> int:
    level = getattr(logging, (log_level or os.getenv("LOG_LEVEL") or "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(
    name: str = "edr_weather",
    log_file: Optional[str] = None,
    log_level: Optional[str] = None
) -> logging.Logger:
    """
    Configure the application logger.

    Console messages go out at INFO and above. When a log file is in use it
    receives everything down to DEBUG.

    Args:
        name: Logger name
        log_file: Log file path. None reads LOG_FILE (default logs/edr_weather.log);
                  an empty string disables file logging
        log_level: Logger level name. None reads LOG_LEVEL (default INFO)

    Returns:
        Configured logger instance
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)

    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(log_level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def warn_partial(logger: logging.Logger, message: str) -> None:
    """Log a partial-data gap at WARNING and emit a PartialDataWarning."""
    from .exceptions import PartialDataWarning

    logger.warning(message)
    warnings.warn(message, PartialDataWarning, stacklevel=3)


class LoggerContext:
    """
    Log the start and outcome of an operation with its duration.

    Example:
        with LoggerContext(logger, "daily forecast for Helsinki"):
            ...
    """

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.duration: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self) -> "LoggerContext":
        self._started = time.perf_counter()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.duration = time.perf_counter() - (self._started or time.perf_counter())

        if exc_type is None:
            self.logger.info(f"Completed {self.operation} in {self.duration:.2f}s")
        else:
            self.logger.error(
                f"Failed {self.operation} after {self.duration:.2f}s: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        return False
