"""
Core utilities for the EDR weather client.

Provides configuration management, logging, errors and date handling.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import EdrError, FetchError, MalformedResponseError, PartialDataWarning

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "EdrError",
    "FetchError",
    "MalformedResponseError",
    "PartialDataWarning",
]
