"""
Logging system for the repo picker.
"""

from .logger_config import setup_logging, close_logging, LoggerConfig
from .log_formatter import StructuredFormatter, ColoredFormatter
from .log_handler import RotatingFileHandler, ConsoleHandler

__all__ = [
    "setup_logging",
    "close_logging",
    "LoggerConfig",
    "StructuredFormatter",
    "ColoredFormatter",
    "RotatingFileHandler",
    "ConsoleHandler"
]
