"""
Logger configuration and setup for the repo picker.
"""

import logging
import sys
from typing import Optional, Dict
from dataclasses import dataclass

from ..config import LoggingConfig
from .log_formatter import StructuredFormatter, ColoredFormatter
from .log_handler import RotatingFileHandler, ConsoleHandler


@dataclass
class LoggerConfig:
    """Configuration for logging system."""
    level: str = "WARNING"
    file_path: Optional[str] = None
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_file_size: int = 10  # MB
    backup_count: int = 5
    enable_console: bool = True
    enable_structured: bool = False
    enable_colors: bool = True

    @classmethod
    def from_app_config(cls, config: LoggingConfig) -> 'LoggerConfig':
        return cls(
            level=config.level,
            file_path=config.file,
            format_string=config.format,
            max_file_size=config.max_file_size,
            backup_count=config.backup_count,
            enable_structured=config.structured
        )


class LoggingManager:
    """
    Centralized logging manager.

    Console output goes to stderr so diagnostics never interleave with the
    repository menu on stdout.
    """

    THIRD_PARTY_LOGGERS = ('urllib3', 'requests', 'git')

    def __init__(self):
        self._handlers: Dict[str, logging.Handler] = {}
        self._configured = False
        self.config: Optional[LoggerConfig] = None

    def setup_logging(self, config: Optional[LoggerConfig] = None) -> None:
        """
        Set up the logging system with the specified configuration.

        Args:
            config: Logging configuration (defaults are used if not provided)
        """
        if self._configured:
            return

        config = config or LoggerConfig()
        self.config = config

        root_logger = logging.getLogger()
        root_logger.setLevel(self._get_log_level(config.level))

        if config.enable_console:
            console_handler = self._create_console_handler(config)
            root_logger.addHandler(console_handler)
            self._handlers['console'] = console_handler

        if config.file_path:
            file_handler = self._create_file_handler(config)
            root_logger.addHandler(file_handler)
            self._handlers['file'] = file_handler

        # Reduce noise from third-party libraries unless debugging
        third_party_level = logging.DEBUG if config.level.upper() == 'DEBUG' else logging.WARNING
        for name in self.THIRD_PARTY_LOGGERS:
            logging.getLogger(name).setLevel(third_party_level)

        logging.getLogger(__name__).debug(f"Logging system initialized with level: {config.level}")
        self._configured = True

    def _create_console_handler(self, config: LoggerConfig) -> logging.Handler:
        """Create console handler with appropriate formatter."""
        handler = ConsoleHandler()
        handler.setLevel(self._get_log_level(config.level))

        if config.enable_structured:
            formatter = StructuredFormatter()
        elif config.enable_colors and sys.stderr.isatty():
            formatter = ColoredFormatter(config.format_string)
        else:
            formatter = logging.Formatter(config.format_string)

        handler.setFormatter(formatter)
        return handler

    def _create_file_handler(self, config: LoggerConfig) -> logging.Handler:
        """Create rotating file handler."""
        handler = RotatingFileHandler(
            filename=config.file_path,
            maxBytes=config.max_file_size * 1024 * 1024,
            backupCount=config.backup_count,
            encoding='utf-8'
        )
        handler.setLevel(self._get_log_level(config.level))

        if config.enable_structured:
            handler.setFormatter(StructuredFormatter())
        else:
            handler.setFormatter(logging.Formatter(config.format_string))
        return handler

    def _get_log_level(self, level_str: str) -> int:
        """Convert string log level to logging constant."""
        level_mapping = {
            'DEBUG': logging.DEBUG,
            'INFO': logging.INFO,
            'WARNING': logging.WARNING,
            'ERROR': logging.ERROR,
            'CRITICAL': logging.CRITICAL
        }
        return level_mapping.get(level_str.upper(), logging.WARNING)

    def close_handlers(self) -> None:
        """Detach and close every handler this manager installed."""
        root_logger = logging.getLogger()
        for handler in self._handlers.values():
            root_logger.removeHandler(handler)
            handler.close()

        self._handlers.clear()
        self._configured = False


# Global logging manager instance
_logging_manager = LoggingManager()


def setup_logging(config: Optional[LoggerConfig] = None) -> None:
    """
    Set up the global logging system.

    Args:
        config: Logging configuration
    """
    _logging_manager.setup_logging(config)


def close_logging() -> None:
    """Close logging system and clean up resources."""
    _logging_manager.close_handlers()
