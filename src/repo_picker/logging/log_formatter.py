"""
Custom log formatters for structured and colored logging.
"""

import json
import logging
from datetime import datetime
from typing import Dict, Any, Optional


class StructuredFormatter(logging.Formatter):
    """
    Structured JSON formatter for machine-readable logs.

    Each record becomes one JSON object per line.
    """

    STANDARD_FIELDS = {
        'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
        'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
        'thread', 'threadName', 'processName', 'process', 'getMessage',
        'exc_info', 'exc_text', 'stack_info', 'message', 'taskName'
    }

    def __init__(self, include_extra: bool = True):
        """
        Initialize structured formatter.

        Args:
            include_extra: Whether to include extra fields from log records
        """
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if self.include_extra:
            extra_fields = self._extract_extra_fields(record)
            if extra_fields:
                log_entry["extra"] = extra_fields

        return json.dumps(log_entry, default=str, ensure_ascii=False)

    def _extract_extra_fields(self, record: logging.LogRecord) -> Dict[str, Any]:
        """Extract fields passed through ``extra=`` from a log record."""
        return {
            key: value for key, value in record.__dict__.items()
            if key not in self.STANDARD_FIELDS and not key.startswith('_')
        }


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output with ANSI color codes.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m',
        'BOLD': '\033[1m'
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        super().__init__(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        level_color = self.COLORS.get(record.levelname, '')
        if not level_color:
            return formatted

        reset_color = self.COLORS['RESET']
        level_name = record.levelname
        bold_level = f"{self.COLORS['BOLD']}{level_name}{reset_color}{level_color}"
        formatted = formatted.replace(level_name, bold_level, 1)

        return f"{level_color}{formatted}{reset_color}"
