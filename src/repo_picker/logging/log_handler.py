"""
Log handlers used by the logging manager.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, TextIO


class RotatingFileHandler(logging.handlers.RotatingFileHandler):
    """
    Rotating file handler that creates its parent directory.
    """

    def __init__(
        self,
        filename: str,
        mode: str = 'a',
        maxBytes: int = 0,
        backupCount: int = 0,
        encoding: Optional[str] = None,
        delay: bool = False
    ):
        Path(filename).parent.mkdir(parents=True, exist_ok=True)
        super().__init__(filename, mode, maxBytes, backupCount, encoding, delay)


class ConsoleHandler(logging.StreamHandler):
    """
    Console handler writing to stderr unless told otherwise.

    The stream is looked up at emit time when none was given, so output
    follows ``sys.stderr`` if it is swapped after setup.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._follow_stderr = stream is None
        super().__init__(stream if stream is not None else sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        if self._follow_stderr:
            self.stream = sys.stderr
        super().emit(record)
