"""
Output sinks - where composed access lines end up.

A sink is any callable taking one line. It must write the whole line in one
go; concurrent cycles share the same sink.
"""
import logging
import sys
import threading
from typing import Callable, Optional, TextIO

from prettylog.logging import ACCESS_LOGGER_NAME

LineSink = Callable[[str], None]


class LoggerSink:
    """Emit lines through a logging.Logger (handlers serialize writes)"""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger(ACCESS_LOGGER_NAME)
        self.level = level

    def __call__(self, line: str) -> None:
        self.logger.log(self.level, line)


class StreamSink:
    """Write lines to a text stream, one locked write per line"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self._lock = threading.Lock()

    def __call__(self, line: str) -> None:
        # Resolve stdout lazily so redirected/captured streams are honoured
        stream = self.stream or sys.stdout
        with self._lock:
            stream.write(line + "\n")
            stream.flush()
