"""
Per-cycle records passed from the composer to line formatters
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RequestInfo:
    """What the composer needs to know about an incoming request"""

    method: str
    path: str
    content_length: Optional[str] = None

    @property
    def bytes_in(self) -> int:
        """Declared body size; missing or malformed headers count as 0"""
        if self.content_length is None:
            return 0
        try:
            value = int(self.content_length.strip())
        except ValueError:
            return 0
        return max(value, 0)


@dataclass(frozen=True)
class ResponseInfo:
    status_code: int
    size_bytes: int = 0


@dataclass(frozen=True)
class LogEvent:
    """One completed request/response cycle"""

    timestamp: datetime
    method: str
    path: str
    status_code: int
    duration_ms: int
    bytes_in: int
    bytes_out: int
    error: Optional[str] = None
