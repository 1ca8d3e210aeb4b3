"""
Line formatters: the pretty colorized access line and the JSON baseline.

The formatter is picked once from LogStyle when the composer is built.
"""
import json
from enum import Enum

from prettylog.colors import Color, annotate, colorize_status
from prettylog.events import LogEvent
from prettylog.formatting import fit_string, format_bytes, format_path

METHOD_WIDTH = 7
DURATION_WIDTH = 7
BYTES_WIDTH = 9


class LogStyle(str, Enum):
    PRETTY = "pretty"
    JSON = "json"


class PrettyLineFormatter:
    """Fixed-width, colorized single line per cycle"""

    time_format = "%H:%M:%S"

    def format(self, event: LogEvent) -> str:
        now = event.timestamp.strftime(self.time_format)
        method = annotate(fit_string(event.method, METHOD_WIDTH), Color.YELLOW)
        path = format_path(event.path)
        status = colorize_status(event.status_code)
        duration = annotate(
            fit_string(f"{event.duration_ms}ms", DURATION_WIDTH, pad_left=True),
            Color.BLUE
        )
        bytes_in = "In: " + annotate(
            fit_string(format_bytes(event.bytes_in), BYTES_WIDTH, pad_left=True),
            Color.MAGENTA
        )
        bytes_out = "Out: " + annotate(
            fit_string(format_bytes(event.bytes_out), BYTES_WIDTH, pad_left=True),
            Color.CYAN
        )

        return f"{now} {method} → {path} ({status}) {duration} [ {bytes_in} | {bytes_out} ]"


class JsonLineFormatter:
    """Plain JSON line, one object per cycle (can be picked up by log aggregators)"""

    def format(self, event: LogEvent) -> str:
        log_data = {
            "time": event.timestamp.isoformat(timespec="seconds"),
            "method": event.method,
            "path": event.path or "/",
            "status": event.status_code,
            "dur_ms": event.duration_ms,
            "bytes_in": event.bytes_in,
            "bytes_out": event.bytes_out,
        }
        if event.error is not None:
            log_data["error"] = event.error
        return json.dumps(log_data, ensure_ascii=False)


_FORMATTERS = {
    LogStyle.PRETTY: PrettyLineFormatter,
    LogStyle.JSON: JsonLineFormatter,
}


def select_formatter(style):
    """Return a formatter instance for a LogStyle (or its string value)"""
    return _FORMATTERS[LogStyle(style)]()
