"""
ANSI colors for terminal access logs
"""
from enum import Enum


class Color(Enum):
    """Closed palette of ANSI color codes"""

    RESET = "\033[0m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"
    BLUE = "\033[0;34m"
    MAGENTA = "\033[0;35m"
    CYAN = "\033[0;36m"


def annotate(text: str, color: Color) -> str:
    """Wrap text in the given color, followed by a reset"""
    if not isinstance(color, Color):
        raise TypeError(f"color must be a Color, got {type(color).__name__}")
    return color.value + text + Color.RESET.value


def color_for_status(status_code: int) -> Color:
    """Pick the palette color for an HTTP status code"""
    if 200 <= status_code < 300:
        return Color.GREEN
    if 300 <= status_code < 400:
        return Color.CYAN
    if 400 <= status_code < 500:
        return Color.RED
    if status_code >= 500:
        return Color.MAGENTA
    # Informational or invalid codes
    return Color.YELLOW


def colorize_status(status_code: int) -> str:
    return annotate(str(status_code), color_for_status(status_code))
