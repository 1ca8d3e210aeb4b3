"""
Fixed-width field helpers for access log lines
"""

ELLIPSIS = "..."

PATH_WIDTH = 40
PATH_MAX_LENGTH = 37

KILOBYTE = 1 << 10
MEGABYTE = 1 << 20
GIGABYTE = 1 << 30


def fit_string(text: str, desired_length: int, pad_left: bool = False,
               max_allowed_length: int = 0) -> str:
    """
    Pad or truncate text to a fixed width.

    Text longer than max_allowed_length (when positive) keeps its head and
    tail around a "..." marker; the marker is added on top of
    max_allowed_length, so the result is max_allowed_length + 3 characters.
    Shorter text is padded with spaces up to desired_length.
    """
    if max_allowed_length > 0 and len(text) > max_allowed_length:
        first_half = max_allowed_length // 2
        # Odd lengths give the extra character to the tail
        second_half = first_half + max_allowed_length % 2
        return text[:first_half] + ELLIPSIS + text[len(text) - second_half:]

    if len(text) < desired_length:
        padding = " " * (desired_length - len(text))
        if pad_left:
            return padding + text
        return text + padding

    return text


def format_path(path: str) -> str:
    """Normalize an empty path to root and fit it to the path column"""
    if not path:
        path = "/"
    return fit_string(path, PATH_WIDTH, False, PATH_MAX_LENGTH)


def format_bytes(size: int) -> str:
    """Human readable byte count using 1024-based units (b, Kb, Mb, Gb)"""
    if size >= GIGABYTE:
        value, unit = size / GIGABYTE, "Gb"
    elif size >= MEGABYTE:
        value, unit = size / MEGABYTE, "Mb"
    elif size >= KILOBYTE:
        value, unit = size / KILOBYTE, "Kb"
    else:
        value, unit = float(size), "b"
    return f"{value:.2f}{unit}"
