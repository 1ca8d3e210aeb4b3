"""
Test ANSI color annotation and status colors
"""
import pytest

from prettylog.colors import Color, annotate, color_for_status, colorize_status


def test_annotate_wraps_text_with_color_and_reset():
    assert annotate("GET", Color.YELLOW) == "\033[0;33mGET\033[0m"


def test_annotate_empty_text():
    assert annotate("", Color.BLUE) == "\033[0;34m\033[0m"


def test_annotate_rejects_raw_escape_strings():
    with pytest.raises(TypeError):
        annotate("GET", "\033[0;33m")


@pytest.mark.parametrize("status_code,expected", [
    (199, Color.YELLOW),
    (200, Color.GREEN),
    (299, Color.GREEN),
    (300, Color.CYAN),
    (399, Color.CYAN),
    (400, Color.RED),
    (404, Color.RED),
    (500, Color.MAGENTA),
    (999, Color.MAGENTA),
    (100, Color.YELLOW),
    (0, Color.YELLOW),
    (-1, Color.YELLOW),
])
def test_color_for_status(status_code, expected):
    assert color_for_status(status_code) is expected


def test_colorize_status():
    assert colorize_status(404) == Color.RED.value + "404" + Color.RESET.value
