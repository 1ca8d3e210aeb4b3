"""
Test fixed-width fitting, path and byte formatting
"""
import pytest

from prettylog.formatting import fit_string, format_bytes, format_path


@pytest.mark.parametrize("text,desired", [
    ("GET", 3),
    ("DELETE", 2),
    ("", 0),
    ("already long enough", 5),
])
def test_fit_returns_text_when_long_enough(text, desired):
    assert fit_string(text, desired, False, 0) == text
    assert fit_string(text, desired, True, 0) == text


def test_fit_pads_right():
    result = fit_string("GET", 7, False, 0)
    assert result == "GET    "
    assert len(result) == 7


def test_fit_pads_left():
    result = fit_string("12ms", 7, True, 0)
    assert result == "   12ms"
    assert len(result) == 7


@pytest.mark.parametrize("max_allowed", [1, 2, 5, 10, 37])
def test_fit_truncates_with_centered_ellipsis(max_allowed):
    text = "".join(chr(ord("a") + i % 26) for i in range(60))
    first = max_allowed // 2
    second = max_allowed - first

    result = fit_string(text, 40, False, max_allowed)

    assert len(result) == max_allowed + 3
    assert result == text[:first] + "..." + text[len(text) - second:]


def test_fit_odd_max_gives_tail_the_extra_character():
    assert fit_string("abcdefghij", 0, False, 5) == "ab...hij"


def test_fit_truncation_wins_over_padding():
    assert fit_string("abcdefghij", 40, True, 4) == "ab...ij"


def test_fit_within_max_is_padded():
    assert fit_string("/short", 10, False, 37) == "/short    "


def test_fit_is_idempotent_on_fitted_text():
    once = fit_string("POST", 7, False, 0)
    assert fit_string(once, 7, False, 0) == once

    path = format_path("/users")
    assert fit_string(path, 40, False, 0) == path


def test_format_path_root_for_empty():
    result = format_path("")
    assert result == "/" + " " * 39
    assert len(result) == 40


def test_format_path_truncates_long_paths():
    result = format_path("a" * 100)

    assert len(result) == 40
    assert result.count("...") == 1
    assert result == "a" * 18 + "..." + "a" * 19


def test_format_path_keeps_exactly_37_characters():
    path = "/" + "x" * 36
    assert format_path(path) == path + "   "


@pytest.mark.parametrize("size,expected", [
    (0, "0.00b"),
    (500, "500.00b"),
    (1023, "1023.00b"),
    (1024, "1.00Kb"),
    (2048, "2.00Kb"),
    (1536, "1.50Kb"),
    (1048576, "1.00Mb"),
    (1073741824, "1.00Gb"),
    (5 * 1073741824, "5.00Gb"),
])
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected
