"""
tests/test_label_format
~~~~~~~~~~~~~~~~~~~~~~~
"""

import pytest

from chmpdf import LayoutError
from chmpdf.plot.renderers._label_format import (
    fit_text,
    format_bound,
    range_captions,
    trim_number,
    truncate_name,
)


@pytest.mark.api
@pytest.mark.parametrize(
    "text, expected",
    [
        ("2.500", "2.5"),
        ("1.000", "1"),
        ("3.14159", "3.142"),
        ("-0.0001", "0"),
        ("10", "10"),
        ("abc", "abc"),
    ],
)
def test_trim_number(text, expected):
    """
    Ensures numeric text is rounded to three decimals and trailing zeros are removed.

    Args:
        text (str): Input text.
        expected (str): Trimmed text.
    """
    assert trim_number(text) == expected


@pytest.mark.api
@pytest.mark.parametrize("text", ["2.500", "0.1234", "7", "-1.50", "n/a"])
def test_trim_number_is_idempotent(text):
    """
    Ensures trimming a trimmed number changes nothing.

    Args:
        text (str): Input text.
    """
    once = trim_number(text)

    assert trim_number(once) == once


@pytest.mark.api
def test_format_bound_only_trims_when_high_bound_at_least_two():
    """
    Ensures bound captions stay untouched when the high bound is below 2.
    """
    assert format_bound("2.500", "5") == "2.5"
    assert format_bound("2.500", "2") == "2.5"
    assert format_bound("0.500", "1.9") == "0.500"


@pytest.mark.unit
def test_format_bound_rejects_unparsable_high_bound():
    """
    Ensures a non-numeric high bound is reported as a layout error.
    """
    with pytest.raises(LayoutError):
        format_bound("1", "high")


@pytest.mark.api
def test_range_captions_rounds_midpoint_half_up():
    """
    Ensures the mid caption is the rounded midpoint of the bounds.
    """
    assert range_captions("0.000", "5.000") == ("0", "3", "5")
    assert range_captions("0", "1.5") == ("0", "1", "1.5")


@pytest.mark.unit
def test_range_captions_require_bounds():
    """
    Ensures missing bounds are reported as a layout error.
    """
    with pytest.raises(LayoutError):
        range_captions(None, "5")


@pytest.mark.api
def test_fit_text_drops_five_characters_per_step():
    """
    Ensures titles are shortened five characters at a time until they fit.
    """
    measure = lambda text, size: len(text) * size

    assert fit_text("abcdefghijklmnopqrst", measure, 1.0, 20) == "abcdefghijklmnopqrst"
    assert fit_text("abcdefghijklmnopqrst", measure, 1.0, 18) == "abcdefghijklmno..."
    assert fit_text("abcdefghijklmnopqrst", measure, 1.0, 16) == "abcdefghijklm..."


@pytest.mark.unit
def test_fit_text_stops_when_text_cannot_shrink():
    """
    Ensures fitting terminates when the available width is too small for any text.
    """
    measure = lambda text, size: len(text) * size

    assert fit_text("abcdefghij", measure, 1.0, 0).endswith("...")


@pytest.mark.api
def test_truncate_name_caps_at_twenty_characters():
    """
    Ensures covariate names are capped at 20 characters plus an ellipsis.
    """
    assert truncate_name("a" * 21) == "a" * 20 + "..."
    assert truncate_name("a" * 20) == "a" * 20
