"""
chmpdf/plot/renderers/_label_format
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Tuple

from ...core.errors import LayoutError
from ...core.layout import round_half_up

ELLIPSIS = "..."
# Characters dropped per step when fitting a title to the available width
FIT_STEP = 5

TextMeasure = Callable[[str, float], float]


def trim_number(text: str, max_decimals: int = 3) -> str:
    """
    Caps decimal precision and trims trailing zeros and a trailing decimal point.

    Args:
        text (str): Numeric text, e.g. "2.500".
        max_decimals (int): Maximum number of decimal places. Defaults to 3.

    Returns:
        str: Trimmed text ("2.5"); non-numeric text is returned unchanged.
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        return text
    if not math.isfinite(value):
        return text
    out = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
    return "0" if out == "-0" else out


def _parse_bound(text: Optional[str], what: str) -> float:
    """
    Parses a covariate bound.

    Args:
        text (Optional[str]): Bound text.
        what (str): Bound name for the error message.

    Returns:
        float: Parsed bound.

    Raises:
        LayoutError: If the bound is missing or not numeric.
    """
    try:
        return float(text)
    except (TypeError, ValueError) as exc:
        raise LayoutError(f"Unparsable {what} bound {text!r}") from exc


def format_bound(text: str, high_bound: Optional[str]) -> str:
    """
    Formats a bound caption; trimming applies only when the high bound is at least 2.

    Args:
        text (str): Caption text.
        high_bound (Optional[str]): High bound of the covariate.

    Returns:
        str: Caption text.

    Raises:
        LayoutError: If `high_bound` is not numeric.
    """
    if _parse_bound(high_bound, "high") >= 2:
        return trim_number(text)
    return text


def range_captions(low_bound: Optional[str], high_bound: Optional[str]) -> Tuple[str, str, str]:
    """
    Builds the low/mid/high captions of a plot-mode covariate track.

    Args:
        low_bound (Optional[str]): Low bound text.
        high_bound (Optional[str]): High bound text.

    Returns:
        Tuple[str, str, str]: (low, mid, high) captions.

    Raises:
        LayoutError: If a bound is not numeric.
    """
    low = _parse_bound(low_bound, "low")
    high = _parse_bound(high_bound, "high")
    mid = str(round_half_up(low + (high - low) / 2))
    return (
        format_bound(str(low_bound), high_bound),
        format_bound(mid, high_bound),
        format_bound(str(high_bound), high_bound),
    )


def fit_text(text: str, measure: TextMeasure, font_size: float, available: float) -> str:
    """
    Shortens text until its measured width fits, five characters at a time.

    Args:
        text (str): Text to fit.
        measure (TextMeasure): Callable returning the width of (text, font_size).
        font_size (float): Font size.
        available (float): Available width.

    Returns:
        str: Text ending in an ellipsis when shortened.
    """
    while measure(text, font_size) > available:
        shorter = text[:-FIT_STEP] + ELLIPSIS
        if len(shorter) >= len(text):
            return shorter
        text = shorter
    return text


def truncate_name(name: str, limit: int = 20) -> str:
    """
    Caps a covariate name at `limit` characters followed by an ellipsis.

    Args:
        name (str): Covariate name.
        limit (int): Maximum number of characters kept. Defaults to 20.

    Returns:
        str: Display name.
    """
    return name[:limit] + ELLIPSIS if len(name) > limit else name
