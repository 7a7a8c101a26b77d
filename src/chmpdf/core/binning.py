"""
chmpdf/core/binning
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import LayoutError
from .model import CONTINUOUS, CUT_VALUE, CovariateTrack, is_missing

MISSING_LABEL = "Missing Value"
DEFAULT_MAX_LABEL_CHARS = 25


@dataclass(frozen=True)
class BinTally:
    """
    Data class for per-bin covariate counts in bin order (the last bin holds missing values).
    """

    labels: Tuple[str, ...]
    counts: Tuple[int, ...]
    cut_count: int = 0
    unmatched_count: int = 0

    @property
    def missing_count(self) -> int:
        return self.counts[-1]

    @property
    def total(self) -> int:
        return sum(self.counts)

    def display_rows(self) -> List[Tuple[int, str, int]]:
        """
        Returns legend rows as (slot, label, count), where slot counts rows up from the
        bottom of the block. Slots run in reverse bin order, so the first bin is drawn at
        the top and the missing bin at the bottom.

        Returns:
            List[Tuple[int, str, int]]: Rows in bin order.
        """
        n = len(self.counts)
        return [(n - 1 - k, label, count) for k, (label, count) in enumerate(zip(self.labels, self.counts))]

    def to_frame(self) -> pd.DataFrame:
        """
        Returns the tally as a DataFrame with columns `label` and `count`, in bin order.

        Returns:
            pd.DataFrame: Tally table.
        """
        return pd.DataFrame({"label": list(self.labels), "count": list(self.counts)})


def truncate_bin_label(label: str, limit: int = DEFAULT_MAX_LABEL_CHARS) -> str:
    """
    Cuts a bin label to `limit` characters followed by an ellipsis.

    Args:
        label (str): Bin label.
        limit (int): Maximum number of characters kept. Defaults to 25.

    Returns:
        str: Display label.
    """
    return label[:limit] + "..." if len(label) > limit else label


def _parse_float(value: Any, what: str) -> float:
    """
    Parses a numeric covariate token.

    Args:
        value (Any): Token to parse.
        what (str): Description used in the error message.

    Returns:
        float: Parsed value.

    Raises:
        LayoutError: If the token is not numeric.
    """
    try:
        return float(str(value).strip())
    except ValueError as exc:
        raise LayoutError(f"Unparsable {what} {value!r}") from exc


def _tally_discrete(
    breaks: Sequence[str],
    values: Sequence[Any],
) -> Tuple[np.ndarray, int, int]:
    """
    Counts discrete covariate values per break label.

    Args:
        breaks (Sequence[str]): Category labels.
        values (Sequence[Any]): Raw covariate values.

    Returns:
        Tuple[np.ndarray, int, int]: (counts incl. trailing missing bin, cut count, unmatched count).
    """
    counts = np.zeros(len(breaks) + 1, dtype=int)
    # First occurrence wins for duplicated break labels
    index: Dict[str, int] = {}
    for k, label in enumerate(breaks):
        index.setdefault(label, k)
    cut = 0
    unmatched = 0
    for value in values:
        if is_missing(value):
            counts[-1] += 1
        elif value == CUT_VALUE:
            cut += 1
        else:
            k = index.get(str(value))
            if k is None:
                unmatched += 1
            else:
                counts[k] += 1
    return counts, cut, unmatched


def _tally_continuous(
    boundaries: Sequence[str],
    values: Sequence[Any],
) -> Tuple[np.ndarray, int, int]:
    """
    Counts continuous covariate values per boundary bin.

    A value lands in the first bin whose boundary it does not exceed; values above
    the last boundary land in the last boundary bin. Tokens that parse to NaN, such
    as "NAN", count as missing.

    Args:
        boundaries (Sequence[str]): Ascending numeric boundaries.
        values (Sequence[Any]): Raw covariate values.

    Returns:
        Tuple[np.ndarray, int, int]: (counts incl. trailing missing bin, cut count, unmatched count).

    Raises:
        LayoutError: If a boundary or value is not numeric, or boundaries are NaN or not ascending.
    """
    bounds = np.array([_parse_float(b, "continuous break") for b in boundaries], dtype=float)
    if np.any(np.isnan(bounds)) or np.any(np.diff(bounds) < 0):
        raise LayoutError(f"Continuous breaks must be ascending, got {list(boundaries)}")
    n = len(bounds)
    missing = 0
    cut = 0
    numeric: List[float] = []
    for value in values:
        if is_missing(value):
            missing += 1
        elif value == CUT_VALUE:
            cut += 1
        else:
            parsed = _parse_float(value, "covariate value")
            if np.isnan(parsed):
                missing += 1
            else:
                numeric.append(parsed)

    counts = np.zeros(n + 1, dtype=int)
    counts[n] = missing
    if n == 0:
        return counts, cut, len(numeric)
    # searchsorted(side="left") yields the first k with value <= bounds[k]
    idx = np.searchsorted(bounds, np.asarray(numeric, dtype=float), side="left")
    idx = np.minimum(idx, n - 1)
    counts[:n] += np.bincount(idx, minlength=n)
    return counts, cut, 0


def classify(
    track: CovariateTrack,
    values: Optional[Sequence[Any]] = None,
    *,
    max_label_chars: int = DEFAULT_MAX_LABEL_CHARS,
) -> BinTally:
    """
    Classifies covariate values into the track's bins and counts them.

    Args:
        track (CovariateTrack): Track providing the binning specification.
        values (Optional[Sequence[Any]]): Values to classify. Defaults to the track's own values.

    Kwargs:
        max_label_chars (int): Bin label truncation limit. Defaults to 25.

    Returns:
        BinTally: Labels and counts in bin order, missing bin last.

    Raises:
        LayoutError: If a continuous break or value is not numeric.
    """
    if values is None:
        values = track.values
    spec = track.binning
    # Discrete values that match no break are dropped from the counts
    if spec.kind == CONTINUOUS:
        counts, cut, unmatched = _tally_continuous(spec.breaks, values)
    else:
        counts, cut, unmatched = _tally_discrete(spec.breaks, values)

    labels = tuple(truncate_bin_label(b, max_label_chars) for b in spec.breaks) + (MISSING_LABEL,)
    return BinTally(
        labels=labels,
        counts=tuple(int(c) for c in counts),
        cut_count=cut,
        unmatched_count=unmatched,
    )
