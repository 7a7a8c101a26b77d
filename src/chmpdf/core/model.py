"""
chmpdf/core/model
~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..util.images import ImageSource

# Axis item marked for exclusion from rendering and tallies
CUT_VALUE = "!CUT!"
# Separator of the display label from its suffix, e.g. "TP53|chr17"
PIPE = "|"
NA_VALUES = frozenset({"", "NA", "N/A", "na", "n/a", "NaN", "nan", "null", "NULL", "None", "-", "?"})

BAR = "bar"
PLOT = "plot"
DISCRETE = "discrete"
CONTINUOUS = "continuous"


def is_missing(value: Any) -> bool:
    """
    Checks whether a covariate value counts as missing.

    Args:
        value (Any): Raw covariate value.

    Returns:
        bool: True for None, NaN and the configured NA spellings.
    """
    if isinstance(value, str):
        return value in NA_VALUES
    return bool(pd.isna(value))


def display_label(label: Optional[str]) -> Optional[str]:
    """
    Returns the display form of an axis label, or None if nothing should be drawn.

    Args:
        label (Optional[str]): Raw axis label.

    Returns:
        Optional[str]: Label with any pipe-delimited suffix removed; None for missing or cut items.
    """
    if label is None or label == CUT_VALUE:
        return None
    pipe_idx = label.find(PIPE)
    if pipe_idx > 0:
        label = label[:pipe_idx]
    return label


@dataclass(frozen=True)
class BinningSpec:
    """
    Data class for a covariate binning specification.

    Discrete specs hold category labels; continuous specs hold ascending numeric
    boundaries (as strings, exactly as they should appear in the legend).
    """

    kind: str
    breaks: Tuple[str, ...]

    def __post_init__(self) -> None:
        if self.kind not in {DISCRETE, CONTINUOUS}:
            raise ValueError(f"binning kind must be '{DISCRETE}' or '{CONTINUOUS}'")
        object.__setattr__(self, "breaks", tuple(str(b) for b in self.breaks))

    @property
    def n_breaks(self) -> int:
        return len(self.breaks)

    @property
    def n_bins(self) -> int:
        # Every spec carries a trailing "Missing Value" bin
        return len(self.breaks) + 1

    @classmethod
    def discrete(cls, breaks: Sequence[str]) -> BinningSpec:
        return cls(DISCRETE, tuple(breaks))

    @classmethod
    def continuous(cls, boundaries: Sequence[Any]) -> BinningSpec:
        return cls(CONTINUOUS, tuple(boundaries))


@dataclass(frozen=True)
class CovariateTrack:
    """
    Data class for one covariate side-annotation track aligned to an axis.
    """

    name: str
    binning: BinningSpec
    values: Tuple[Optional[str], ...] = ()
    mode: str = BAR
    image: Optional[ImageSource] = None
    legend_image: Optional[ImageSource] = None
    low_bound: Optional[str] = None
    high_bound: Optional[str] = None
    visible: bool = True

    def __post_init__(self) -> None:
        # Validation
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("covariate `name` must be a non-empty string")
        if self.mode not in {BAR, PLOT}:
            raise ValueError(f"covariate `mode` must be '{BAR}' or '{PLOT}'")
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def is_bar(self) -> bool:
        return self.mode == BAR

    def height(self, unit: int) -> int:
        """
        Returns the track thickness in page units.

        Args:
            unit (int): Height of a bar-mode track.

        Returns:
            int: `unit` for bar tracks, three times `unit` for plot tracks.
        """
        return unit if self.is_bar else unit * 3

    @classmethod
    def from_series(
        cls,
        name: str,
        series: pd.Series,
        binning: BinningSpec,
        **kwargs: Any,
    ) -> CovariateTrack:
        """
        Builds a track from a pandas Series of per-item covariate values.

        Args:
            name (str): Track name.
            series (pd.Series): Values in axis order.
            binning (BinningSpec): Binning specification.

        Kwargs:
            **kwargs: Remaining CovariateTrack fields. For plot tracks without explicit
                bounds, `low_bound`/`high_bound` default to the numeric range of `series`.

        Returns:
            CovariateTrack: New track.
        """
        values = tuple(None if pd.isna(v) else str(v) for v in series.tolist())
        if kwargs.get("mode", BAR) == PLOT:
            numeric = pd.to_numeric(series, errors="coerce")
            finite = numeric[np.isfinite(numeric)]
            if len(finite) > 0:
                kwargs.setdefault("low_bound", str(float(finite.min())))
                kwargs.setdefault("high_bound", str(float(finite.max())))
        return cls(name=name, binning=binning, values=values, **kwargs)


@dataclass(frozen=True)
class AxisMetadata:
    """
    Data class for the row or column axis of the heat map.
    """

    labels: Tuple[Optional[str], ...] = ()
    dendrogram: Optional[ImageSource] = None
    tracks: Tuple[CovariateTrack, ...] = ()
    top_items_image: Optional[ImageSource] = None
    # (axis index, label) pairs; a None label reserves the slot without text
    top_items: Tuple[Tuple[int, Optional[str]], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))
        object.__setattr__(self, "tracks", tuple(self.tracks))
        object.__setattr__(self, "top_items", tuple((int(i), s) for i, s in self.top_items))

    @property
    def length(self) -> int:
        return len(self.labels)

    @property
    def has_dendrogram(self) -> bool:
        return self.dendrogram is not None

    @property
    def has_top_items(self) -> bool:
        return self.top_items_image is not None

    def visible_tracks(self) -> Tuple[CovariateTrack, ...]:
        return tuple(t for t in self.tracks if t.visible)

    def track_total(self, unit: int) -> int:
        """
        Returns the summed thickness of the visible tracks.

        Args:
            unit (int): Height of a bar-mode track.

        Returns:
            int: Cumulative track thickness.
        """
        return sum(t.height(unit) for t in self.visible_tracks())


@dataclass(frozen=True)
class DistributionSummary:
    """
    Data class for the value distribution of the first matrix layer.
    """

    missing_count: int
    counts: Tuple[int, ...]
    thresholds: Tuple[float, ...]
    legend_image: Optional[ImageSource] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "counts", tuple(int(c) for c in self.counts))
        object.__setattr__(self, "thresholds", tuple(float(t) for t in self.thresholds))
        if not self.counts:
            raise ValueError("distribution `counts` must not be empty")

    @property
    def max_count(self) -> int:
        return max(max(self.counts), int(self.missing_count))


@dataclass(frozen=True)
class MatrixLayer:
    """
    Data class for one rendered data layer of the heat map.
    """

    image: ImageSource
    distribution: Optional[DistributionSummary] = None


@dataclass(frozen=True)
class Branding:
    """
    Data class for the fixed header/footer artwork drawn on every page.
    """

    header_logo: Optional[ImageSource] = None
    badge_logo: Optional[ImageSource] = None
    footer_logo: Optional[ImageSource] = None
    separator_color: str = "#c8102e"


@dataclass(frozen=True)
class RenderRequest:
    """
    Data class for the self-contained input bundle of one document render.
    """

    output_dir: str
    name: str
    layers: Tuple[MatrixLayer, ...]
    row: AxisMetadata = field(default_factory=AxisMetadata)
    col: AxisMetadata = field(default_factory=AxisMetadata)
    full_resolution: bool = False
    branding: Branding = field(default_factory=Branding)

    def __post_init__(self) -> None:
        object.__setattr__(self, "layers", tuple(self.layers))
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("document `name` must be a non-empty string")

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir) / f"{self.name}.pdf"

    @property
    def has_legends(self) -> bool:
        return bool(self.row.visible_tracks()) or bool(self.col.visible_tracks())

    @property
    def distribution(self) -> Optional[DistributionSummary]:
        if not self.layers:
            return None
        return self.layers[0].distribution
