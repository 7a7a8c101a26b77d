"""
chmpdf/plot/style
~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from collections import ChainMap
from typing import Dict, Mapping, Optional, TypedDict, Union

try:
    from typing import TypeAlias
except ImportError:  # Python <3.10
    from typing_extensions import TypeAlias

# Type alias for style values
StyleValue: TypeAlias = Union[str, float, int, bool, None]


class StyleDefaults(TypedDict):
    """
    Type class for page geometry and typography defaults.
    """

    page_width: int
    page_height: int
    content_start: int
    dendro_height: int
    class_height: int
    map_size: int
    full_cell_size: int
    full_page_pad: int
    legend_row_height: int
    legend_min_y: int
    legend_pair_gap: int
    legend_second_col: int
    legend_count_right: int
    title_fontsize: float
    section_fontsize: float
    legend_name_fontsize: float
    legend_entry_fontsize: float
    label_fontsize: float
    tick_fontsize: float
    text_color: str
    rule_color: str
    separator_color: Optional[str]
    text_rotation: float
    bin_label_max_chars: int
    name_max_chars: int


DEFAULT_STYLE: StyleDefaults = {
    # US letter page in points
    "page_width": 612,
    "page_height": 792,
    # Distance from the page top to the first content row (below the header band)
    "content_start": 80,
    # Dendrogram band thickness
    "dendro_height": 50,
    # Bar-mode covariate track thickness; plot-mode tracks are three times this
    "class_height": 10,
    # Side length of the heat map on fixed-size pages
    "map_size": 400,
    # Full-resolution pages: points per matrix cell and margin beyond the map
    "full_cell_size": 5,
    "full_page_pad": 300,
    # Legend blocks
    "legend_row_height": 10,
    "legend_min_y": 50,
    "legend_pair_gap": 45,
    "legend_second_col": 300,
    "legend_count_right": 180,
    # Typography
    "title_fontsize": 14,
    "section_fontsize": 12,
    "legend_name_fontsize": 10,
    "legend_entry_fontsize": 7,
    "label_fontsize": 5,
    "tick_fontsize": 4,
    "text_color": "black",
    "rule_color": "black",
    # None defers to Branding.separator_color
    "separator_color": None,
    # Row-axis text angle as handed to the backend, in radians
    "text_rotation": -20.42,
    # Truncation limits
    "bin_label_max_chars": 25,
    "name_max_chars": 20,
}


class StyleConfig:
    """
    Class for page geometry and typography: the defaults above, shadowed by per-document
    overrides. Numeric settings only accept numeric overrides.
    """

    def __init__(
        self,
        defaults: Optional[Mapping[str, StyleValue]] = None,
        **overrides: StyleValue,
    ) -> None:
        """
        Initializes the StyleConfig instance.

        Args:
            defaults (Optional[Mapping[str, StyleValue]]): Base settings. Defaults to None.

        Kwargs:
            **overrides: Settings that shadow the defaults.
        """
        base = dict(DEFAULT_STYLE if defaults is None else defaults)
        self._settings: ChainMap[str, StyleValue] = ChainMap({}, base)
        self.update(overrides)

    def get(self, key: str, default: Optional[StyleValue] = None) -> StyleValue:
        return self._settings.get(key, default)

    def set(self, key: str, value: StyleValue) -> None:
        """
        Overrides one setting.

        Args:
            key (str): Setting name.
            value (StyleValue): New value.

        Raises:
            ValueError: If a numeric setting is given a non-numeric value.
        """
        if _is_number(self._settings.get(key)) and not _is_number(value):
            raise ValueError(f"Style setting {key!r} expects a number, got {value!r}")
        self._settings.maps[0][key] = value

    def update(self, overrides: Mapping[str, StyleValue]) -> None:
        for key, value in overrides.items():
            self.set(key, value)

    def reset(self) -> None:
        """
        Drops every override, restoring the defaults.
        """
        self._settings.maps[0].clear()

    def overrides(self) -> Dict[str, StyleValue]:
        return dict(self._settings.maps[0])

    def as_dict(self) -> Dict[str, StyleValue]:
        return dict(self._settings)

    @property
    def legend_top(self) -> int:
        """
        Returns the y coordinate where legend and histogram pages start.

        Returns:
            int: Letter page height minus the content start margin.
        """
        return int(self["page_height"]) - int(self["content_start"])

    def __getitem__(self, key: str) -> StyleValue:
        try:
            return self._settings[key]
        except KeyError:
            raise KeyError(f"Unknown style setting {key!r}") from None

    def __contains__(self, key: object) -> bool:
        return key in self._settings


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
