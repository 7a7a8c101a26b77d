"""
chmpdf/core/layout
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Dict, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .model import AxisMetadata
    from ..plot.style import StyleConfig

# Left page margin of the row dendrogram and the gap before the heat map
LEFT_MARGIN = 10
MAP_GAP = 2
# Baseline nudges applied to top-item callouts on each axis
ROW_CALLOUT_NUDGE = 2
COL_CALLOUT_NUDGE = -2


@dataclass(frozen=True)
class Rect:
    """
    Data class for an axis-aligned rectangle in page units (origin bottom-left, y up).
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.top

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class TextPlacement:
    """
    Data class for a text run anchored at its baseline start.
    """

    text: str
    x: float
    y: float
    rotated: bool = False


@dataclass(frozen=True)
class LayoutContext:
    """
    Data class for the running origin of one page's composition.

    `col_origin` is the x of the heat map's left edge. `row_origin` starts at the top
    of the content area and moves down as bands are placed; after the heat map is
    positioned it is the y of the map's bottom edge. `row_class_adjustment` is the
    summed thickness of the row covariate tracks, computed once per page.
    """

    col_origin: int
    row_origin: int
    row_class_adjustment: int = 0

    def moved(self, *, col: int = 0, row: int = 0) -> LayoutContext:
        """
        Returns a copy with the origins shifted.

        Kwargs:
            col (int): Horizontal shift. Defaults to 0.
            row (int): Vertical shift. Defaults to 0.

        Returns:
            LayoutContext: Shifted context.
        """
        return replace(self, col_origin=self.col_origin + col, row_origin=self.row_origin + row)


def round_half_up(value: float) -> int:
    """
    Rounds to the nearest integer, halves upwards.

    Args:
        value (float): Value to round.

    Returns:
        int: Rounded value.
    """
    return int(math.floor(value + 0.5))


def starting_positions(
    row_axis: AxisMetadata,
    page_height: int,
    style: StyleConfig,
) -> LayoutContext:
    """
    Computes the starting origin of a heat map page.

    Args:
        row_axis (AxisMetadata): Row axis metadata (tracks and dendrogram shift the map right).
        page_height (int): Height of the page being composed.
        style (StyleConfig): Page geometry.

    Returns:
        LayoutContext: Fresh per-page context.
    """
    row_class_adjustment = row_axis.track_total(int(style["class_height"]))
    col_origin = LEFT_MARGIN + row_class_adjustment + MAP_GAP
    if row_axis.has_dendrogram:
        col_origin += int(style["dendro_height"])
    return LayoutContext(
        col_origin=col_origin,
        row_origin=int(page_height) - int(style["content_start"]),
        row_class_adjustment=row_class_adjustment,
    )


def full_map_extent(n_items: int, cell_size: int) -> int:
    """
    Returns the unscaled map extent along one axis of a full-resolution page.

    Args:
        n_items (int): Number of axis items.
        cell_size (int): Points per item.

    Returns:
        int: Extent covering one cell per item.
    """
    return max(n_items, 0) * cell_size


def fixed_page_size(style: StyleConfig) -> Tuple[int, int]:
    return int(style["page_width"]), int(style["page_height"])


def full_page_size(map_width: int, map_height: int, style: StyleConfig) -> Tuple[int, int]:
    """
    Computes the size of a page that fits the unscaled heat map.

    Args:
        map_width (int): Map width in points.
        map_height (int): Map height in points.
        style (StyleConfig): Page geometry.

    Returns:
        Tuple[int, int]: (page width, page height).
    """
    dendro = int(style["dendro_height"])
    pad = int(style["full_page_pad"])
    width = dendro + map_width + pad
    height = int(style["content_start"]) + dendro + map_height + pad
    return width, height


def callout_increment(axis_length: int, image_size: int) -> float:
    """
    Returns the distance between consecutive axis positions on a scaled map.

    Args:
        axis_length (int): Number of positions along the axis.
        image_size (int): Map extent along the axis.

    Returns:
        float: Points per axis step.
    """
    if axis_length <= 1:
        return float(image_size)
    return image_size / (axis_length - 1)


def callout_offset(index: int, axis_length: int, image_size: int, *, nudge: int) -> int:
    """
    Maps an axis index to a pixel offset along a scaled map.

    Args:
        index (int): Axis index of the callout.
        axis_length (int): Number of positions along the axis.
        image_size (int): Map extent along the axis.

    Kwargs:
        nudge (int): Axis-specific baseline correction.

    Returns:
        int: Offset from the map's leading edge.
    """
    increment = callout_increment(axis_length, image_size)
    return round_half_up(index * increment) + nudge - int(increment) // 2


def full_label_offset(index: int, cell_size: int, *, axis: str) -> int:
    """
    Maps an axis index to its label offset on a full-resolution page.

    Args:
        index (int): Axis index.
        cell_size (int): Points per item.

    Kwargs:
        axis (str): "row" or "col".

    Returns:
        int: Offset from the map's top edge (rows) or left edge (columns).

    Raises:
        ValueError: If `axis` is not recognized.
    """
    if axis == "row":
        # Baseline sits just below the item position so the glyphs straddle it
        return index * cell_size + cell_size - 1
    if axis == "col":
        return index * cell_size
    raise ValueError("axis must be 'row' or 'col'")
