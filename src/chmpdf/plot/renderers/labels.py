"""
chmpdf/plot/renderers/labels
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import List, Tuple, TYPE_CHECKING

from ...core.layout import (
    COL_CALLOUT_NUDGE,
    ROW_CALLOUT_NUDGE,
    LayoutContext,
    Rect,
    TextPlacement,
    callout_offset,
    full_label_offset,
)
from ...core.model import display_label
from .base import draw_placement

if TYPE_CHECKING:
    from ...core.model import AxisMetadata
    from ..canvas import Canvas
    from ..style import StyleConfig


def _validate_axis(axis: str) -> None:
    if axis not in {"row", "col"}:
        raise ValueError("label `axis` must be 'row' or 'col'")


def layout_callouts(
    metadata: AxisMetadata,
    axis: str,
    ctx: LayoutContext,
    map_width: int,
    map_height: int,
    style: StyleConfig,
) -> Tuple[Rect, List[TextPlacement]]:
    """
    Computes the top-items strip and its sparse callout labels.

    Row callouts sit in a strip right of the map; column callouts sit in a strip
    below the map and are rotated.

    Args:
        metadata (AxisMetadata): Axis carrying `top_items`.
        axis (str): "row" or "col".
        ctx (LayoutContext): Context whose origin is the map's bottom-left corner.
        map_width (int): Map width.
        map_height (int): Map height.
        style (StyleConfig): Page geometry.

    Returns:
        Tuple[Rect, List[TextPlacement]]: (strip rectangle, callout placements).
    """
    _validate_axis(axis)
    unit = int(style["class_height"])
    placements: List[TextPlacement] = []
    if axis == "row":
        strip_w = unit * 2
        x = ctx.col_origin + map_width + 1
        strip = Rect(x, ctx.row_origin, strip_w, map_height)
        top = ctx.row_origin + map_height
        for index, label in metadata.top_items:
            text = display_label(label)
            if text is None:
                continue
            offset = callout_offset(index, metadata.length, map_height, nudge=ROW_CALLOUT_NUDGE)
            placements.append(TextPlacement(text, x + strip_w - 3, top - offset))
        return strip, placements

    strip_h = unit * 3
    y = ctx.row_origin - strip_h - 1
    strip = Rect(ctx.col_origin, y, map_width, strip_h)
    for index, label in metadata.top_items:
        text = display_label(label)
        if text is None:
            continue
        offset = callout_offset(index, metadata.length, map_width, nudge=COL_CALLOUT_NUDGE)
        placements.append(TextPlacement(text, ctx.col_origin + offset, y - 2, rotated=True))
    return strip, placements


def layout_axis_labels(
    metadata: AxisMetadata,
    axis: str,
    ctx: LayoutContext,
    map_width: int,
    map_height: int,
    style: StyleConfig,
) -> List[TextPlacement]:
    """
    Computes a label for every axis item of a full-resolution map.

    Args:
        metadata (AxisMetadata): Axis carrying `labels`.
        axis (str): "row" or "col".
        ctx (LayoutContext): Context whose origin is the map's bottom-left corner.
        map_width (int): Map width.
        map_height (int): Map height.
        style (StyleConfig): Page geometry.

    Returns:
        List[TextPlacement]: Placements; cut and missing items are skipped.
    """
    _validate_axis(axis)
    cell = int(style["full_cell_size"])
    placements: List[TextPlacement] = []
    for index, label in enumerate(metadata.labels):
        text = display_label(label)
        if text is None:
            continue
        offset = full_label_offset(index, cell, axis=axis)
        if axis == "row":
            x = ctx.col_origin + map_width + 1
            placements.append(TextPlacement(text, x, ctx.row_origin + map_height - offset))
        else:
            placements.append(TextPlacement(text, ctx.col_origin + offset, ctx.row_origin - 1, rotated=True))
    return placements


class CalloutRenderer:
    """
    Class for rendering the top-items strip and callouts of one axis on fixed-size pages.
    """

    def __init__(self, metadata: AxisMetadata, axis: str) -> None:
        _validate_axis(axis)
        self.metadata = metadata
        self.axis = axis

    def render(
        self,
        canvas: Canvas,
        style: StyleConfig,
        *,
        ctx: LayoutContext,
        map_width: int,
        map_height: int,
    ) -> List[TextPlacement]:
        """
        Renders the strip image and the callout labels.

        Args:
            canvas (Canvas): Target canvas.
            style (StyleConfig): Page geometry.

        Kwargs:
            ctx (LayoutContext): Context whose origin is the map's bottom-left corner.
            map_width (int): Map width.
            map_height (int): Map height.

        Returns:
            List[TextPlacement]: Drawn callouts.
        """
        strip, placements = layout_callouts(self.metadata, self.axis, ctx, map_width, map_height, style)
        canvas.place_image(self.metadata.top_items_image, strip)
        for placement in placements:
            draw_placement(canvas, placement, style, font_size=float(style["label_fontsize"]))
        return placements


class AxisLabelRenderer:
    """
    Class for rendering every item label of one axis on full-resolution pages.
    """

    def __init__(self, metadata: AxisMetadata, axis: str) -> None:
        _validate_axis(axis)
        self.metadata = metadata
        self.axis = axis

    def render(
        self,
        canvas: Canvas,
        style: StyleConfig,
        *,
        ctx: LayoutContext,
        map_width: int,
        map_height: int,
    ) -> List[TextPlacement]:
        placements = layout_axis_labels(self.metadata, self.axis, ctx, map_width, map_height, style)
        for placement in placements:
            draw_placement(canvas, placement, style, font_size=float(style["label_fontsize"]))
        return placements
