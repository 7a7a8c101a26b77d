"""
chmpdf/plot/renderers/covariates
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.layout import TextPlacement
from ._label_format import range_captions
from .base import draw_placement

if TYPE_CHECKING:
    from ..canvas import Canvas
    from ..style import StyleConfig
    from ..track_layout import TrackPlacement

TICK_MARK = "-"


def render_covariate_track(canvas: Canvas, style: StyleConfig, *, placement: TrackPlacement) -> None:
    """
    Renders one covariate track: range ticks and captions for plot tracks, the track
    strip and its name.

    Args:
        canvas (Canvas): Target canvas.
        style (StyleConfig): Page geometry.

    Kwargs:
        placement (TrackPlacement): Geometry from the coordinate engine.

    Raises:
        LayoutError: If a plot track has a non-numeric bound.
    """
    track = placement.track
    label_size = float(style["label_fontsize"])
    # Plot tracks: three tick marks and low/mid/high captions
    if placement.tick_anchors:
        for x, y in placement.tick_anchors:
            draw_placement(
                canvas,
                TextPlacement(TICK_MARK, x, y, placement.rotated),
                style,
                font_size=label_size,
            )
        captions = range_captions(track.low_bound, track.high_bound)
        for text, (x, y) in zip(captions, placement.caption_anchors):
            draw_placement(
                canvas,
                TextPlacement(text, x, y, placement.rotated),
                style,
                font_size=float(style["tick_fontsize"]),
            )
    if track.image is not None:
        canvas.place_image(track.image, placement.rect)
    draw_placement(canvas, placement.name, style, font_size=label_size)
