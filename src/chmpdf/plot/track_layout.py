"""
chmpdf/plot/track_layout
~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, TYPE_CHECKING

from ..core.layout import LEFT_MARGIN, LayoutContext, Rect, TextPlacement
from .renderers._label_format import truncate_name

if TYPE_CHECKING:
    from ..core.model import CovariateTrack
    from .style import StyleConfig

# Gap kept between the map edge and the covariate bands on either side
BAND_GAP = 2
# Extra offset of bar-track names when plot tracks on the same axis carry captions
CAPTION_COLUMN = 11

Anchor = Tuple[int, int]


@dataclass(frozen=True)
class TrackPlacement:
    """
    Data class for the computed geometry of one covariate track on a heat map page.

    Column tracks are horizontal strips above the map, annotated to the right of the
    map; row tracks are vertical strips left of the map, annotated below it with
    rotated text. Plot-mode tracks carry three tick anchors and three caption anchors
    (low, mid, high).
    """

    track: CovariateTrack
    rect: Rect
    name: TextPlacement
    tick_anchors: Tuple[Anchor, ...] = ()
    caption_anchors: Tuple[Anchor, ...] = ()
    rotated: bool = False


def _has_plot_track(tracks: Sequence[CovariateTrack]) -> bool:
    return any(not t.is_bar for t in tracks)


def column_dendrogram_rect(
    ctx: LayoutContext,
    map_width: int,
    style: StyleConfig,
) -> Tuple[Rect, LayoutContext]:
    """
    Places the column dendrogram band directly under the current row origin.

    Args:
        ctx (LayoutContext): Current page context.
        map_width (int): Heat map width.
        style (StyleConfig): Page geometry.

    Returns:
        Tuple[Rect, LayoutContext]: (dendrogram rectangle, context below the band).
    """
    dendro = int(style["dendro_height"])
    ctx = ctx.moved(row=-dendro)
    return Rect(ctx.col_origin, ctx.row_origin, map_width, dendro), ctx


def row_dendrogram_rect(ctx: LayoutContext, map_height: int, style: StyleConfig) -> Rect:
    """
    Places the row dendrogram band at the left page margin, aligned with the map.

    Args:
        ctx (LayoutContext): Page context whose row origin is the map's bottom edge.
        map_height (int): Heat map height.
        style (StyleConfig): Page geometry.

    Returns:
        Rect: Dendrogram rectangle.
    """
    return Rect(LEFT_MARGIN, ctx.row_origin, int(style["dendro_height"]), map_height)


def layout_column_tracks(
    tracks: Sequence[CovariateTrack],
    ctx: LayoutContext,
    map_width: int,
    style: StyleConfig,
) -> Tuple[List[TrackPlacement], LayoutContext]:
    """
    Stacks column covariate tracks downwards from the current row origin.

    Args:
        tracks (Sequence[CovariateTrack]): Visible column tracks in display order.
        ctx (LayoutContext): Current page context.
        map_width (int): Heat map width.
        style (StyleConfig): Page geometry.

    Returns:
        Tuple[List[TrackPlacement], LayoutContext]: (placements, context below the stack).
    """
    unit = int(style["class_height"])
    name_limit = int(style["name_max_chars"])
    with_captions = _has_plot_track(tracks)
    row = ctx.row_origin - BAND_GAP
    placements: List[TrackPlacement] = []
    for i, track in enumerate(tracks):
        height = track.height(unit)
        horiz = ctx.col_origin + map_width + BAND_GAP
        mid = row - 3
        ticks: Tuple[Anchor, ...] = ()
        captions: Tuple[Anchor, ...] = ()
        if not track.is_bar:
            top = row - i
            bottom = row - height + 2 - i
            mid = bottom + (top - bottom) // 2
            ticks = ((horiz, top), (horiz, mid), (horiz, bottom))
            horiz += 3
            captions = ((horiz, top - 2), (horiz, mid), (horiz, bottom + 2))
            horiz += 8
        elif with_captions:
            horiz += CAPTION_COLUMN
        # Consecutive strips share a two-point overlap
        row -= height - 2
        placements.append(
            TrackPlacement(
                track=track,
                rect=Rect(ctx.col_origin, row, map_width, height - 1),
                name=TextPlacement(truncate_name(track.name, name_limit), horiz, mid),
                tick_anchors=ticks,
                caption_anchors=captions,
            )
        )
    row -= BAND_GAP
    return placements, LayoutContext(ctx.col_origin, row, ctx.row_class_adjustment)


def layout_row_tracks(
    tracks: Sequence[CovariateTrack],
    ctx: LayoutContext,
    map_height: int,
    style: StyleConfig,
) -> List[TrackPlacement]:
    """
    Places row covariate tracks rightwards, ending just left of the map.

    Args:
        tracks (Sequence[CovariateTrack]): Visible row tracks in display order.
        ctx (LayoutContext): Page context whose row origin is the map's bottom edge.
        map_height (int): Heat map height.
        style (StyleConfig): Page geometry.

    Returns:
        List[TrackPlacement]: Placements in display order.
    """
    unit = int(style["class_height"])
    name_limit = int(style["name_max_chars"])
    with_captions = _has_plot_track(tracks)
    col = ctx.col_origin - (ctx.row_class_adjustment + 1)
    placements: List[TrackPlacement] = []
    for track in tracks:
        height = track.height(unit)
        vert = ctx.row_origin - BAND_GAP
        mid = col + 2
        ticks: Tuple[Anchor, ...] = ()
        captions: Tuple[Anchor, ...] = ()
        if not track.is_bar:
            left = col - 1
            right = left + height - 1
            mid = left + (right - left) // 2
            ticks = ((left, vert), (mid, vert), (right, vert))
            vert -= 3
            captions = ((left + 2, vert), (mid, vert), (right - 2, vert))
            vert -= 8
        elif with_captions:
            vert -= CAPTION_COLUMN
        placements.append(
            TrackPlacement(
                track=track,
                rect=Rect(col, ctx.row_origin, height - 1, map_height),
                name=TextPlacement(truncate_name(track.name, name_limit), mid, vert, rotated=True),
                tick_anchors=ticks,
                caption_anchors=captions,
                rotated=True,
            )
        )
        col += height
    return placements
