"""
tests/test_layout
~~~~~~~~~~~~~~~~~
"""

import pytest

from chmpdf import AxisMetadata, BinningSpec, CovariateTrack
from chmpdf.core.layout import (
    LayoutContext,
    Rect,
    callout_increment,
    callout_offset,
    fixed_page_size,
    full_label_offset,
    full_map_extent,
    full_page_size,
    round_half_up,
    starting_positions,
)
from chmpdf.core.model import PLOT


@pytest.mark.api
@pytest.mark.parametrize("page_height", [792, 1000, 445])
def test_starting_positions_without_tracks_or_dendrogram(style, page_height):
    """
    Ensures the map starts 12 points from the left edge when nothing precedes it.

    Args:
        style (StyleConfig): Default style.
        page_height (int): Page height.
    """
    ctx = starting_positions(AxisMetadata(), page_height, style)

    assert ctx.col_origin == 12
    assert ctx.row_origin == page_height - 80
    assert ctx.row_class_adjustment == 0


@pytest.mark.api
def test_starting_positions_account_for_row_tracks_and_dendrogram(style, pixel, tissue_track):
    """
    Ensures row tracks and the row dendrogram shift the map to the right.
    """
    plot = CovariateTrack("Score", BinningSpec.continuous(["1"]), mode=PLOT)
    row = AxisMetadata(labels=("a",), dendrogram=pixel, tracks=(tissue_track, plot))
    ctx = starting_positions(row, 792, style)

    assert ctx.row_class_adjustment == 40
    assert ctx.col_origin == 10 + 40 + 2 + 50


@pytest.mark.unit
def test_starting_positions_follow_style_overrides(style):
    """
    Ensures the content start margin comes from the style.
    """
    style.set("content_start", 100)

    assert starting_positions(AxisMetadata(), 792, style).row_origin == 692


@pytest.mark.unit
def test_layout_context_moved_returns_new_context():
    """
    Ensures moving a context leaves the original untouched.
    """
    ctx = LayoutContext(12, 712, 20)
    moved = ctx.moved(row=-50)

    assert (moved.col_origin, moved.row_origin, moved.row_class_adjustment) == (12, 662, 20)
    assert ctx.row_origin == 712


@pytest.mark.unit
def test_rect_edges_and_containment():
    """
    Ensures rectangles report their edges and containment in page units.
    """
    rect = Rect(10, 20, 30, 40)

    assert (rect.right, rect.top) == (40, 60)
    assert rect.contains(10, 60)
    assert not rect.contains(9, 30)
    assert rect.to_dict() == {"x": 10, "y": 20, "width": 30, "height": 40}


@pytest.mark.unit
def test_round_half_up():
    """
    Ensures halves round towards positive infinity.
    """
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.49) == 2


@pytest.mark.api
def test_page_sizes(style):
    """
    Ensures fixed pages are letter size and full-resolution pages fit the map.
    """
    assert fixed_page_size(style) == (612, 792)
    assert full_map_extent(3, 5) == 15
    assert full_map_extent(1, 5) == 5
    assert full_map_extent(0, 5) == 0
    assert full_page_size(10, 15, style) == (50 + 10 + 300, 80 + 50 + 15 + 300)


@pytest.mark.api
def test_callout_offsets():
    """
    Ensures callout offsets scale the axis index to the map and apply the nudge.
    """
    assert callout_increment(5, 400) == 100
    assert callout_offset(0, 5, 400, nudge=2) == -48
    assert callout_offset(2, 5, 400, nudge=2) == 152
    assert callout_offset(2, 5, 400, nudge=-2) == 148


@pytest.mark.unit
def test_callout_increment_single_item_axis():
    """
    Ensures a one-item axis does not divide by zero.
    """
    assert callout_increment(1, 400) == 400.0


@pytest.mark.api
def test_full_label_offsets():
    """
    Ensures full-resolution row labels sit one cell lower than column labels.
    """
    assert full_label_offset(2, 5, axis="row") == 14
    assert full_label_offset(2, 5, axis="col") == 10
    with pytest.raises(ValueError):
        full_label_offset(0, 5, axis="z")
