"""
tests/test_labels
~~~~~~~~~~~~~~~~~
"""

import pytest

from chmpdf import AxisMetadata
from chmpdf.core.layout import LayoutContext, Rect
from chmpdf.plot.renderers.labels import (
    AxisLabelRenderer,
    CalloutRenderer,
    layout_axis_labels,
    layout_callouts,
)


@pytest.fixture
def callout_axis(pixel):
    """
    Returns an axis with a top-items strip and three callouts, one of them cut.

    Args:
        pixel (np.ndarray): Strip image.

    Returns:
        AxisMetadata: Axis metadata.
    """
    return AxisMetadata(
        labels=("a", "b", "c", "d", "e"),
        top_items_image=pixel,
        top_items=((0, "A|x"), (2, "B"), (3, "!CUT!")),
    )


@pytest.mark.api
def test_row_callouts_right_of_map(style, callout_axis):
    """
    Ensures row callouts are placed in a strip right of the map, measured from its top.
    """
    strip, placements = layout_callouts(callout_axis, "row", LayoutContext(12, 262), 400, 400, style)

    assert strip == Rect(413, 262, 20, 400)
    assert [(p.text, p.x, p.y, p.rotated) for p in placements] == [
        ("A", 430, 710, False),
        ("B", 430, 510, False),
    ]


@pytest.mark.api
def test_column_callouts_below_map(style, callout_axis):
    """
    Ensures column callouts are rotated and placed under a strip below the map.
    """
    strip, placements = layout_callouts(callout_axis, "col", LayoutContext(12, 262), 400, 400, style)

    assert strip == Rect(12, 231, 400, 30)
    assert [(p.text, p.x, p.y) for p in placements] == [("A", -40, 229), ("B", 160, 229)]
    assert all(p.rotated for p in placements)


@pytest.mark.api
def test_full_resolution_labels_skip_missing_items(style):
    """
    Ensures every displayable item gets a label and missing or cut items none.
    """
    axis = AxisMetadata(labels=("a", "b|c", None, "!CUT!"))
    ctx = LayoutContext(12, 300)
    rows = layout_axis_labels(axis, "row", ctx, 10, 15, style)
    cols = layout_axis_labels(axis, "col", ctx, 10, 15, style)

    assert [(p.text, p.x, p.y) for p in rows] == [("a", 23, 311), ("b", 23, 306)]
    assert [(p.text, p.x, p.y, p.rotated) for p in cols] == [("a", 12, 299, True), ("b", 17, 299, True)]


@pytest.mark.unit
def test_label_axis_is_validated(callout_axis):
    """
    Ensures an unknown axis name is rejected.
    """
    with pytest.raises(ValueError):
        CalloutRenderer(callout_axis, "z")


@pytest.mark.api
def test_callout_renderer_draws_strip_and_rotated_text(canvas, style, callout_axis):
    """
    Ensures the callout renderer places the strip image and rotates column text.
    """
    CalloutRenderer(callout_axis, "col").render(
        canvas, style, ctx=LayoutContext(12, 262), map_width=400, map_height=400
    )
    canvas.end_page()
    page = canvas.pages[-1]

    assert [op.rect for op in page.images()] == [Rect(12, 231, 400, 30)]
    assert page.text_values() == ["A", "B"]
    assert all(op.rotation == pytest.approx(-1170.0, abs=1.0) for op in page.texts())
    assert all(op.font_size == 5 for op in page.texts())


@pytest.mark.unit
def test_axis_label_renderer_draws_every_label(canvas, style):
    """
    Ensures the full-resolution renderer draws one text run per displayable label.
    """
    axis = AxisMetadata(labels=("a", "b", "c"))
    placements = AxisLabelRenderer(axis, "row").render(
        canvas, style, ctx=LayoutContext(12, 300), map_width=10, map_height=10
    )

    canvas.end_page()

    assert len(placements) == 3
    assert canvas.pages[-1].text_values() == ["a", "b", "c"]
