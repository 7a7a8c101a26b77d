"""
tests/test_canvas
~~~~~~~~~~~~~~~~~
"""

import numpy as np
import pytest

from chmpdf import DocumentError, ResourceError
from chmpdf.core.layout import Rect
from chmpdf.plot.canvas import ImageOp, RecordingCanvas, RuleOp, TextOp, measure_text_width
from chmpdf.plot.pdf_canvas import PdfCanvas
from chmpdf.util.images import as_image


@pytest.mark.api
def test_recording_canvas_keeps_ops_in_emission_order(canvas, pixel):
    """
    Ensures drawing instructions are recorded per page in the order they are issued.
    """
    canvas.place_image(pixel, Rect(0, 0, 10, 10))
    canvas.place_text("x", 1, 2, font_size=5, bold=True, rotation=-90)
    canvas.draw_rule(Rect(0, 0, 2, 1))
    canvas.end_page()
    ops = canvas.pages[0].ops

    assert [type(op) for op in ops] == [ImageOp, TextOp, RuleOp]
    assert ops[1] == TextOp("x", 1, 2, 5, True, -90, "black")


@pytest.mark.api
def test_add_page_ends_previous_page():
    """
    Ensures starting a page closes the one in progress.
    """
    canvas = RecordingCanvas()
    canvas.open("doc")
    canvas.add_page(612, 792)
    canvas.add_page(300, 400)
    canvas.end_page()

    assert [(p.width, p.height) for p in canvas.pages] == [(612, 792), (300, 400)]


@pytest.mark.unit
def test_canvas_rejects_operations_outside_scope(pixel, tmp_path):
    """
    Ensures the canvas refuses work before opening, without a page and after release.
    """
    canvas = RecordingCanvas()
    with pytest.raises(DocumentError):
        canvas.add_page(612, 792)
    canvas.open("doc")
    with pytest.raises(DocumentError):
        canvas.open("again")
    with pytest.raises(DocumentError):
        canvas.place_image(pixel, Rect(0, 0, 1, 1))
    with pytest.raises(ValueError):
        canvas.add_page(0, 792)
    canvas.discard()
    canvas.discard()

    assert canvas.closed
    with pytest.raises(DocumentError):
        canvas.finalize(tmp_path / "x.pdf")


@pytest.mark.unit
def test_canvas_context_manager_discards():
    """
    Ensures leaving the context releases an unfinished canvas.
    """
    with RecordingCanvas() as canvas:
        canvas.open("doc")
        canvas.add_page(612, 792)

    assert canvas.closed
    assert canvas.pages == []


@pytest.mark.unit
def test_measure_text_width_grows_with_text():
    """
    Ensures text widths are positive and increase with length and weight.
    """
    short = measure_text_width("n = 1", 7)
    long = measure_text_width("n = 1000", 7)

    assert measure_text_width("", 7) == 0.0
    assert 0 < short < long
    assert measure_text_width("Title", 14, bold=True) >= measure_text_width("Title", 14)
    assert measure_text_width("$x$", 7) > 0


@pytest.mark.unit
def test_as_image_validates_shape_and_path(tmp_path):
    """
    Ensures unsupported arrays and unreadable files are reported as resource errors.
    """
    assert as_image(np.zeros((2, 2))).shape == (2, 2)
    with pytest.raises(ResourceError):
        as_image(np.zeros((2, 2, 2)))
    with pytest.raises(ResourceError):
        as_image(np.zeros((0, 0)))
    with pytest.raises(ResourceError):
        as_image(str(tmp_path / "missing.png"))


@pytest.mark.api
def test_pdf_canvas_writes_pdf(tmp_path, pixel):
    """
    Ensures the PDF backend writes one file with every recorded page.
    """
    canvas = PdfCanvas()
    canvas.open("smoke")
    canvas.add_page(612, 792)
    canvas.place_image(pixel, Rect(12, 308, 400, 400))
    canvas.place_text("Title $1", 130, 755, font_size=14, bold=True)
    canvas.draw_rule(Rect(10, 735, 590, 12), "#c8102e")
    canvas.add_page(360, 445)
    canvas.place_text("rotated", 20, 20, font_size=5, rotation=-1170.0)
    path = canvas.finalize(tmp_path / "out" / "smoke.pdf")

    assert path.exists()
    assert path.read_bytes().startswith(b"%PDF")
    assert canvas.closed


@pytest.mark.unit
def test_pdf_canvas_wraps_write_failures(tmp_path):
    """
    Ensures an unwritable target is reported as a document error and releases the canvas.
    """
    blocker = tmp_path / "file"
    blocker.write_text("x")
    canvas = PdfCanvas()
    canvas.open("doc")
    canvas.add_page(612, 792)
    with pytest.raises(DocumentError):
        canvas.finalize(blocker / "doc.pdf")

    assert canvas.closed
