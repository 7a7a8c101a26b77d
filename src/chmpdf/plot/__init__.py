"""
chmpdf/plot
~~~~~~~~~~~
"""

from .canvas import RecordingCanvas
from .composer import DocumentComposer, render_pdf
from .page_modes import FixedPageMode, FullResolutionPageMode, page_mode_for
from .pdf_canvas import PdfCanvas
from .style import DEFAULT_STYLE, StyleConfig

__all__ = [
    "DEFAULT_STYLE",
    "DocumentComposer",
    "FixedPageMode",
    "FullResolutionPageMode",
    "PdfCanvas",
    "RecordingCanvas",
    "StyleConfig",
    "page_mode_for",
    "render_pdf",
]
