"""
chmpdf/plot/pdf_canvas
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from ..core.errors import DocumentError
from .canvas import ImageOp, Page, RecordingCanvas, RuleOp, TextOp

POINTS_PER_INCH = 72


def _draw_page(page: Page) -> plt.Figure:
    """
    Renders one page of drawing instructions onto a Matplotlib figure.

    Page units are PDF points with the origin at the bottom-left corner.
    Instructions are stacked in emission order.

    Args:
        page (Page): Page to render.

    Returns:
        plt.Figure: Figure sized to the page.
    """
    fig = plt.figure(
        figsize=(page.width / POINTS_PER_INCH, page.height / POINTS_PER_INCH),
        dpi=POINTS_PER_INCH,
    )
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    ax.set_xlim(0, page.width)
    ax.set_ylim(0, page.height)
    ax.set_autoscale_on(False)
    ax.set_axis_off()
    for zorder, op in enumerate(page.ops, start=1):
        if isinstance(op, ImageOp):
            r = op.rect
            ax.imshow(
                op.image,
                cmap="gray" if op.image.ndim == 2 else None,
                extent=(r.x, r.right, r.y, r.top),
                origin="upper",
                aspect="auto",
                interpolation="nearest",
                zorder=zorder,
            )
        elif isinstance(op, TextOp):
            ax.text(
                op.x,
                op.y,
                op.text,
                fontsize=op.font_size,
                fontweight="bold" if op.bold else "normal",
                color=op.color,
                rotation=op.rotation,
                rotation_mode="anchor",
                ha="left",
                va="baseline",
                parse_math=False,
                zorder=zorder,
            )
        elif isinstance(op, RuleOp):
            r = op.rect
            ax.add_patch(
                plt.Rectangle(
                    (r.x, r.y),
                    r.width,
                    r.height,
                    facecolor=op.color,
                    edgecolor="none",
                    zorder=zorder,
                )
            )
    return fig


class PdfCanvas(RecordingCanvas):
    """
    Class for a canvas that writes its pages to a PDF file through Matplotlib.
    """

    def _write(self, path: Path) -> None:
        """
        Writes every recorded page to `path`.

        Args:
            path (Path): Output PDF path.

        Raises:
            DocumentError: If the file cannot be written.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with PdfPages(path, metadata={"Title": self.title or path.stem}) as pdf:
                for page in self.pages:
                    fig = _draw_page(page)
                    try:
                        pdf.savefig(fig)
                    finally:
                        plt.close(fig)
        except OSError as exc:
            raise DocumentError(f"Cannot write {path}: {exc}") from exc
