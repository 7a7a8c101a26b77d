"""
chmpdf/plot/composer
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TYPE_CHECKING

from ..core.errors import DocumentError
from ..core.layout import LayoutContext, fixed_page_size, starting_positions
from ..core.results import RenderReport, StepResult
from ..util.warnings import warn_component
from .page_modes import PageMode, page_mode_for
from .pdf_canvas import PdfCanvas
from .renderers.covariates import render_covariate_track
from .renderers.dendrogram import DendrogramRenderer
from .renderers.header import HeaderFooterRenderer
from .renderers.histogram import HistogramRenderer
from .renderers.legend import COL_SECTION, ROW_SECTION, LegendPaginator
from .renderers.matrix import MatrixRenderer, matrix_rect
from .style import StyleConfig
from .track_layout import (
    column_dendrogram_rect,
    layout_column_tracks,
    layout_row_tracks,
    row_dendrogram_rect,
)

if TYPE_CHECKING:
    from ..core.model import MatrixLayer, RenderRequest
    from .canvas import Canvas

CanvasFactory = Callable[[], "Canvas"]


class DocumentComposer:
    """
    Class for composing a heat map document: one page per matrix layer, an optional
    data distribution page and trailing covariate legend pages.

    Every page component runs as a separate step. A failing component is reported
    through a `RenderWarning`, recorded in the returned `RenderReport`, and skipped;
    the rest of the document is still produced. Failures to open or write the
    document are terminal.
    """

    def __init__(
        self,
        style: Optional[StyleConfig] = None,
        canvas_factory: CanvasFactory = PdfCanvas,
    ) -> None:
        """
        Initializes the DocumentComposer instance.

        Args:
            style (Optional[StyleConfig]): Page geometry and typography. Defaults to None.
            canvas_factory (CanvasFactory): Builds the canvas when `compose()` is not
                given one. Defaults to PdfCanvas.
        """
        self.style = style if style is not None else StyleConfig()
        self.canvas_factory = canvas_factory

    def compose(self, request: RenderRequest, canvas: Optional[Canvas] = None) -> RenderReport:
        """
        Renders the document and writes it to `request.output_path`.

        Args:
            request (RenderRequest): Render input.
            canvas (Optional[Canvas]): Canvas to draw on. Defaults to a new canvas from
                `canvas_factory`.

        Returns:
            RenderReport: Per-component outcomes, page count and output path.

        Raises:
            DocumentError: If the document cannot be opened or written, or has no pages.
        """
        if canvas is None:
            canvas = self.canvas_factory()
        report = RenderReport()
        mode = page_mode_for(request.full_resolution)
        header = HeaderFooterRenderer(request.name, request.branding)
        try:
            canvas.open(request.name)
            for index, layer in enumerate(request.layers):
                self._layer_page(canvas, report, request, mode, header, layer)
                if index == 0 and mode.has_histogram and request.distribution is not None:
                    self._histogram_page(canvas, report, request, header)
            if request.has_legends:
                self._legend_pages(canvas, report, request, header)
            if report.pages == 0:
                raise DocumentError(f"Document {request.name!r} has no pages")
            report.path = canvas.finalize(request.output_path)
        except Exception:
            canvas.discard()
            raise
        return report

    # Steps

    def _step(
        self,
        report: RenderReport,
        component: str,
        func: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> StepResult:
        """
        Runs one page component and records its outcome.

        Args:
            report (RenderReport): Report receiving the outcome.
            component (str): Component name used in diagnostics.
            func (Callable[..., Any]): Component call.
            *args: Positional arguments for `func`.

        Kwargs:
            **kwargs: Keyword arguments for `func`.

        Returns:
            StepResult: Recorded outcome.

        Raises:
            DocumentError: Propagated unchanged; document failures are terminal.
        """
        try:
            value = func(*args, **kwargs)
        except DocumentError:
            raise
        except Exception as exc:
            warn_component(component, exc, stacklevel=4)
            return report.record(StepResult(component, report.pages, False, error=exc))
        return report.record(StepResult(component, report.pages, True, value=value))

    def _begin_page(
        self,
        canvas: Canvas,
        report: RenderReport,
        header: HeaderFooterRenderer,
        width: int,
        height: int,
    ) -> None:
        canvas.add_page(width, height)
        report.pages += 1
        self._step(report, "header", header.render, canvas, self.style, width=width, height=height)

    # Pages

    def _layer_page(
        self,
        canvas: Canvas,
        report: RenderReport,
        request: RenderRequest,
        mode: PageMode,
        header: HeaderFooterRenderer,
        layer: MatrixLayer,
    ) -> None:
        """
        Composes one heat map page.

        Bands are placed top-down: column dendrogram, column covariates, then the map
        area with the row dendrogram and row covariates to its left.

        Args:
            canvas (Canvas): Target canvas.
            report (RenderReport): Report receiving the outcomes.
            request (RenderRequest): Render input.
            mode (PageMode): Page mode policy.
            header (HeaderFooterRenderer): Header and footer renderer.
            layer (MatrixLayer): Layer to draw.
        """
        style = self.style
        map_w, map_h = mode.map_extent(request, style)
        width, height = mode.page_size(map_w, map_h, style)
        self._begin_page(canvas, report, header, width, height)

        ctx = starting_positions(request.row, height, style)
        if request.col.has_dendrogram:
            rect, ctx = column_dendrogram_rect(ctx, map_w, style)
            renderer = DendrogramRenderer(request.col.dendrogram, "col")
            self._step(report, "col_dendrogram", renderer.render, canvas, style, rect=rect)
        placements, ctx = layout_column_tracks(request.col.visible_tracks(), ctx, map_w, style)
        for placement in placements:
            self._step(
                report,
                f"col_covariate[{placement.track.name}]",
                render_covariate_track,
                canvas,
                style,
                placement=placement,
            )

        ctx = ctx.moved(row=-map_h)
        if request.row.has_dendrogram:
            rect = row_dendrogram_rect(ctx, map_h, style)
            renderer = DendrogramRenderer(request.row.dendrogram, "row")
            self._step(report, "row_dendrogram", renderer.render, canvas, style, rect=rect)
        for placement in layout_row_tracks(request.row.visible_tracks(), ctx, map_h, style):
            self._step(
                report,
                f"row_covariate[{placement.track.name}]",
                render_covariate_track,
                canvas,
                style,
                placement=placement,
            )

        if mode.labels_before_map:
            self._labels(canvas, report, request, mode, ctx, map_w, map_h)
        self._step(report, "heat_map", self._draw_matrix, canvas, layer, ctx, map_w, map_h)
        if not mode.labels_before_map:
            self._labels(canvas, report, request, mode, ctx, map_w, map_h)
        canvas.end_page()

    def _draw_matrix(
        self,
        canvas: Canvas,
        layer: MatrixLayer,
        ctx: LayoutContext,
        map_width: int,
        map_height: int,
    ) -> Any:
        rect = matrix_rect(ctx, map_width, map_height)
        return MatrixRenderer(layer.image).render(canvas, self.style, rect=rect)

    def _labels(
        self,
        canvas: Canvas,
        report: RenderReport,
        request: RenderRequest,
        mode: PageMode,
        ctx: LayoutContext,
        map_width: int,
        map_height: int,
    ) -> None:
        for component, renderer in mode.label_steps(request):
            self._step(
                report,
                component,
                renderer.render,
                canvas,
                self.style,
                ctx=ctx,
                map_width=map_width,
                map_height=map_height,
            )

    def _histogram_page(
        self,
        canvas: Canvas,
        report: RenderReport,
        request: RenderRequest,
        header: HeaderFooterRenderer,
    ) -> None:
        width, height = fixed_page_size(self.style)
        self._begin_page(canvas, report, header, width, height)
        renderer = HistogramRenderer(request.distribution)
        self._step(report, "histogram", renderer.render, canvas, self.style, top=self.style.legend_top)
        canvas.end_page()

    def _legend_pages(
        self,
        canvas: Canvas,
        report: RenderReport,
        request: RenderRequest,
        header: HeaderFooterRenderer,
    ) -> None:
        """
        Composes the covariate legend pages, row covariates first.

        Args:
            canvas (Canvas): Target canvas.
            report (RenderReport): Report receiving the outcomes.
            request (RenderRequest): Render input.
            header (HeaderFooterRenderer): Header and footer renderer.
        """
        paginator = LegendPaginator(self.style)
        sections = [
            (ROW_SECTION, request.row.visible_tracks()),
            (COL_SECTION, request.col.visible_tracks()),
        ]
        width, height = fixed_page_size(self.style)
        for page in paginator.plan(sections):
            self._begin_page(canvas, report, header, width, height)
            for title in page.titles:
                self._step(report, "legend_title", paginator.render_title, canvas, title)
            for placed in page.pairs:
                for column, track in enumerate(placed.pair):
                    if track is None:
                        continue
                    self._step(
                        report,
                        f"legend[{track.name}]",
                        paginator.render_block,
                        canvas,
                        track,
                        column=column,
                        y=placed.y,
                    )
            canvas.end_page()


def render_pdf(request: RenderRequest, style: Optional[StyleConfig] = None) -> RenderReport:
    """
    Renders a heat map document to `<output_dir>/<name>.pdf`.

    Args:
        request (RenderRequest): Render input.
        style (Optional[StyleConfig]): Page geometry overrides. Defaults to None.

    Returns:
        RenderReport: Per-component outcomes, page count and output path.

    Raises:
        DocumentError: If the document cannot be written.
    """
    return DocumentComposer(style).compose(request)
