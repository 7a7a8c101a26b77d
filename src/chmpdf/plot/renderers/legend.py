"""
chmpdf/plot/renderers/legend
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, TYPE_CHECKING

from ...core.binning import classify
from ...core.layout import Rect, TextPlacement
from ...util.warnings import RenderWarning, warn
from ._label_format import truncate_name

if TYPE_CHECKING:
    from ...core.model import CovariateTrack
    from ..canvas import Canvas
    from ..style import StyleConfig

ROW_SECTION = "Row Covariate Bar Legends"
COL_SECTION = "Column Covariate Bar Legends"
CONTINUED = " (continued)"
SECTION_X = 10
# Drop from a section title to the first legend block
SECTION_STEP = 15
# Horizontal offsets within a legend block, relative to its column start
NAME_X = 14
ENTRY_X = 35
OUTLINE_X = 17
SWATCH_X = 18
SWATCH_WIDTH = 10
BLOCK_PAD = 5

LegendPair = Tuple["CovariateTrack", Optional["CovariateTrack"]]
Section = Tuple[str, Sequence["CovariateTrack"]]


def pair_tracks(tracks: Sequence[CovariateTrack]) -> List[LegendPair]:
    """
    Groups tracks two at a time; an odd track count leaves the last pair single.

    Args:
        tracks (Sequence[CovariateTrack]): Tracks in display order.

    Returns:
        List[LegendPair]: (left, right) pairs, `right` is None for a trailing single.
    """
    tracks = list(tracks)
    return [
        (tracks[i], tracks[i + 1] if i + 1 < len(tracks) else None)
        for i in range(0, len(tracks), 2)
    ]


def block_bottom(track: CovariateTrack, y: int, style: StyleConfig) -> int:
    """
    Returns the y of a legend block's bottom row when its name sits at `y`.

    Args:
        track (CovariateTrack): Track whose bins are listed.
        y (int): Baseline of the block name.
        style (StyleConfig): Page geometry.

    Returns:
        int: Bottom row y.
    """
    return y - track.binning.n_bins * int(style["legend_row_height"]) - BLOCK_PAD


def pair_bottom(pair: LegendPair, y: int, style: StyleConfig) -> int:
    return min(block_bottom(t, y, style) for t in pair if t is not None)


def pair_fits(pair: LegendPair, y: int, style: StyleConfig) -> bool:
    """
    Checks whether both blocks of a pair stay above the page's legend floor.

    Args:
        pair (LegendPair): Pair to place.
        y (int): Current vertical cursor.
        style (StyleConfig): Page geometry.

    Returns:
        bool: True if the pair fits at `y`.
    """
    return pair_bottom(pair, y, style) >= int(style["legend_min_y"])


@dataclass(frozen=True)
class PlacedPair:
    """
    Data class for a legend pair anchored at a cursor position.
    """

    pair: LegendPair
    y: int


@dataclass
class LegendPage:
    """
    Class for the planned content of one legend page.
    """

    titles: List[TextPlacement] = field(default_factory=list)
    pairs: List[PlacedPair] = field(default_factory=list)


class LegendPaginator:
    """
    Class for paginating covariate legend blocks, two per row, across letter pages.
    """

    def __init__(self, style: StyleConfig) -> None:
        """
        Initializes the LegendPaginator instance.

        Args:
            style (StyleConfig): Page geometry and typography.
        """
        self.style = style

    def plan(self, sections: Sequence[Section]) -> List[LegendPage]:
        """
        Computes legend pages without drawing.

        Sections share one running page and cursor. A pair that does not fit starts a
        new page titled "<section> (continued)" unless the current page holds no
        blocks yet. A pair taller than a whole page is drawn where it is, with a
        `RenderWarning`.

        Args:
            sections (Sequence[Section]): (title, tracks) per axis, in page order.

        Returns:
            List[LegendPage]: Planned pages; empty if no section has tracks.
        """
        style = self.style
        top = style.legend_top
        gap = int(style["legend_pair_gap"])
        pages: List[LegendPage] = []
        page: Optional[LegendPage] = None
        y = top
        for title, tracks in sections:
            pairs = pair_tracks(tracks)
            if not pairs:
                continue
            if page is None:
                page = LegendPage()
                pages.append(page)
            page.titles.append(TextPlacement(title, SECTION_X, y))
            y -= SECTION_STEP
            for pair in pairs:
                if not pair_fits(pair, y, style) and page.pairs:
                    page = LegendPage()
                    pages.append(page)
                    y = top
                    page.titles.append(TextPlacement(title + CONTINUED, SECTION_X, y))
                    y -= SECTION_STEP
                if not pair_fits(pair, y, style):
                    names = ", ".join(t.name for t in pair if t is not None)
                    warn(
                        f"legend[{names}]: too many bins for one page, drawn below the legend floor",
                        RenderWarning,
                    )
                page.pairs.append(PlacedPair(pair, y))
                y = pair_bottom(pair, y, style) - gap
        return pages

    def layout(
        self,
        sections: Sequence[Section],
        canvas: Canvas,
        begin_page: Callable[[], None],
    ) -> List[LegendPage]:
        """
        Draws the planned legend pages.

        Args:
            sections (Sequence[Section]): (title, tracks) per axis, in page order.
            canvas (Canvas): Target canvas.
            begin_page (Callable[[], None]): Starts a letter page with header and footer.

        Returns:
            List[LegendPage]: Pages drawn.
        """
        pages = self.plan(sections)
        for page in pages:
            begin_page()
            self.render_page(canvas, page)
        return pages

    def render_page(self, canvas: Canvas, page: LegendPage) -> None:
        for title in page.titles:
            self.render_title(canvas, title)
        for placed in page.pairs:
            self.render_pair(canvas, placed)

    def render_title(self, canvas: Canvas, title: TextPlacement) -> None:
        canvas.place_text(
            title.text,
            title.x,
            title.y,
            font_size=float(self.style["section_fontsize"]),
            bold=True,
            color=str(self.style["text_color"]),
        )

    def render_pair(self, canvas: Canvas, placed: PlacedPair) -> int:
        """
        Draws both blocks of a pair side by side.

        Args:
            canvas (Canvas): Target canvas.
            placed (PlacedPair): Pair and its cursor.

        Returns:
            int: Cursor for the next pair.
        """
        bottom = min(
            self.render_block(canvas, track, column=column, y=placed.y)
            for column, track in enumerate(placed.pair)
            if track is not None
        )
        return bottom - int(self.style["legend_pair_gap"])

    def render_block(self, canvas: Canvas, track: CovariateTrack, *, column: int, y: int) -> int:
        """
        Draws one block of a pair in its legend column.

        Args:
            canvas (Canvas): Target canvas.
            track (CovariateTrack): Track to summarize.

        Kwargs:
            column (int): 0 for the left column, 1 for the right.
            y (int): Baseline of the block name.

        Returns:
            int: Bottom row y of the block.
        """
        x = int(self.style["legend_second_col"]) if column else 0
        return render_legend_block(canvas, self.style, track=track, x=x, y=y)


def render_legend_block(
    canvas: Canvas,
    style: StyleConfig,
    *,
    track: CovariateTrack,
    x: int,
    y: int,
) -> int:
    """
    Draws one legend block: the covariate name, a label and count per bin, and for
    bar tracks the legend swatch inside a one-point outline.

    Args:
        canvas (Canvas): Target canvas.
        style (StyleConfig): Page geometry and typography.

    Kwargs:
        track (CovariateTrack): Track to summarize.
        x (int): Column start.
        y (int): Baseline of the block name.

    Returns:
        int: Bottom row y of the block.

    Raises:
        LayoutError: If a continuous break or value is not numeric.
    """
    row_height = int(style["legend_row_height"])
    color = str(style["text_color"])
    canvas.place_text(
        truncate_name(track.name, int(style["name_max_chars"])),
        x + NAME_X,
        y,
        font_size=float(style["legend_name_fontsize"]),
        bold=True,
        color=color,
    )
    rows_y = block_bottom(track, y, style)
    if track.is_bar and track.legend_image is not None:
        span = track.binning.n_bins * row_height
        canvas.draw_rule(Rect(x + OUTLINE_X, rows_y - 1, SWATCH_WIDTH + 2, span + 2), str(style["rule_color"]))
        canvas.place_image(track.legend_image, Rect(x + SWATCH_X, rows_y, SWATCH_WIDTH, span))
    tally = classify(track, max_label_chars=int(style["bin_label_max_chars"]))
    entry_size = float(style["legend_entry_fontsize"])
    count_right = x + int(style["legend_count_right"])
    for slot, label, count in tally.display_rows():
        entry_y = rows_y + 2 + row_height * slot
        canvas.place_text(label, x + ENTRY_X, entry_y, font_size=entry_size, color=color)
        count_text = f"n = {count}"
        width = canvas.measure_text(count_text, entry_size)
        canvas.place_text(count_text, count_right - width, entry_y, font_size=entry_size, color=color)
    return rows_y
