"""
chmpdf/plot/renderers/histogram
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.layout import Rect
from ._label_format import trim_number

if TYPE_CHECKING:
    from ...core.model import DistributionSummary
    from ..canvas import Canvas
    from ..style import StyleConfig

TITLE = "Data Distribution"
MISSING = "Missing"
# Legend bitmap and bar geometry
LEGEND_X = 50
LEGEND_SIZE = (110, 111)
PLOT_HEIGHT = 110
BAR_ORIGIN = 55
BAR_SPAN = 110
TICK_X = 48
TICK_SIZE = (2, 1)
VALUE_RIGHT = 45
ROW_STEP = 10
FONT_SIZE = 12


class HistogramRenderer:
    """
    Class for rendering the value distribution of the first matrix layer as a labelled
    bar chart next to the layer's colour legend.
    """

    def __init__(self, summary: DistributionSummary) -> None:
        """
        Initializes the HistogramRenderer instance.

        Args:
            summary (DistributionSummary): Bin counts, thresholds and legend bitmap.
        """
        self.summary = summary

    def count_x(self, count: int) -> int:
        """
        Returns the x of a count label, placed just past its scaled bar.

        Args:
            count (int): Bin count.

        Returns:
            int: Label x.
        """
        max_count = max(self.summary.max_count, 1)
        return BAR_ORIGIN + (BAR_SPAN * int(count)) // max_count + 2

    def render(self, canvas: Canvas, style: StyleConfig, *, top: int) -> None:
        """
        Renders the distribution plot.

        Args:
            canvas (Canvas): Target canvas.
            style (StyleConfig): Page typography.

        Kwargs:
            top (int): Baseline of the page title.
        """
        summary = self.summary
        color = str(style["text_color"])
        rule = str(style["rule_color"])
        canvas.place_text(
            TITLE, 10, top, font_size=float(style["section_fontsize"]), bold=True, color=color
        )
        y = top - 15
        if summary.legend_image is not None:
            canvas.place_image(summary.legend_image, Rect(LEGEND_X, y - PLOT_HEIGHT, *LEGEND_SIZE))
        for tick_y in (y, y - 100, y - PLOT_HEIGHT):
            canvas.draw_rule(Rect(TICK_X, tick_y, *TICK_SIZE), rule)

        for i, threshold in enumerate(summary.thresholds):
            step = (i + 1) * ROW_STEP
            text = trim_number(str(threshold))
            width = canvas.measure_text(text, FONT_SIZE)
            canvas.place_text(text, VALUE_RIGHT - int(width), y - step - 5, font_size=FONT_SIZE, color=color)
            if i < len(summary.counts):
                count = summary.counts[i]
                canvas.place_text(f"n = {count}", self.count_x(count), y - step + 1, font_size=FONT_SIZE, color=color)
            canvas.draw_rule(Rect(TICK_X, y - step, *TICK_SIZE), rule)

        # Final bin above the last threshold, then the missing row
        last = summary.counts[-1]
        step = (len(summary.thresholds) + 1) * ROW_STEP
        canvas.place_text(f"n = {last}", self.count_x(last), y - step + 1, font_size=FONT_SIZE, color=color)
        canvas.place_text(MISSING, 5, y - PLOT_HEIGHT, font_size=FONT_SIZE, color=color)
        step = (len(summary.counts) + 1) * ROW_STEP
        missing = summary.missing_count
        canvas.place_text(f"n = {missing}", self.count_x(missing), y - step + 1, font_size=FONT_SIZE, color=color)
