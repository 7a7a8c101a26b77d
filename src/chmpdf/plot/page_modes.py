"""
chmpdf/plot/page_modes
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import List, Tuple, TYPE_CHECKING, Union

from ..core.layout import fixed_page_size, full_map_extent, full_page_size
from .renderers.base import Renderer
from .renderers.labels import AxisLabelRenderer, CalloutRenderer

if TYPE_CHECKING:
    from ..core.model import RenderRequest
    from .style import StyleConfig

LabelStep = Tuple[str, Renderer]


class FixedPageMode:
    """
    Class for letter-size layer pages with the heat map scaled to a fixed square.
    Axis labels are limited to the top-item callouts.
    """

    name = "fixed"
    has_histogram = False
    labels_before_map = False

    def map_extent(self, request: RenderRequest, style: StyleConfig) -> Tuple[int, int]:
        size = int(style["map_size"])
        return size, size

    def page_size(self, map_width: int, map_height: int, style: StyleConfig) -> Tuple[int, int]:
        return fixed_page_size(style)

    def label_steps(self, request: RenderRequest) -> List[LabelStep]:
        """
        Returns the callout renderers for axes that carry a top-items strip.

        Args:
            request (RenderRequest): Render input.

        Returns:
            List[LabelStep]: (component name, renderer) pairs, rows first.
        """
        steps: List[LabelStep] = []
        if request.row.has_top_items:
            steps.append(("row_callouts", CalloutRenderer(request.row, "row")))
        if request.col.has_top_items:
            steps.append(("col_callouts", CalloutRenderer(request.col, "col")))
        return steps


class FullResolutionPageMode:
    """
    Class for layer pages sized to fit the unscaled heat map, five points per cell,
    with every axis item labelled. A data distribution page follows the first layer.
    """

    name = "full"
    has_histogram = True
    labels_before_map = True

    def map_extent(self, request: RenderRequest, style: StyleConfig) -> Tuple[int, int]:
        """
        Returns the unscaled map size.

        Args:
            request (RenderRequest): Render input.
            style (StyleConfig): Page geometry.

        Returns:
            Tuple[int, int]: (map width, map height).
        """
        cell = int(style["full_cell_size"])
        return full_map_extent(request.col.length, cell), full_map_extent(request.row.length, cell)

    def page_size(self, map_width: int, map_height: int, style: StyleConfig) -> Tuple[int, int]:
        return full_page_size(map_width, map_height, style)

    def label_steps(self, request: RenderRequest) -> List[LabelStep]:
        return [
            ("col_labels", AxisLabelRenderer(request.col, "col")),
            ("row_labels", AxisLabelRenderer(request.row, "row")),
        ]


PageMode = Union[FixedPageMode, FullResolutionPageMode]


def page_mode_for(full_resolution: bool) -> PageMode:
    """
    Selects the page mode policy.

    Args:
        full_resolution (bool): Whether pages fit the unscaled map.

    Returns:
        PageMode: Policy object.
    """
    return FullResolutionPageMode() if full_resolution else FixedPageMode()
