"""
chmpdf/plot/renderers/dendrogram
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.layout import Rect
    from ...util.images import ImageSource
    from ..canvas import Canvas
    from ..style import StyleConfig


class DendrogramRenderer:
    """
    Class for placing a pre-rendered dendrogram band next to its axis.
    """

    def __init__(self, image: ImageSource, axis: str) -> None:
        """
        Initializes the DendrogramRenderer instance.

        Args:
            image (ImageSource): Rendered dendrogram.
            axis (str): "row" or "col".
        """
        if axis not in {"row", "col"}:
            raise ValueError("dendrogram `axis` must be 'row' or 'col'")
        self.image = image
        self.axis = axis

    def render(self, canvas: Canvas, style: StyleConfig, *, rect: Rect) -> Rect:
        """
        Places the dendrogram.

        Args:
            canvas (Canvas): Target canvas.
            style (StyleConfig): Page geometry.

        Kwargs:
            rect (Rect): Band rectangle from the coordinate engine.

        Returns:
            Rect: The band rectangle.
        """
        canvas.place_image(self.image, rect)
        return rect
