"""
chmpdf/plot/renderers/matrix
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.layout import LayoutContext, Rect
from ...core.errors import LayoutError

if TYPE_CHECKING:
    from ...util.images import ImageSource
    from ..canvas import Canvas
    from ..style import StyleConfig


def matrix_rect(ctx: LayoutContext, map_width: int, map_height: int) -> Rect:
    """
    Returns the heat map rectangle at the page's final origin.

    Args:
        ctx (LayoutContext): Context after all bands are placed.
        map_width (int): Map width.
        map_height (int): Map height.

    Returns:
        Rect: Heat map rectangle.

    Raises:
        LayoutError: If the map has no area (an axis without items).
    """
    if map_width <= 0 or map_height <= 0:
        raise LayoutError(f"Heat map has no area ({map_width} x {map_height})")
    return Rect(ctx.col_origin, ctx.row_origin, map_width, map_height)


class MatrixRenderer:
    """
    Class for placing the rendered heat map layer.
    """

    def __init__(self, image: ImageSource) -> None:
        """
        Initializes the MatrixRenderer instance.

        Args:
            image (ImageSource): Rendered heat map layer.
        """
        self.image = image

    def render(self, canvas: Canvas, style: StyleConfig, *, rect: Rect) -> Rect:
        """
        Places the heat map.

        Args:
            canvas (Canvas): Target canvas.
            style (StyleConfig): Page geometry.

        Kwargs:
            rect (Rect): Heat map rectangle.

        Returns:
            Rect: The heat map rectangle.
        """
        canvas.place_image(self.image, rect)
        return rect
