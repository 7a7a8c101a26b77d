"""
chmpdf/plot/renderers/base
~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import math
from typing import Any, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.layout import TextPlacement
    from ..canvas import Canvas
    from ..style import StyleConfig


class Renderer(Protocol):
    """
    Class for defining the renderer interface used by page components.
    Protocol only; implement in concrete renderers.
    """

    def render(self, canvas: Canvas, style: StyleConfig, **kwargs: Any) -> Any:
        """
        Executes rendering logic.

        Args:
            canvas (Canvas): Target canvas with a page in progress.
            style (StyleConfig): Page geometry.

        Kwargs:
            **kwargs: Renderer keyword arguments. Defaults to {}.
        """
        # Protocol stub; no runtime implementation
        ...


def rotation_degrees(style: StyleConfig) -> float:
    """
    Returns the row-axis text angle in degrees.

    Args:
        style (StyleConfig): Page geometry holding `text_rotation` in radians.

    Returns:
        float: Angle in degrees.
    """
    return math.degrees(float(style["text_rotation"]))


def draw_placement(
    canvas: Canvas,
    placement: TextPlacement,
    style: StyleConfig,
    *,
    font_size: float,
    bold: bool = True,
) -> None:
    """
    Draws a computed text placement, rotating it when flagged.

    Args:
        canvas (Canvas): Target canvas.
        placement (TextPlacement): Text and anchor.
        style (StyleConfig): Page geometry.

    Kwargs:
        font_size (float): Font size.
        bold (bool): Whether the bold face is used. Defaults to True.
    """
    canvas.place_text(
        placement.text,
        placement.x,
        placement.y,
        font_size=font_size,
        bold=bold,
        rotation=rotation_degrees(style) if placement.rotated else 0.0,
        color=str(style["text_color"]),
    )
