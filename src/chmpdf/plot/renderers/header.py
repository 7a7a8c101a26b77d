"""
chmpdf/plot/renderers/header
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.layout import Rect
from ._label_format import fit_text

if TYPE_CHECKING:
    from ...core.model import Branding
    from ..canvas import Canvas
    from ..style import StyleConfig

TITLE_X = 130
TITLE_DROP = 37
LOGO_SIZE = (100, 40)
LOGO_DROP = 52
BADGE_SIZE = 40
SEPARATOR_DROP = 57
SEPARATOR_HEIGHT = 12
FOOTER_LOGO = Rect(10, 10, 70, 22)


class HeaderFooterRenderer:
    """
    Class for rendering the standard page header (title, logos, separator) and footer.
    """

    def __init__(self, title: str, branding: Branding) -> None:
        """
        Initializes the HeaderFooterRenderer instance.

        Args:
            title (str): Document title shown in the header.
            branding (Branding): Header/footer artwork.
        """
        self.title = title
        self.branding = branding

    def title_space(self, page_width: float) -> float:
        """
        Returns the width available to the header title.

        Args:
            page_width (float): Page width.

        Returns:
            float: Available width right of the header logo.
        """
        space = page_width - TITLE_X - 10
        if self.branding.badge_logo is not None:
            space -= BADGE_SIZE + 10
        return space

    def render(self, canvas: Canvas, style: StyleConfig, *, width: float, height: float) -> str:
        """
        Renders the header and footer of the current page.

        Args:
            canvas (Canvas): Target canvas.
            style (StyleConfig): Page geometry.

        Kwargs:
            width (float): Page width.
            height (float): Page height.

        Returns:
            str: Title as drawn, possibly shortened.
        """
        font_size = float(style["title_fontsize"])
        title = fit_text(
            self.title,
            lambda text, size: canvas.measure_text(text, size, bold=True),
            font_size,
            self.title_space(width),
        )
        canvas.place_text(
            title,
            TITLE_X,
            height - TITLE_DROP,
            font_size=font_size,
            bold=True,
            color=str(style["text_color"]),
        )
        # Logos and separator bar
        branding = self.branding
        if branding.header_logo is not None:
            canvas.place_image(branding.header_logo, Rect(10, height - LOGO_DROP, *LOGO_SIZE))
        if branding.badge_logo is not None:
            x = width - 10 - BADGE_SIZE
            canvas.place_image(branding.badge_logo, Rect(x, height - LOGO_DROP, BADGE_SIZE, BADGE_SIZE))
        separator_color = style["separator_color"] or branding.separator_color
        canvas.draw_rule(
            Rect(10, height - SEPARATOR_DROP, width - 22, SEPARATOR_HEIGHT),
            str(separator_color),
        )
        if branding.footer_logo is not None:
            canvas.place_image(branding.footer_logo, FOOTER_LOGO)
        return title
