"""
chmpdf/plot/canvas
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Protocol, Union

import numpy as np
from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextPath

from ..core.errors import DocumentError, ResourceError
from ..core.layout import Rect
from ..util.images import ImageSource, as_image


@dataclass(frozen=True)
class ImageOp:
    """
    Data class for a raster placed into a page rectangle.
    """

    image: np.ndarray
    rect: Rect


@dataclass(frozen=True)
class TextOp:
    """
    Data class for a text run anchored at its baseline start. `rotation` is in degrees.
    """

    text: str
    x: float
    y: float
    font_size: float
    bold: bool = False
    rotation: float = 0.0
    color: str = "black"


@dataclass(frozen=True)
class RuleOp:
    """
    Data class for a filled rectangle (separator bars, tick marks, outlines).
    """

    rect: Rect
    color: str = "black"


DrawOp = Union[ImageOp, TextOp, RuleOp]


@dataclass
class Page:
    """
    Class for one page of drawing instructions.
    """

    width: float
    height: float
    ops: List[DrawOp] = field(default_factory=list)

    def texts(self) -> List[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    def images(self) -> List[ImageOp]:
        return [op for op in self.ops if isinstance(op, ImageOp)]

    def rules(self) -> List[RuleOp]:
        return [op for op in self.ops if isinstance(op, RuleOp)]

    def text_values(self) -> List[str]:
        return [op.text for op in self.texts()]


def measure_text_width(text: str, font_size: float, bold: bool = False) -> float:
    """
    Measures the rendered width of a string with Matplotlib's default sans-serif font.

    Args:
        text (str): Text to measure.
        font_size (float): Font size in points.
        bold (bool): Whether the bold face is used. Defaults to False.

    Returns:
        float: Width in points.

    Raises:
        ResourceError: If the font cannot be loaded or the text cannot be laid out.
    """
    if not text:
        return 0.0
    prop = FontProperties(weight="bold" if bold else "normal")
    try:
        # Escape dollars so text is never parsed as mathtext
        path = TextPath((0, 0), text.replace("$", r"\$"), size=font_size, prop=prop)
    except (RuntimeError, ValueError, OSError) as exc:
        raise ResourceError(f"Cannot measure text {text!r}: {exc}") from exc
    width = float(path.get_extents().width)
    return width if math.isfinite(width) and width > 0 else 0.0


class Canvas(Protocol):
    """
    Class for defining the paged canvas interface consumed by the composer.
    Protocol only; implement in concrete backends.
    """

    def open(self, title: str) -> None: ...

    def add_page(self, width: float, height: float) -> Page: ...

    def end_page(self) -> None: ...

    def place_image(self, image: ImageSource, rect: Rect) -> None: ...

    def place_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        font_size: float,
        bold: bool = False,
        rotation: float = 0.0,
        color: str = "black",
    ) -> None: ...

    def draw_rule(self, rect: Rect, color: str = "black") -> None: ...

    def measure_text(self, text: str, font_size: float, bold: bool = False) -> float: ...

    def finalize(self, path: Union[str, Path]) -> Path: ...

    def discard(self) -> None: ...


class RecordingCanvas:
    """
    Class for a canvas that keeps every page as a list of drawing instructions.

    The canvas is a scoped resource: once `finalize()` or `discard()` has been called
    no further operations are accepted. Used directly it writes nothing, which makes
    it the backend for layout tests and dry runs.
    """

    def __init__(self) -> None:
        """
        Initializes the RecordingCanvas instance.
        """
        self.title: Optional[str] = None
        self.pages: List[Page] = []
        self._current: Optional[Page] = None
        self._opened = False
        self._closed = False

    # Lifecycle

    @property
    def closed(self) -> bool:
        return self._closed

    def open(self, title: str) -> None:
        """
        Opens the document.

        Args:
            title (str): Human-readable document title.

        Raises:
            DocumentError: If the canvas was already opened or released.
        """
        if self._opened or self._closed:
            raise DocumentError("Canvas can only be opened once")
        self.title = title
        self._opened = True

    def add_page(self, width: float, height: float) -> Page:
        """
        Starts a new page, ending the current one if any.

        Args:
            width (float): Page width in points.
            height (float): Page height in points.

        Returns:
            Page: The new current page.

        Raises:
            DocumentError: If the canvas is not open.
            ValueError: If the page has no area.
        """
        self._require_open()
        if width <= 0 or height <= 0:
            raise ValueError(f"Page size must be positive, got {width} x {height}")
        self.end_page()
        self._current = Page(float(width), float(height))
        return self._current

    def end_page(self) -> None:
        """
        Ends the current drawing scope. No-op when no page is open.
        """
        if self._current is not None:
            self.pages.append(self._current)
            self._current = None

    def finalize(self, path: Union[str, Path]) -> Path:
        """
        Ends the current page, writes the document and releases the canvas.

        Args:
            path (Union[str, Path]): Output file path.

        Returns:
            Path: Output file path.

        Raises:
            DocumentError: If the canvas is not open or writing fails.
        """
        self._require_open()
        self.end_page()
        target = Path(path)
        try:
            self._write(target)
        finally:
            self._closed = True
        return target

    def discard(self) -> None:
        """
        Releases the canvas without writing. Safe to call more than once.
        """
        self._current = None
        self._closed = True

    def _write(self, path: Path) -> None:
        """
        Writes the recorded pages. The recording backend keeps them in memory only.

        Args:
            path (Path): Output file path.
        """

    def __enter__(self) -> RecordingCanvas:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if not self._closed:
            self.discard()

    # Drawing

    def place_image(self, image: ImageSource, rect: Rect) -> None:
        """
        Places a raster into a page rectangle.

        Args:
            image (ImageSource): Pixel array or image path.
            rect (Rect): Target rectangle.

        Raises:
            ResourceError: If the image cannot be decoded.
        """
        page = self._require_page()
        page.ops.append(ImageOp(as_image(image), rect))

    def place_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        font_size: float,
        bold: bool = False,
        rotation: float = 0.0,
        color: str = "black",
    ) -> None:
        """
        Places a text run.

        Args:
            text (str): Text to draw.
            x (float): Baseline start x.
            y (float): Baseline y.

        Kwargs:
            font_size (float): Font size in points.
            bold (bool): Whether the bold face is used. Defaults to False.
            rotation (float): Counter-clockwise rotation in degrees. Defaults to 0.0.
            color (str): Text color. Defaults to "black".
        """
        page = self._require_page()
        page.ops.append(TextOp(str(text), x, y, font_size, bold, rotation, color))

    def draw_rule(self, rect: Rect, color: str = "black") -> None:
        """
        Draws a filled rectangle.

        Args:
            rect (Rect): Rectangle to fill.
            color (str): Fill color. Defaults to "black".
        """
        page = self._require_page()
        page.ops.append(RuleOp(rect, color))

    def measure_text(self, text: str, font_size: float, bold: bool = False) -> float:
        return measure_text_width(text, font_size, bold)

    def _require_open(self) -> None:
        if not self._opened:
            raise DocumentError("Canvas is not open")
        if self._closed:
            raise DocumentError("Canvas has been released")

    def _require_page(self) -> Page:
        self._require_open()
        if self._current is None:
            raise DocumentError("No page in progress")
        return self._current
