"""
chmpdf/core/errors
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations


class ChmPdfError(Exception):
    """
    Base class for errors raised while laying out or writing a heat map document.
    """


class ResourceError(ChmPdfError):
    """
    Raised when an image cannot be decoded or a font metric cannot be computed.
    """


class LayoutError(ChmPdfError):
    """
    Raised when axis metadata is malformed, e.g. a bound or break is not numeric.
    """


class DocumentError(ChmPdfError):
    """
    Raised when the document cannot be opened or written. Terminal for a render.
    """
