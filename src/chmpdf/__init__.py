"""
chmpdf
~~~~~~

chmpdf: page layout and pagination of clustered heat map PDF reports
"""

from .core.binning import classify
from .core.errors import ChmPdfError, DocumentError, LayoutError, ResourceError
from .core.model import (
    AxisMetadata,
    BinningSpec,
    Branding,
    CovariateTrack,
    DistributionSummary,
    MatrixLayer,
    RenderRequest,
)
from .core.results import RenderReport
from .plot.composer import DocumentComposer, render_pdf
from .plot.style import StyleConfig

__all__ = [
    "AxisMetadata",
    "BinningSpec",
    "Branding",
    "ChmPdfError",
    "CovariateTrack",
    "DistributionSummary",
    "DocumentComposer",
    "DocumentError",
    "LayoutError",
    "MatrixLayer",
    "RenderReport",
    "RenderRequest",
    "ResourceError",
    "StyleConfig",
    "classify",
    "render_pdf",
]

__version__ = "0.1.0"
