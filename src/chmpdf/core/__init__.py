"""
chmpdf/core
~~~~~~~~~~~
"""

from .binning import BinTally, classify
from .errors import ChmPdfError, DocumentError, LayoutError, ResourceError
from .layout import LayoutContext, Rect, starting_positions
from .model import (
    AxisMetadata,
    BinningSpec,
    Branding,
    CovariateTrack,
    DistributionSummary,
    MatrixLayer,
    RenderRequest,
)
from .results import RenderReport, StepResult

__all__ = [
    "AxisMetadata",
    "BinTally",
    "BinningSpec",
    "Branding",
    "ChmPdfError",
    "CovariateTrack",
    "DistributionSummary",
    "DocumentError",
    "LayoutContext",
    "LayoutError",
    "MatrixLayer",
    "Rect",
    "RenderReport",
    "RenderRequest",
    "ResourceError",
    "StepResult",
    "classify",
    "starting_positions",
]
