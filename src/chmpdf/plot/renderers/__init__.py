"""Page component renderers."""

from .base import Renderer
from .covariates import render_covariate_track
from .dendrogram import DendrogramRenderer
from .header import HeaderFooterRenderer
from .histogram import HistogramRenderer
from .labels import AxisLabelRenderer, CalloutRenderer
from .legend import LegendPaginator, pair_fits, pair_tracks
from .matrix import MatrixRenderer

__all__ = [
    "AxisLabelRenderer",
    "CalloutRenderer",
    "DendrogramRenderer",
    "HeaderFooterRenderer",
    "HistogramRenderer",
    "LegendPaginator",
    "MatrixRenderer",
    "Renderer",
    "pair_fits",
    "pair_tracks",
    "render_covariate_track",
]
