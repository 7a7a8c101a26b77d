"""
tests/conftest
~~~~~~~~~~~~~~
"""

import matplotlib

# Use a non-interactive backend for headless testing
matplotlib.use("Agg", force=True)

import numpy as np
import pytest

from chmpdf import AxisMetadata, BinningSpec, CovariateTrack, MatrixLayer, RenderRequest
from chmpdf.plot.canvas import RecordingCanvas
from chmpdf.plot.style import StyleConfig


@pytest.fixture(scope="session")
def pixel():
    """
    Returns a tiny RGB raster used wherever an image is required.

    Returns:
        np.ndarray: 2 x 2 x 3 float image.
    """
    return np.full((2, 2, 3), 0.5)


@pytest.fixture
def style():
    """
    Returns a fresh StyleConfig with default geometry.

    Returns:
        StyleConfig: Default page style.
    """
    return StyleConfig()


@pytest.fixture
def canvas():
    """
    Returns an open RecordingCanvas with one letter page in progress.

    Returns:
        RecordingCanvas: Canvas ready for drawing.
    """
    c = RecordingCanvas()
    c.open("test")
    c.add_page(612, 792)
    return c


@pytest.fixture(scope="session")
def tissue_track(pixel):
    """
    Returns a discrete bar track with three categories.

    Args:
        pixel (np.ndarray): Track and legend image.

    Returns:
        CovariateTrack: Discrete covariate.
    """
    return CovariateTrack(
        name="Tissue",
        binning=BinningSpec.discrete(["liver", "lung", "brain"]),
        values=("liver", "liver", "lung", "NA", "!CUT!", "brain"),
        image=pixel,
        legend_image=pixel,
    )


@pytest.fixture(scope="session")
def sex_track(pixel):
    """
    Returns a discrete bar track with two categories.

    Args:
        pixel (np.ndarray): Track and legend image.

    Returns:
        CovariateTrack: Discrete covariate.
    """
    return CovariateTrack(
        name="Sex",
        binning=BinningSpec.discrete(["F", "M"]),
        values=("F", "M", "M", None, "F", "F"),
        image=pixel,
        legend_image=pixel,
    )


@pytest.fixture
def make_request(pixel, tmp_path):
    """
    Returns a factory for small render requests.

    Args:
        pixel (np.ndarray): Image used for layers.
        tmp_path (Path): Output directory.

    Returns:
        Callable[..., RenderRequest]: Request factory.
    """

    def _make(row_tracks=(), col_tracks=(), n_layers=1, **kwargs):
        row = kwargs.pop("row", None) or AxisMetadata(
            labels=("r1", "r2", "r3", "r4"), tracks=tuple(row_tracks)
        )
        col = kwargs.pop("col", None) or AxisMetadata(
            labels=("c1", "c2", "c3"), tracks=tuple(col_tracks)
        )
        layers = kwargs.pop("layers", None)
        if layers is None:
            layers = tuple(MatrixLayer(pixel) for _ in range(n_layers))
        return RenderRequest(
            output_dir=str(tmp_path),
            name=kwargs.pop("name", "demo"),
            layers=layers,
            row=row,
            col=col,
            **kwargs,
        )

    return _make
