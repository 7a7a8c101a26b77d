"""
tests/test_model
~~~~~~~~~~~~~~~~
"""

import numpy as np
import pandas as pd
import pytest

from chmpdf import AxisMetadata, BinningSpec, CovariateTrack, DistributionSummary, MatrixLayer, RenderRequest
from chmpdf.core.model import CUT_VALUE, PLOT, display_label, is_missing


@pytest.mark.api
def test_display_label_strips_pipe_suffix():
    """
    Ensures the pipe-delimited suffix of an axis label is not displayed.
    """
    assert display_label("GeneA|extra") == "GeneA"
    assert display_label("GeneA") == "GeneA"


@pytest.mark.unit
def test_display_label_keeps_leading_pipe():
    """
    Ensures a label starting with a pipe is displayed unchanged.
    """
    assert display_label("|x") == "|x"


@pytest.mark.api
def test_display_label_hides_cut_and_missing():
    """
    Ensures cut and missing labels produce no text.
    """
    assert display_label(CUT_VALUE) is None
    assert display_label(None) is None


@pytest.mark.unit
def test_is_missing_handles_na_spellings_and_nan():
    """
    Ensures NA spellings, None and NaN count as missing values.
    """
    assert is_missing("NA")
    assert is_missing("")
    assert is_missing(None)
    assert is_missing(float("nan"))
    assert not is_missing("liver")
    assert not is_missing(0)


@pytest.mark.api
def test_binning_spec_bin_count_includes_missing_bin():
    """
    Ensures every binning spec carries one extra bin for missing values.
    """
    assert BinningSpec.discrete(["a", "b"]).n_bins == 3
    assert BinningSpec.continuous([0.5, 1, 2]).n_bins == 4
    assert BinningSpec.continuous([0.5, 1, 2]).breaks == ("0.5", "1", "2")


@pytest.mark.unit
def test_binning_spec_rejects_unknown_kind():
    """
    Ensures an unknown binning kind is rejected.
    """
    with pytest.raises(ValueError):
        BinningSpec("ordinal", ("a",))


@pytest.mark.api
def test_plot_track_is_three_units_high():
    """
    Ensures plot-mode tracks are three times as thick as bar-mode tracks.
    """
    spec = BinningSpec.continuous(["1"])
    bar = CovariateTrack("bar", spec)
    plot = CovariateTrack("plot", spec, mode=PLOT)

    assert bar.height(10) == 10
    assert plot.height(10) == 30


@pytest.mark.unit
def test_track_rejects_bad_mode_and_name():
    """
    Ensures invalid track modes and empty names are rejected.
    """
    spec = BinningSpec.discrete(["a"])
    with pytest.raises(ValueError):
        CovariateTrack("x", spec, mode="line")
    with pytest.raises(ValueError):
        CovariateTrack("", spec)


@pytest.mark.api
def test_track_from_series_converts_values_and_bounds():
    """
    Ensures from_series() stringifies values, maps NaN to None and derives plot bounds.
    """
    series = pd.Series([1.5, np.nan, 4.0, 2.0])
    track = CovariateTrack.from_series("Score", series, BinningSpec.continuous(["2", "4"]), mode=PLOT)

    assert track.values == ("1.5", None, "4.0", "2.0")
    assert track.low_bound == "1.5"
    assert track.high_bound == "4.0"


@pytest.mark.unit
def test_track_from_series_keeps_explicit_bounds():
    """
    Ensures explicit bounds passed to from_series() are not overwritten.
    """
    series = pd.Series([1.0, 3.0])
    track = CovariateTrack.from_series(
        "Score", series, BinningSpec.continuous(["2"]), mode=PLOT, low_bound="0", high_bound="10"
    )

    assert (track.low_bound, track.high_bound) == ("0", "10")


@pytest.mark.api
def test_axis_visible_tracks_and_total(tissue_track):
    """
    Ensures hidden tracks are excluded from the axis and its track thickness.
    """
    hidden = CovariateTrack("Hidden", BinningSpec.discrete(["a"]), visible=False)
    plot = CovariateTrack("Score", BinningSpec.continuous(["1"]), mode=PLOT)
    axis = AxisMetadata(labels=("a", "b"), tracks=(tissue_track, hidden, plot))

    assert [t.name for t in axis.visible_tracks()] == ["Tissue", "Score"]
    assert axis.track_total(10) == 40
    assert axis.length == 2
    assert not axis.has_dendrogram


@pytest.mark.unit
def test_distribution_summary_requires_counts():
    """
    Ensures a distribution summary without counts is rejected.
    """
    with pytest.raises(ValueError):
        DistributionSummary(missing_count=0, counts=(), thresholds=())


@pytest.mark.unit
def test_distribution_max_count_includes_missing():
    """
    Ensures the missing count takes part in the histogram scale.
    """
    summary = DistributionSummary(missing_count=12, counts=(3, 7), thresholds=(0.5,))

    assert summary.max_count == 12


@pytest.mark.api
def test_render_request_output_path_and_legend_flag(pixel, tissue_track, tmp_path):
    """
    Ensures the output path joins directory and name, and legends follow visible tracks.
    """
    request = RenderRequest(
        output_dir=str(tmp_path),
        name="study",
        layers=[MatrixLayer(pixel)],
        col=AxisMetadata(labels=("a",), tracks=(tissue_track,)),
    )

    assert request.output_path == tmp_path / "study.pdf"
    assert request.has_legends
    assert request.distribution is None


@pytest.mark.unit
def test_render_request_requires_name(pixel, tmp_path):
    """
    Ensures an empty document name is rejected.
    """
    with pytest.raises(ValueError):
        RenderRequest(output_dir=str(tmp_path), name="", layers=[MatrixLayer(pixel)])
