"""Tests for the post-flight path tracking analysis."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

from analysis.plot_path_tracking import plot_tracking, reference_path, tracking_error
from offboard_sitl.core.modes import PathShape
from offboard_sitl.trajectories.circle import CircleTrajectory


def _log(points) -> pd.DataFrame:
    points = np.asarray(points, dtype=float)
    return pd.DataFrame({
        "t": np.arange(len(points)) * 0.1,
        "x_m": points[:, 0],
        "y_m": points[:, 1],
        "z_m": points[:, 2],
    })


def test_reference_path_passes_through_waypoints() -> None:
    ref = reference_path(PathShape.SQUARE, points_per_segment=4)

    # 4 segments of 4 points plus the closing corner
    assert ref.shape == (17, 3)
    assert tuple(ref[0]) == (2.0, 2.0, 1.0)
    assert tuple(ref[4]) == (-2.0, 2.0, 1.0)
    assert tuple(ref[-1]) == (2.0, 2.0, 1.0)


def test_perfect_circle_has_no_tracking_error() -> None:
    df = _log([p for _, p in CircleTrajectory().samples()])

    assert tracking_error(df, PathShape.CIRCLE).max() == pytest.approx(0.0, abs=1e-9)


def test_altitude_offset_shows_as_tracking_error() -> None:
    df = _log([(x, y, z + 0.5) for _, (x, y, z) in CircleTrajectory().samples()])

    assert tracking_error(df, PathShape.CIRCLE) == pytest.approx(np.full(361, 0.5))


def test_square_error_measured_against_edges() -> None:
    df = _log([(0.0, 2.0, 1.0), (-2.0, 0.0, 1.0), (0.0, 0.0, 1.0)])

    err = tracking_error(df, PathShape.SQUARE)

    assert err[0] == pytest.approx(0.0, abs=1e-12)
    assert err[1] == pytest.approx(0.0, abs=1e-12)
    assert err[2] == pytest.approx(2.0)


def test_tracking_error_same_for_any_chunk_size() -> None:
    df = _log([(x + 0.3, y, z) for _, (x, y, z) in CircleTrajectory().samples()])

    whole = tracking_error(df, PathShape.CIRCLE)

    assert tracking_error(df, PathShape.CIRCLE, chunk_size=7) == pytest.approx(whole)
    assert tracking_error(df, PathShape.CIRCLE, chunk_size=1000) == pytest.approx(whole)


def test_tracking_error_reuses_given_reference() -> None:
    df = _log([(0.0, 2.0, 1.0), (0.0, 0.0, 1.0)])
    ref = reference_path(PathShape.SQUARE)

    assert tracking_error(df, PathShape.SQUARE, ref=ref) == pytest.approx(
        tracking_error(df, PathShape.SQUARE)
    )
    # a caller-supplied reference wins over the shape's own
    assert tracking_error(df, PathShape.SQUARE, ref=np.zeros((1, 3))) == pytest.approx([np.sqrt(5.0), 1.0])


def test_plot_tracking_writes_png(tmp_path) -> None:
    df = _log([p for _, p in CircleTrajectory().samples()])

    out = plot_tracking(df, PathShape.CIRCLE, tmp_path / "plots" / "circle.png")

    assert out.exists()
    assert out.stat().st_size > 0
