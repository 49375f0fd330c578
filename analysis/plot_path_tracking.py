"""
Path Tracking Plot
Actual vehicle path vs Reference test path

- Reference: from the trajectory modules (single source of truth)
- Actual: from the offboard test telemetry CSV

Usage:
  python -m analysis.plot_path_tracking --shape circle logs/circle_velocity.csv
"""

import argparse
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

# --------------------------------------------------
# Import trajectories (reference)
# --------------------------------------------------
from offboard_sitl.core.modes import PathShape, parse_path_shape
from offboard_sitl.trajectories.circle import CircleTrajectory
from offboard_sitl.trajectories.ellipse import EllipseTrajectory
from offboard_sitl.trajectories.figure8 import Figure8Trajectory
from offboard_sitl.trajectories.square import SquareTrajectory


REPO_ROOT = Path(__file__).resolve().parents[1]
OUTPUT_DIR = REPO_ROOT / "analysis" / "outputs"

SWEEPS = {
    PathShape.CIRCLE: CircleTrajectory,
    PathShape.EIGHT: Figure8Trajectory,
    PathShape.ELLIPSE: EllipseTrajectory,
}


def reference_path(shape: PathShape, points_per_segment: int = 20) -> np.ndarray:
    """
    Reference waypoints of ``shape`` as an (N, 3) array, densified by
    linear interpolation so that nearest-point distances approximate the
    distance to the path itself.
    """
    if shape is PathShape.SQUARE:
        waypoints = np.array(list(SquareTrajectory().corners()), dtype=float)
    else:
        trajectory = SWEEPS[shape]()
        waypoints = np.array([p for _, p in trajectory.samples()], dtype=float)

    alphas = np.linspace(0.0, 1.0, points_per_segment, endpoint=False)[:, None]
    segments = [a + alphas * (b - a) for a, b in zip(waypoints[:-1], waypoints[1:])]
    return np.vstack(segments + [waypoints[-1:]])


def tracking_error(
    df: pd.DataFrame,
    shape: PathShape,
    ref: Optional[np.ndarray] = None,
    chunk_size: int = 256,
) -> np.ndarray:
    """
    Distance [m] from every logged position to the nearest reference point.

    Positions are compared against the reference ``chunk_size`` rows at a
    time, which bounds memory for long logs.
    """
    actual = df[["x_m", "y_m", "z_m"]].to_numpy(dtype=float)
    if ref is None:
        ref = reference_path(shape)

    err = np.empty(len(actual))
    for start in range(0, len(actual), chunk_size):
        block = actual[start:start + chunk_size]
        diffs = block[:, None, :] - ref[None, :, :]
        err[start:start + chunk_size] = np.sqrt((diffs ** 2).sum(axis=2)).min(axis=1)
    return err


def plot_tracking(df: pd.DataFrame, shape: PathShape, out_png: Path) -> Path:
    ref = reference_path(shape)
    err = tracking_error(df, shape, ref=ref)

    fig, (ax_xy, ax_xz, ax_err) = plt.subplots(1, 3, figsize=(18, 6))

    ax_xy.plot(ref[:, 0], ref[:, 1], "--", linewidth=2, label=f"Reference {shape.value}")
    ax_xy.plot(df["x_m"], df["y_m"], linewidth=2, label="Actual vehicle path")
    ax_xy.scatter(df["x_m"].iloc[0], df["y_m"].iloc[0], c="green", s=60, label="Start")
    ax_xy.scatter(df["x_m"].iloc[-1], df["y_m"].iloc[-1], c="red", s=60, label="End")
    ax_xy.set_xlabel("x [m]")
    ax_xy.set_ylabel("y [m]")
    ax_xy.set_title("XY — Actual vs Reference")
    ax_xy.axis("equal")
    ax_xy.grid(True)
    ax_xy.legend()

    ax_xz.plot(ref[:, 0], ref[:, 2], "--", linewidth=2, label=f"Reference {shape.value}")
    ax_xz.plot(df["x_m"], df["z_m"], linewidth=2, label="Actual vehicle path")
    ax_xz.set_xlabel("x [m]")
    ax_xz.set_ylabel("z [m]")
    ax_xz.set_title("XZ — Actual vs Reference")
    ax_xz.grid(True)

    ax_err.plot(df["t"], err, linewidth=2)
    ax_err.set_xlabel("Time [s]")
    ax_err.set_ylabel("Distance to path [m]")
    ax_err.set_title(f"Tracking error (mean {err.mean():.2f} m, max {err.max():.2f} m)")
    ax_err.grid(True)

    out_png.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_png, dpi=200)
    plt.close(fig)
    return out_png


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot an offboard test log against its reference path.")
    parser.add_argument("csv", type=Path)
    parser.add_argument("--shape", default="square")
    parser.add_argument("--out", type=Path, default=None)
    args = parser.parse_args(argv)

    shape = parse_path_shape(args.shape)
    df = pd.read_csv(args.csv)
    out_png = args.out or OUTPUT_DIR / f"{args.csv.stem}_tracking.png"

    plot_tracking(df, shape, out_png)
    print(f"Saved plot → {out_png}")


if __name__ == "__main__":
    main()
