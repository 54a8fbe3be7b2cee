"""Snapshots of a travelling sine wave written as polyline files."""

import argparse
import math
from pathlib import Path

from .output import Point3D, write_polyline


def wave_points(
    t: float,
    num_pts: int = 101,
    wavelength: float = 1.0,
    frequency: float = 1.0,
    amplitude: float = 1.0,
) -> list[Point3D]:
    """Return the wave y = A sin(kx - wt) over two wavelengths at time ``t``."""
    if num_pts < 2:
        raise ValueError("at least two points are required")
    dx = 2 * wavelength / (num_pts - 1)
    k = 2 * math.pi / wavelength
    omega = 2 * math.pi * frequency
    return [
        Point3D(i * dx, amplitude * math.sin(k * i * dx - omega * t), 0.0)
        for i in range(num_pts)
    ]


def main(argv: list[str] | None = None) -> int:
    """Write one period of the wave as test0000.vtp, test0001.vtp, ..."""
    parser = argparse.ArgumentParser(description="Write travelling-wave snapshots.")
    parser.add_argument("--outdir", type=Path, default=Path("."))
    args = parser.parse_args(argv)

    num_tpts = 51
    frequency = 1.0
    dt = (1.0 / frequency) / num_tpts
    args.outdir.mkdir(parents=True, exist_ok=True)
    for step in range(num_tpts):
        points = wave_points(step * dt, frequency=frequency)
        write_polyline(args.outdir / f"test{step:04}.vtp", points)
    return 0