"""Leaf-node numeric helpers over Nx2 point arrays. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray


def as_array(points: Iterable[tuple[float, float]]) -> NDArray[np.float64]:
    """Pack (x, y) pairs into an Nx2 float array (empty input gives shape (0, 2))."""
    arr = np.asarray(list(points), dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over an implicitly closed ring. Positive = CCW, negative = CW."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(0.5 * np.sum(x * y_next - x_next * y))


def shoelace_area(points: NDArray[np.float64]) -> float:
    """Unsigned polygon area; vertex order only affects the discarded sign."""
    return abs(signed_area(points))


def ring_length(points: NDArray[np.float64]) -> float:
    """Perimeter of an implicitly closed ring (includes the last→first edge)."""
    if len(points) < 2:
        return 0.0
    diffs = np.roll(points, -1, axis=0) - points
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Mean of a point set (vertex average, not the area centroid)."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))
