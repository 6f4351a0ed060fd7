"""Geometric operations on gesture polylines.

This module provides the distance utilities the resampler builds on:
- Point-to-point distance
- Segment lengths of a polyline given as coordinate arrays
- Total polyline length

All functions are pure, stateless, and designed for use in parallel processing.
"""

import math
from collections.abc import Sequence

import numpy as np

from slidedict.domain import Point


def distance(a: Point, b: Point) -> float:
    """Calculate the Euclidean distance between two points.

    Examples:
        >>> distance(Point(0.0, 0.0), Point(3.0, 4.0))
        5.0
    """
    return math.hypot(b.x - a.x, b.y - a.y)


def segment_lengths(xs: Sequence[float], ys: Sequence[float]) -> np.ndarray:
    """Calculate the length of each segment of a polyline.

    Args:
        xs: X coordinates of the polyline points
        ys: Y coordinates of the polyline points

    Returns:
        Array of ``len(xs) - 1`` distances between consecutive points.
        Empty for polylines with fewer than 2 points.

    Raises:
        ValueError: If xs and ys differ in length
    """
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if x.shape != y.shape:
        raise ValueError(f"Coordinate arrays differ in length: {len(x)} != {len(y)}")
    if len(x) < 2:
        return np.zeros(0, dtype=float)
    return np.hypot(np.diff(x), np.diff(y))


def polygon_length(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Calculate the total length of a polyline.

    Args:
        xs: X coordinates of the polyline points
        ys: Y coordinates of the polyline points

    Returns:
        Sum of all segment lengths; 0.0 for fewer than 2 points
    """
    return float(np.sum(segment_lengths(xs, ys)))


def polyline_coordinates(points: Sequence[Point]) -> tuple[np.ndarray, np.ndarray]:
    """Split a polyline into x and y coordinate arrays, in point order."""
    xs = np.array([p.x for p in points], dtype=float)
    ys = np.array([p.y for p in points], dtype=float)
    return xs, ys
