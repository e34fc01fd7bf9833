"""
Plane geometry helpers for paths and the car sprite.
"""
import math
from typing import List, Sequence

import numpy as np

from simulation.model import Point

# Car body and wheel rectangles in the car's own frame: (x, y, width, height),
# nose pointing along +x.
CAR_BODY = (-15.0, -10.0, 30.0, 20.0)
CAR_WHEELS = (
    (-12.0, -12.0, 8.0, 4.0),
    (-12.0, 8.0, 8.0, 4.0),
    (4.0, -12.0, 8.0, 4.0),
    (4.0, 8.0, 8.0, 4.0),
)


def path_length(path: Sequence[Point]) -> float:
    """Total length of the polyline through `path` (0 for fewer than two points)."""
    if len(path) < 2:
        return 0.0
    return sum(math.hypot(b.x - a.x, b.y - a.y) for a, b in zip(path, path[1:]))


def path_arrays(path: Sequence[Point]):
    """Split a path into x and y numpy arrays for plotting."""
    xs = np.array([p.x for p in path], dtype=float)
    ys = np.array([p.y for p in path], dtype=float)
    return xs, ys


def _rect_corners(x: float, y: float, w: float, h: float) -> np.ndarray:
    return np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]], dtype=float)


def car_outline(position: Point, heading: float) -> List[np.ndarray]:
    """
    Corner polygons for the car sprite placed at `position` and rotated by `heading`.

    Returns:
        List of (4, 2) arrays: the body first, then the four wheels.
    """
    c, s = math.cos(heading), math.sin(heading)
    rotation = np.array([[c, -s], [s, c]])
    offset = np.array([position.x, position.y])

    shapes = []
    for rect in (CAR_BODY, *CAR_WHEELS):
        corners = _rect_corners(*rect)
        shapes.append(corners @ rotation.T + offset)
    return shapes
