"""Arcball rotation control mapping window positions onto a sphere."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def _window(window_size: Sequence[int]) -> tuple[int, int]:
    width, height = (int(v) for v in window_size)
    if width < 2 or height < 2:
        raise ValueError("window must be at least 2 x 2 pixels")
    return width, height


class ArcBall:
    """Turns mouse drags into rotation quaternions (x, y, z, w)."""

    def __init__(self, window_size: Sequence[int], radius: float = 1.0) -> None:
        self.window_size = _window(window_size)
        self.radius = float(radius)
        self.start_drag = np.zeros(3, dtype=np.float64)

    def set_window_size(self, window_size: Sequence[int]) -> None:
        self.window_size = _window(window_size)

    def set_radius(self, radius: float) -> None:
        self.radius = float(radius)

    def click(self, position: Sequence[float]) -> None:
        """Start a drag at a window position."""
        self.start_drag = self.map_to_sphere(position)

    def drag(self, position: Sequence[float]) -> tuple[float, float, float, float]:
        """Rotation from the drag start to a position, as (x, y, z, w)."""
        current = self.map_to_sphere(position)
        axis = np.cross(self.start_drag, current)
        dot = float(np.dot(self.start_drag, current))
        if float(np.linalg.norm(axis)) > 1.0e-5:
            return float(axis[0]), float(axis[1]), float(axis[2]), dot
        return 0.0, 0.0, 0.0, 0.0

    def map_to_sphere(self, position: Sequence[float]) -> np.ndarray:
        """Point on (or under) the arcball sphere for a window position."""
        px, py = (float(v) for v in position)
        width, height = self.window_size
        x = -((2.0 * px / float(width - 1)) - 1.0)
        y = (2.0 * py / float(height - 1)) - 1.0
        length = math.hypot(x, y)
        if length > self.radius:
            norm = self.radius / length
            return np.array([x * norm, y * norm, 0.0])
        return np.array([x, y, length - self.radius])