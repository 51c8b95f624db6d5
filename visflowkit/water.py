"""Wave-equation simulation of a water surface on a periodic grid."""

from __future__ import annotations

import numpy as np


class WaterSurface:
    """Height field advanced with an explicit finite-difference wave step."""

    def __init__(self, width: int = 512, height: int = 512, c: float = 4.0,
                 dx: float = 1.0, dt: float = 0.05) -> None:
        if width < 1 or height < 1:
            raise ValueError("the surface needs at least one cell")
        if dx == 0:
            raise ValueError("cell size must not be zero")
        self.width = width
        self.height = height
        self.alpha = (c * c * dt * dt) / (dx * dx)
        self.previous = np.zeros((height, width), dtype=np.float64)
        self.current = np.zeros((height, width), dtype=np.float64)
        self._image = np.zeros((height, width, 3), dtype=np.uint8)
        self._impulse = 1.0

    def step(self) -> None:
        """Advance the surface by one time step and refresh the image."""
        cur = self.current
        neighbours = (np.roll(cur, -1, axis=1) + np.roll(cur, 1, axis=1)
                      + np.roll(cur, -1, axis=0) + np.roll(cur, 1, axis=0))
        nxt = self.alpha * neighbours + (2 - 4 * self.alpha) * cur - self.previous
        self._image[..., 0] = np.where(nxt > 0, np.clip(nxt * 500, 0, 255), 0).astype(np.uint8)
        self._image[..., 1] = np.where(nxt < 0, np.clip(-nxt * 500, 0, 255), 0).astype(np.uint8)
        self.previous, self.current = cur, nxt

    def disturb(self, x_fraction: float, y_fraction: float) -> None:
        """Drop an impulse at a window position given as fractions from the top left.

        Impulses alternate between +1 and -1; positions outside the window
        are ignored.
        """
        if not (0 <= x_fraction <= 1 and 0 <= y_fraction <= 1):
            return
        column = min(int(self.width * x_fraction), self.width - 1)
        row = min(int(self.height * (1.0 - y_fraction)), self.height - 1)
        self.current[row, column] = self._impulse
        self._impulse = -self._impulse

    def image(self) -> np.ndarray:
        """RGB picture: red for crests, green for troughs."""
        return self._image