"""Scalar volumes of 8-bit voxels with a physical aspect ratio."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _as_scale(scale) -> np.ndarray:
    vector = np.asarray(scale, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError("scale must have three components")
    return vector.copy()


@dataclass
class Volume:
    """A width x height x depth grid of bytes, x varying fastest."""

    width: int = 0
    height: int = 0
    depth: int = 0
    scale: np.ndarray = field(default_factory=lambda: np.zeros(3))
    data: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.uint8))
    normals: np.ndarray = field(default_factory=lambda: np.zeros((0, 3)))
    max_size: int = 0

    def __post_init__(self) -> None:
        self.scale = _as_scale(self.scale)
        self.data = np.asarray(self.data, dtype=np.uint8).reshape(-1)
        self.normals = np.asarray(self.normals, dtype=np.float64).reshape(-1, 3)

    @property
    def voxel_count(self) -> int:
        return self.width * self.height * self.depth

    def normalize_scale(self) -> None:
        """Rescale so that the largest edge of the volume has extent one."""
        self.max_size = max(self.width, self.height, self.depth)
        if self.max_size == 0:
            raise ValueError("cannot normalize the scale of an empty volume")
        dims = np.array([self.width, self.height, self.depth], dtype=np.float64)
        extent = self.scale * dims / float(self.max_size)
        largest = float(extent.max())
        if largest == 0.0:
            raise ValueError("cannot normalize a zero scale")
        self.scale = self.scale / largest

    def _grid(self) -> np.ndarray:
        count = self.voxel_count
        if len(self.data) < count:
            raise ValueError(
                f"volume holds {len(self.data)} voxels, {count} are needed"
            )
        if count == 0:
            raise ValueError("the volume is empty")
        return self.data[:count].reshape(self.depth, self.height, self.width)

    def _sample(self, us: np.ndarray, vs: np.ndarray, ws: np.ndarray) -> np.ndarray:
        grid = self._grid().astype(np.float64)
        coords = []
        for t, size in ((us, self.width), (vs, self.height), (ws, self.depth)):
            index = np.asarray(t, dtype=np.float64) * size - 1.0
            low = np.floor(index)
            alpha = index - low
            lo = np.clip(low, 0, size - 1).astype(np.int64)
            hi = np.clip(low + 1, 0, size - 1).astype(np.int64)
            coords.append((lo, hi, alpha))
        (x0, x1, ax), (y0, y1, ay), (z0, z1, az) = coords

        def corner(x, y, z):
            return grid[z, y, x]

        front = ((corner(x0, y0, z0) * (1 - ax) + corner(x1, y0, z0) * ax) * (1 - ay)
                 + (corner(x0, y1, z0) * (1 - ax) + corner(x1, y1, z0) * ax) * ay)
        back = ((corner(x0, y0, z1) * (1 - ax) + corner(x1, y0, z1) * ax) * (1 - ay)
                + (corner(x0, y1, z1) * (1 - ax) + corner(x1, y1, z1) * ax) * ay)
        values = front * (1 - az) + back * az
        return np.clip(np.trunc(values), 0, 255).astype(np.uint8)

    def value_at(self, u: float, v: float, w: float) -> int:
        """Trilinearly sampled value at normalized coordinates.

        The coordinate u maps to voxel position u * width - 1; positions
        beyond the grid take the value of the nearest border voxel.
        """
        sample = self._sample(np.array([u]), np.array([v]), np.array([w]))
        return int(sample[0])

    def resample(self, target_width: int, target_height: int, target_depth: int) -> "Volume":
        """A new volume of the given resolution sampled from this one."""
        result = Volume(target_width, target_height, target_depth, scale=self.scale)
        result.normalize_scale()
        ws, vs, us = np.meshgrid(
            np.arange(target_depth, dtype=np.float64) / target_depth,
            np.arange(target_height, dtype=np.float64) / target_height,
            np.arange(target_width, dtype=np.float64) / target_width,
            indexing="ij",
        )
        result.data = self._sample(us.ravel(), vs.ravel(), ws.ravel())
        return result

    def compute_normals(self) -> None:
        """Central-difference gradients for interior voxels.

        Border voxels and voxels without gradient keep a zero normal.
        """
        self.normals = np.zeros((len(self.data), 3), dtype=np.float64)
        if min(self.width, self.height, self.depth) < 3:
            return
        grid = self._grid().astype(np.float64)
        gx = grid[1:-1, 1:-1, :-2] - grid[1:-1, 1:-1, 2:]
        gy = grid[1:-1, :-2, 1:-1] - grid[1:-1, 2:, 1:-1]
        gz = grid[:-2, 1:-1, 1:-1] - grid[2:, 1:-1, 1:-1]
        gradient = np.stack([gx, gy, gz], axis=-1)
        length = np.linalg.norm(gradient, axis=-1, keepdims=True)
        unit = np.divide(gradient, length, out=np.zeros_like(gradient), where=length > 0)
        view = self.normals[: self.voxel_count].reshape(
            self.depth, self.height, self.width, 3
        )
        view[1:-1, 1:-1, 1:-1] = unit