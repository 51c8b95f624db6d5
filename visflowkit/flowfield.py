"""Steady three-dimensional vector fields sampled on a regular grid."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from enum import Enum
from os import PathLike

import numpy as np

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class DemoType(Enum):
    """Analytic fields that can be generated for demonstration."""

    DRAIN = "drain"
    SADDLE = "saddle"
    CRITICAL = "critical"


def _demo_vectors(size: int, demo: DemoType) -> np.ndarray:
    """Vectors of a demo field on a size^3 grid, x varying fastest."""
    z, y, x = np.indices((size, size, size), dtype=np.float64) / max(size, 1)
    if demo is DemoType.DRAIN:
        vx = (0.5 - y) + (0.5 - x) / 10.0
        vy = (x - 0.5) + (0.5 - y) / 10.0
        vz = -z / 10.0
    elif demo is DemoType.SADDLE:
        vx = 0.5 - x
        vy = y - 0.5
        vz = 0.5 - z
    elif demo is DemoType.CRITICAL:
        vx = (x - 0.1) * (y - 0.3) * (x - 0.8)
        vy = (y - 0.7) * (z - 0.2) * (x - 0.3)
        vz = (z - 0.9) * (z - 0.6) * (x - 0.5)
    else:
        raise ValueError(f"unknown demo type {demo!r}")
    return np.stack([vx, vy, vz], axis=-1).reshape(-1, 3)


def _lerp(a: np.ndarray, b: np.ndarray, alpha: float) -> np.ndarray:
    return a * (1.0 - alpha) + b * alpha


def _leading_int(token: str) -> int:
    match = _INT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"invalid integer {token!r}")
    return int(match.group())


def _leading_float(token: str) -> float:
    match = _FLOAT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"invalid number {token!r}")
    return float(match.group())


class Flowfield:
    """A vector field on a regular grid spanning the unit cube."""

    def __init__(self, size_x: int, size_y: int, size_z: int, data=None) -> None:
        if min(size_x, size_y, size_z) < 0:
            raise ValueError("grid sizes must not be negative")
        self.size_x = size_x
        self.size_y = size_y
        self.size_z = size_z
        count = size_x * size_y * size_z
        if data is None:
            self.data = np.zeros((count, 3), dtype=np.float64)
        else:
            self.data = np.asarray(data, dtype=np.float64).reshape(count, 3)

    @property
    def size(self) -> tuple[int, int, int]:
        return self.size_x, self.size_y, self.size_z

    def _vector(self, x: int, y: int, z: int) -> np.ndarray:
        return self.data[x + y * self.size_y + z * self.size_x * self.size_y]

    def interpolate(self, pos: Sequence[float]) -> np.ndarray:
        """Trilinearly interpolated vector at a position in [0, 1]^3."""
        p = np.asarray(pos, dtype=np.float64)
        if p.shape != (3,):
            raise ValueError("position must have three components")
        extent = np.array(self.size, dtype=np.float64) - 1.0
        scaled = p * extent
        lo = np.floor(scaled).astype(np.int64)
        hi = np.ceil(scaled).astype(np.int64)
        if (lo < 0).any() or (hi > extent).any():
            raise IndexError(f"position {tuple(p)} lies outside the field")
        alpha, beta, gamma = scaled - lo
        fx, fy, fz = (int(v) for v in lo)
        cx, cy, cz = (int(v) for v in hi)
        v = self._vector
        front = _lerp(_lerp(v(fx, fy, fz), v(cx, fy, fz), alpha),
                      _lerp(v(fx, cy, fz), v(cx, cy, fz), alpha), beta)
        back = _lerp(_lerp(v(fx, fy, cz), v(cx, fy, cz), alpha),
                     _lerp(v(fx, cy, cz), v(cx, cy, cz), alpha), beta)
        return _lerp(front, back, gamma)

    @classmethod
    def gen_demo(cls, size: int, demo: DemoType) -> "Flowfield":
        """A cubic field of the given edge length filled with a demo flow."""
        return cls(size, size, size, _demo_vectors(size, demo))

    @classmethod
    def from_file(cls, filename: str | PathLike) -> "Flowfield":
        """Read a comma separated field file.

        The file holds the dimension count, the grid sizes, the number of
        time steps and then the vector components, all separated by commas.
        """
        with open(filename, encoding="latin-1") as handle:
            tokens: Iterator[str] = iter(handle.read().split(","))

        def element() -> str:
            return next(tokens, "")

        dims = _leading_int(element())
        if dims < 1 or dims > 3:
            raise ValueError(f"Invalid dimension {dims}")

        size_x = size_y = size_z = 1
        size_x = _leading_int(element())
        if dims == 2:
            size_y = _leading_int(element())
        if dims == 3:
            size_z = _leading_int(element())
        if min(size_x, size_y, size_z) < 0:
            raise ValueError("grid sizes must not be negative")

        timesteps = _leading_int(element())
        if timesteps < 1:
            raise ValueError(f"Invalid timesteps {timesteps}")

        field = cls(size_x, size_y, size_z)
        for index in range(size_x * size_y * size_z):
            x = _leading_float(element())
            y = _leading_float(element()) if dims == 2 else 0.0
            z = _leading_float(element()) if dims == 3 else 0.0
            field.data[index] = (x, y, z)
        return field