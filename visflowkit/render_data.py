"""Vertex buffers for drawing isolines, grids, particles and flow lines.

Every vertex is seven floats: x, y, z followed by an r, g, b, a colour.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from visflowkit.flowfield import Flowfield
from visflowkit.flowfield4d import Flowfield4D

FLOATS_PER_VERTEX = 7
ISOLINE_COLOR = (0.0, 0.0, 1.0, 1.0)
GRID_COLOR = (1.0, 1.0, 0.0, 0.2)


def _points(values, dims: int) -> np.ndarray:
    array = np.asarray(values, dtype=np.float64)
    if array.size == 0:
        return np.zeros((0, dims), dtype=np.float64)
    if array.ndim != 2 or array.shape[1] != dims:
        raise ValueError(f"expected a list of {dims}-component points")
    return array


def _with_color(positions: np.ndarray, color: Sequence[float]) -> np.ndarray:
    colors = np.broadcast_to(np.asarray(color, dtype=np.float64),
                             (len(positions), 4))
    return np.hstack([positions, colors]).ravel()


def isoline_render_data(vertices) -> np.ndarray:
    """Flat vertex data for a list of 2D isoline points, drawn in blue."""
    points = _points(vertices, 2)
    positions = np.hstack([points, np.zeros((len(points), 1))])
    return _with_color(positions, ISOLINE_COLOR)


def grid_lines(width: int, height: int) -> np.ndarray:
    """Line list through the pixel centres of a width x height image.

    One horizontal line per row comes first, then one vertical line per
    column, all in normalized device coordinates.
    """
    if width < 0 or height < 0:
        raise ValueError("grid dimensions must not be negative")
    if width == 0 or height == 0:
        return np.zeros(0, dtype=np.float64)
    rows = (np.arange(height) / height + 0.5 / height) * 2 - 1
    columns = (np.arange(width) / width + 0.5 / width) * 2 - 1
    horizontal = [p for fy in rows for p in ((-1.0, fy, 0.0), (1.0, fy, 0.0))]
    vertical = [p for fx in columns for p in ((fx, -1.0, 0.0), (fx, 1.0, 0.0))]
    positions = np.array(horizontal + vertical, dtype=np.float64)
    return _with_color(positions, GRID_COLOR)


def random_particles(count: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """Positions of particles spread uniformly over the unit cube."""
    if count < 0:
        raise ValueError("particle count must not be negative")
    generator = rng if rng is not None else np.random.default_rng()
    return generator.random((count, 3))


def _position_color_pairs(points: np.ndarray) -> np.ndarray:
    """Map unit-cube points to [-1, 1]^3 and colour them by position."""
    return np.hstack([points * 2 - 1, points, np.ones((len(points), 1))])


def particle_render_data(positions) -> np.ndarray:
    """Flat point data for particles in the unit cube."""
    points = _points(positions, 3)
    return _position_color_pairs(points).ravel()


def line_render_data(points, line_count: int, line_length: int) -> np.ndarray:
    """Line-list data for integral curves stored one after another.

    Each curve holds line_length points. A curve ends early at the first
    point that repeats its predecessor.
    """
    if line_count < 0 or line_length < 0:
        raise ValueError("line count and length must not be negative")
    samples = _points(points, 3)
    if len(samples) != line_count * line_length:
        raise ValueError(
            f"expected {line_count * line_length} points, got {len(samples)}"
        )
    segments: list[np.ndarray] = []
    for curve in samples.reshape(line_count, line_length, 3):
        for start, end in zip(curve[:-1], curve[1:]):
            if np.array_equal(start, end):
                break
            segments.append(np.stack([start, end]))
    if not segments:
        return np.zeros(0, dtype=np.float64)
    return _position_color_pairs(np.concatenate(segments)).ravel()


def advect(flow: Flowfield | Flowfield4D, pos: Sequence[float], t: float,
           dt: float) -> np.ndarray:
    """One Euler step of a particle; particles outside the unit cube stay put."""
    p = np.asarray(pos, dtype=np.float64)
    if p.shape != (3,):
        raise ValueError("position must have three components")
    if (p < 0.0).any() or (p > 1.0).any():
        return p.copy()
    if isinstance(flow, Flowfield4D):
        velocity = flow.interpolate(p, t)
    else:
        velocity = flow.interpolate(p)
    return p + velocity * dt