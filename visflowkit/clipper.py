"""Clipping of triangle meshes against a plane, with capping of the cut."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import groupby

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def _as_points(positions) -> np.ndarray:
    return np.asarray(positions, dtype=np.float64).reshape(-1, 3)


def _as_normal(normal) -> np.ndarray:
    vector = np.asarray(normal, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError("the plane normal must have three components")
    return vector


def _stack(points: list) -> np.ndarray:
    if not points:
        return np.zeros((0, 3), dtype=np.float64)
    return np.array(points, dtype=np.float64).reshape(-1, 3)


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        return np.zeros(3, dtype=np.float64)
    return vector / length


def _signed_distance(normal: np.ndarray, point: np.ndarray, d: float) -> float:
    value = float(np.dot(normal, point)) + d
    return 0.0 if abs(value) < 2 * _EPSILON else value


def _intersect(la: np.ndarray, lb: np.ndarray, normal: np.ndarray, d: float) -> np.ndarray:
    """Where the segment la-lb meets the plane; the origin if it runs parallel."""
    denom = float(np.dot(normal, la - lb))
    if abs(denom) <= _EPSILON:
        return np.zeros(3, dtype=np.float64)
    t = (float(np.dot(normal, la)) + d) / denom
    return la + (lb - la) * t


def _split_triangle(a, b, c, fa, fb, fc, normal, d):
    """Split a triangle spanning the plane; returns (kept triangles, cut points)."""
    # Rotate so that c lies alone on one side and a, b on the other.
    if fa * fc >= 0:
        a, b, c = c, a, b
        fa, fb, fc = fc, fa, fb
    elif fb * fc >= 0:
        a, b, c = b, c, a
        fa, fb, fc = fb, fc, fa

    cut_a = _intersect(a, c, normal, d)
    cut_b = _intersect(b, c, normal, d)

    if fc >= 0:
        kept = [a, b, cut_a, b, cut_b, cut_a]
    else:
        kept = [cut_a, cut_b, c]
    return kept, [cut_a, cut_b]


def tri_plane(positions, normal: Sequence[float], d: float) -> tuple[np.ndarray, np.ndarray]:
    """Clip a triangle list against the plane normal . p + d = 0.

    The part on the negative side is kept. Returns the clipped triangle
    list and the points created on the plane. A list whose length is not
    a multiple of three is returned unchanged with no new points.
    """
    points = _as_points(positions)
    plane_normal = _as_normal(normal)
    if len(points) % 3 != 0:
        return points.copy(), _stack([])

    kept: list[np.ndarray] = []
    created: list[np.ndarray] = []
    for a, b, c in points.reshape(-1, 3, 3):
        fa, fb, fc = (_signed_distance(plane_normal, p, d) for p in (a, b, c))
        if fa >= 0 and fb >= 0 and fc >= 0:
            continue
        if fa <= 0 and fb <= 0 and fc <= 0:
            kept.extend((a, b, c))
            continue
        tris, cuts = _split_triangle(a, b, c, fa, fb, fc, plane_normal, d)
        kept.extend(tris)
        created.extend(cuts)
    return _stack(kept), _stack(created)


def mesh_plane(positions, normal: Sequence[float], d: float) -> np.ndarray:
    """Clip a closed triangle mesh against a plane and close the cut with a fan."""
    plane_normal = _as_normal(normal)
    clipped, created = tri_plane(positions, plane_normal, d)
    if len(created) < 3:
        return clipped

    unique = [np.array(key) for key, _ in groupby(sorted(tuple(p) for p in created))]
    center = np.mean(unique, axis=0)
    reference = _normalize(unique[0] - center)

    def angle(point: np.ndarray) -> float:
        direction = _normalize(point - center)
        cosine = float(np.dot(reference, direction))
        sine = float(np.dot(np.cross(direction, reference), plane_normal))
        return math.atan2(sine, cosine)

    ordered = sorted(unique, key=angle, reverse=True)
    fan = [
        vertex
        for previous, current in zip(ordered[1:-1], ordered[2:])
        for vertex in (ordered[0], previous, current)
    ]
    if not fan:
        return clipped
    return np.concatenate([clipped, _stack(fan)])


def mesh_plane_flat(data: Sequence[float], normal: Sequence[float], d: float) -> np.ndarray:
    """Like mesh_plane, for a flat x, y, z, x, y, z, ... coordinate list."""
    flat = np.asarray(data, dtype=np.float64).ravel()
    usable = (len(flat) // 3) * 3
    return mesh_plane(flat[:usable].reshape(-1, 3), normal, d).ravel()