"""Hue/saturation colour picking with full value."""

from __future__ import annotations

import math

import numpy as np


def hsv_to_rgb(x: float, y: float) -> tuple[float, float, float]:
    """RGB of hue x * 360 degrees and saturation y at full value."""
    value = 1.0
    chroma = value * y
    hue_prime = math.fmod(x * 360.0 / 60.0, 6)
    secondary = chroma * (1 - abs(math.fmod(hue_prime, 2) - 1))
    sectors = {
        0: (chroma, secondary, 0.0),
        1: (secondary, chroma, 0.0),
        2: (0.0, chroma, secondary),
        3: (0.0, secondary, chroma),
        4: (secondary, 0.0, chroma),
        5: (chroma, 0.0, secondary),
    }
    sector = math.floor(hue_prime) if 0 <= hue_prime < 6 else None
    red, green, blue = sectors.get(sector, (0.0, 0.0, 0.0))
    m = value - chroma
    return red + m, green + m, blue + m


def hsv_picture(width: int = 640, height: int = 480) -> np.ndarray:
    """RGBA picture: hue across the columns, saturation down the rows."""
    if width < 1 or height < 1:
        raise ValueError("picture must have at least one pixel")
    xs = np.arange(width, dtype=np.float64) / width
    ys = np.arange(height, dtype=np.float64) / height
    chroma = np.broadcast_to(ys[:, None], (height, width))
    hue_prime = np.broadcast_to(np.fmod(xs * 360.0 / 60.0, 6)[None, :], (height, width))
    secondary = chroma * (1 - np.abs(np.fmod(hue_prime, 2) - 1))
    zero = np.zeros((height, width))
    sector = np.floor(hue_prime)
    conditions = [sector == k for k in range(6)]
    red = np.select(conditions, [chroma, secondary, zero, zero, secondary, chroma], zero)
    green = np.select(conditions, [secondary, chroma, chroma, secondary, zero, zero], zero)
    blue = np.select(conditions, [zero, zero, secondary, chroma, chroma, secondary], zero)
    m = 1.0 - chroma
    rgb = np.stack([red + m, green + m, blue + m], axis=-1)
    picture = np.empty((height, width, 4), dtype=np.uint8)
    picture[..., :3] = np.clip(rgb * 255.0, 0, 255).astype(np.uint8)
    picture[..., 3] = 255
    return picture