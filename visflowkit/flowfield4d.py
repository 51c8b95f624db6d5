"""Unsteady vector fields made of a cycle of grid time steps."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from visflowkit.flowfield import DemoType, Flowfield


class Flowfield4D:
    """A time-dependent vector field; time steps repeat cyclically."""

    def __init__(self, size_x: int, size_y: int, size_z: int, timesteps: int) -> None:
        if timesteps < 1:
            raise ValueError("a field needs at least one time step")
        self.size_x = size_x
        self.size_y = size_y
        self.size_z = size_z
        self.steps = [Flowfield(size_x, size_y, size_z) for _ in range(timesteps)]

    def interpolate_step(self, pos: Sequence[float], time_step: int) -> np.ndarray:
        """Spatially interpolated vector of one time step."""
        if time_step < 0:
            raise ValueError("time step must not be negative")
        return self.steps[time_step % len(self.steps)].interpolate(pos)

    def interpolate(self, pos: Sequence[float], time: float) -> np.ndarray:
        """Vector interpolated in space and linearly in time."""
        if time < 0:
            raise ValueError("time must not be negative")
        floor_time = math.floor(time)
        ceil_time = math.ceil(time)
        before = self.interpolate_step(pos, floor_time)
        after = self.interpolate_step(pos, ceil_time)
        alpha = time - floor_time
        return before * (1.0 - alpha) + after * alpha

    @classmethod
    def gen_demo(cls, size: int, demos: Sequence[DemoType]) -> "Flowfield4D":
        """A two-step cubic field built from the first two demo types."""
        if len(demos) < 2:
            raise ValueError("two demo types are needed")
        field = cls(size, size, size, 2)
        field.steps = [Flowfield.gen_demo(size, demo) for demo in demos[:2]]
        return field