# visflowkit

This package provides small building blocks for scientific visualization
experiments. It is built on NumPy. It works on data only and does no drawing
of its own.

## Modules

- `visflowkit.flowfield`
  - `Flowfield` is a steady 3D vector field on a regular grid that spans the
    unit cube.
  - `Flowfield.gen_demo(size, demo)` builds a cubic demo field. The
    `DemoType` values are `DRAIN`, `SADDLE` and `CRITICAL`.
  - `Flowfield.from_file(filename)` reads a comma-separated field file. The
    file holds the dimension count, the grid sizes, the number of time steps
    and then the vector components.
  - `Flowfield.interpolate(pos)` samples the field trilinearly at a position
    in `[0, 1]^3`. It raises `IndexError` when the position lies outside.
- `visflowkit.flowfield4d`
  - `Flowfield4D` is a time-dependent field made of one or more grid time
    steps, which repeat cyclically.
  - `interpolate_step(pos, time_step)` samples a single time step.
  - `interpolate(pos, time)` also blends linearly between neighbouring steps.
  - `gen_demo(size, demos)` builds a two-step field from the first two demo
    types.
- `visflowkit.volume`
  - `Volume` is an 8-bit voxel grid with x varying fastest.
  - `normalize_scale()` rescales the volume so that its largest edge has
    extent one.
  - `resample(w, h, d)` resamples the grid trilinearly.
  - `compute_normals()` computes central-difference normals for interior
    voxels.
  - `value_at(u, v, w)` samples a value at normalized coordinates.
- `visflowkit.qvis`
  - `load_qvis(filename)` reads a QVis `.dat` description and its raw voxel
    file into a `Volume`. The voxel data may be 8-bit, or 16-bit
    little-endian data that is rescaled to 8 bits.
  - Errors are raised as `QVisFileError`.
  - `parse_dat_line(line)` splits one `key: value` line into a lower-case
    key and value.
- `visflowkit.clipper`
  - `tri_plane(positions, normal, d)` clips a triangle list against the plane
    `normal . p + d = 0`. It keeps the negative side and returns the new cut
    points as well.
  - `mesh_plane` does the same and also closes the cut with a triangle fan.
  - `mesh_plane_flat` does what `mesh_plane` does, for a flat coordinate
    list.
- `visflowkit.arcball`
  - `ArcBall` maps window positions onto a sphere.
  - It turns a `click` followed by a `drag` into a rotation quaternion
    `(x, y, z, w)`.
- `visflowkit.color`
  - `hsv_to_rgb(x, y)` converts hue `x * 360` degrees and saturation `y`, at
    full value, to RGB.
  - `hsv_picture(width, height)` builds the whole hue/saturation picker as an
    RGBA array.
- `visflowkit.water`
  - `WaterSurface` is a wave-equation height field on a periodic grid.
  - `step()` advances the simulation by one time step.
  - `disturb(x_fraction, y_fraction)` drops an impulse. Impulses alternate
    between +1 and -1.
  - `image()` returns the RGB picture: red for crests, green for troughs.
- `visflowkit.marching_tables`
  - This module holds the marching squares and marching cubes lookup tables.
  - `square_case` and `cube_case` compute case indices.
  - `square_edge_mask` and `cube_edge_mask` give edge masks.
  - `square_edge_endpoints` and `cube_edge_endpoints` give the corners at
    each end of an edge.
  - `cube_triangles` gives the triangle lists.
- `visflowkit.font`
  - `load_positions(filename)` reads glyph rectangles as `CharPosition`
    records.
  - `FontLayout` measures text with the following methods:
    - `find`
    - `text_size`
    - `char_scales`
    - `engine_size`
    - `engine_size_fixed_width`
    - `all_chars`
- `visflowkit.render_data`
  - This module builds flat vertex arrays of seven floats per vertex
    (position plus RGBA).
  - `isoline_render_data`, `grid_lines`, `particle_render_data` and
    `line_render_data` cover isolines, grids, particles and lines.
  - `random_particles` seeds particles uniformly over the unit cube.
  - `advect` takes one Euler step through a `Flowfield` or a `Flowfield4D`.

## Example

```python
import numpy as np

from visflowkit.flowfield import DemoType, Flowfield
from visflowkit.render_data import advect, particle_render_data, random_particles

flow = Flowfield.gen_demo(32, DemoType.SADDLE)
velocity = flow.interpolate((0.25, 0.5, 0.75))

particles = random_particles(100, np.random.default_rng(0))
moved = np.array([advect(flow, p, 0.0, 0.1) for p in particles])
vertices = particle_render_data(moved)
```

## What the package does not do

- It opens no window and renders nothing. There is no interactive viewer,
  raycaster or text renderer. The vertex arrays and images it produces are
  meant to be handed to a renderer of your choice.
- It offers no command-line program.
- It does not extract isolines or isosurfaces. `marching_tables` supplies
  only the lookup tables that such an extraction would use.
- It does not compute line integral convolution.
- It does not load bitmap images. `font` works from glyph position files
  alone.

## Running the tests

```
pip install -e .[test]
pytest
```