"""Flow fields, voxel volumes, plane clipping, marching tables and render data for visualization."""

__version__ = "0.1.0"

__all__ = [
    "arcball",
    "clipper",
    "color",
    "flowfield",
    "flowfield4d",
    "font",
    "marching_tables",
    "qvis",
    "render_data",
    "volume",
    "water",
]