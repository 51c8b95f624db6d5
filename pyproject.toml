[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visflowkit"
version = "0.1.0"
description = "Building blocks for scientific visualization: flow fields, volumes, clipping, marching tables and render data"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "visualization",
    "flow field",
    "volume",
    "marching cubes",
    "marching squares",
    "particle tracing",
    "arcball",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["visflowkit"]

[tool.pytest.ini_options]
addopts = "-ra"
