[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vlsvtools"
version = "0.1.0"
description = "Helpers for converting VLSV simulation meshes and variables into SILO- and VTK-style layouts"
requires-python = ">=3.10"
dependencies = []
keywords = ["vlsv", "silo", "vtk", "mesh", "amr", "visualization", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vlsvtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
