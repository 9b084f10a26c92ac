"""Helpers for arranging VLSV mesh and variable data into SILO- and VTK-style layouts."""

__version__ = "0.1.0"

__all__ = [
    "amr",
    "curves",
    "datatypes",
    "directories",
    "quad_nodes",
    "variables",
    "vtk_types",
    "zones",
]