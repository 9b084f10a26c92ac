"""Mapping of VLSV cell and data types onto VTK cell and data type identifiers."""

from __future__ import annotations

import enum

from vlsvtools.datatypes import DataType

__all__ = [
    "CellType",
    "VtkCellType",
    "VtkDataType",
    "number_of_vertices",
    "vtk_cell_type",
    "vtk_data_type",
]


class CellType(enum.IntEnum):
    """Cell shapes that a VLSV mesh can declare."""

    UNKNOWN = 0
    VERTEX = 1
    LINE = 2
    TRIANGLE = 3
    QUAD = 4
    TETRA = 5
    PYRAMID = 6
    WEDGE = 7
    HEXAHEDRON = 8
    VOXEL = 9


class VtkCellType(enum.IntEnum):
    """VTK cell type identifiers."""

    VERTEX = 1
    LINE = 3
    TRIANGLE = 5
    QUAD = 9
    TETRA = 10
    VOXEL = 11
    HEXAHEDRON = 12
    WEDGE = 13
    PYRAMID = 14


class VtkDataType(enum.IntEnum):
    """VTK primitive data type identifiers."""

    NOT_FOUND = -999
    CHAR = 2
    UNSIGNED_CHAR = 3
    SHORT = 4
    UNSIGNED_SHORT = 5
    INT = 6
    UNSIGNED_INT = 7
    LONG = 8
    UNSIGNED_LONG = 9
    FLOAT = 10
    DOUBLE = 11


_VERTEX_COUNTS = {
    VtkCellType.VERTEX: 1,
    VtkCellType.LINE: 2,
    VtkCellType.TRIANGLE: 3,
    VtkCellType.QUAD: 4,
    VtkCellType.TETRA: 4,
    VtkCellType.VOXEL: 8,
    VtkCellType.HEXAHEDRON: 8,
    VtkCellType.WEDGE: 6,
    VtkCellType.PYRAMID: 5,
}

_CELL_TYPES = {
    CellType.VERTEX: VtkCellType.VERTEX,
    CellType.LINE: VtkCellType.LINE,
    CellType.TRIANGLE: VtkCellType.TRIANGLE,
    CellType.QUAD: VtkCellType.QUAD,
    CellType.TETRA: VtkCellType.TETRA,
    CellType.PYRAMID: VtkCellType.PYRAMID,
    CellType.WEDGE: VtkCellType.WEDGE,
    CellType.HEXAHEDRON: VtkCellType.HEXAHEDRON,
    CellType.VOXEL: VtkCellType.VOXEL,
}

_DATA_TYPES = {
    DataType.INT: {
        1: VtkDataType.CHAR,
        2: VtkDataType.SHORT,
        4: VtkDataType.INT,
        8: VtkDataType.LONG,
    },
    DataType.UINT: {
        1: VtkDataType.UNSIGNED_CHAR,
        2: VtkDataType.UNSIGNED_SHORT,
        4: VtkDataType.UNSIGNED_INT,
        8: VtkDataType.UNSIGNED_LONG,
    },
    DataType.FLOAT: {
        4: VtkDataType.FLOAT,
        8: VtkDataType.DOUBLE,
    },
}


def number_of_vertices(cell_type: int) -> int:
    """Return the number of vertices of a VTK cell type."""
    try:
        return _VERTEX_COUNTS[VtkCellType(cell_type)]
    except (ValueError, KeyError):
        raise ValueError(f"unsupported VTK cell type, id# {cell_type}") from None


def vtk_cell_type(cell_type: int) -> VtkCellType:
    """Return the VTK cell type for a VLSV cell type."""
    try:
        kind = CellType(cell_type)
    except ValueError:
        raise ValueError(f"unsupported cell type {cell_type}") from None
    if kind is CellType.UNKNOWN:
        raise ValueError("unknown cell type has no VTK counterpart")
    return _CELL_TYPES[kind]


def vtk_data_type(datatype: DataType, data_size: int) -> VtkDataType:
    """Return the VTK data type for a VLSV data type, or ``NOT_FOUND``."""
    return _DATA_TYPES.get(datatype, {}).get(data_size, VtkDataType.NOT_FOUND)