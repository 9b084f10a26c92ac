import pytest

from vlsvtools.datatypes import DataType
from vlsvtools.vtk_types import (
    CellType,
    VtkCellType,
    VtkDataType,
    number_of_vertices,
    vtk_cell_type,
    vtk_data_type,
)


def test_hexahedron_and_voxel_have_eight_vertices():
    assert number_of_vertices(VtkCellType.HEXAHEDRON) == 8
    assert number_of_vertices(VtkCellType.VOXEL) == 8


def test_quad_and_tetra_have_four_vertices():
    assert number_of_vertices(VtkCellType.QUAD) == 4
    assert number_of_vertices(VtkCellType.TETRA) == 4


def test_number_of_vertices_accepts_plain_int():
    assert number_of_vertices(int(VtkCellType.LINE)) == number_of_vertices(VtkCellType.LINE)


def test_number_of_vertices_unsupported():
    with pytest.raises(ValueError):
        number_of_vertices(999)


@pytest.mark.parametrize(
    "cell, expected",
    [
        (CellType.VERTEX, VtkCellType.VERTEX),
        (CellType.QUAD, VtkCellType.QUAD),
        (CellType.HEXAHEDRON, VtkCellType.HEXAHEDRON),
        (CellType.VOXEL, VtkCellType.VOXEL),
        (CellType.PYRAMID, VtkCellType.PYRAMID),
    ],
)
def test_vtk_cell_type(cell, expected):
    assert vtk_cell_type(cell) is expected


def test_every_known_cell_type_has_vertex_count():
    for cell in CellType:
        if cell is CellType.UNKNOWN:
            continue
        assert number_of_vertices(vtk_cell_type(cell)) >= 1


def test_unknown_cell_type_raises():
    with pytest.raises(ValueError):
        vtk_cell_type(CellType.UNKNOWN)
    with pytest.raises(ValueError):
        vtk_cell_type(12345)


@pytest.mark.parametrize(
    "datatype, size, expected",
    [
        (DataType.INT, 1, VtkDataType.CHAR),
        (DataType.INT, 8, VtkDataType.LONG),
        (DataType.UINT, 2, VtkDataType.UNSIGNED_SHORT),
        (DataType.UINT, 4, VtkDataType.UNSIGNED_INT),
        (DataType.FLOAT, 4, VtkDataType.FLOAT),
        (DataType.FLOAT, 8, VtkDataType.DOUBLE),
    ],
)
def test_vtk_data_type(datatype, size, expected):
    assert vtk_data_type(datatype, size) is expected


@pytest.mark.parametrize(
    "datatype, size",
    [
        (DataType.UNKNOWN, 4),
        (DataType.INT, 3),
        (DataType.FLOAT, 16),
        (DataType.FLOAT, 2),
    ],
)
def test_vtk_data_type_not_found(datatype, size):
    assert vtk_data_type(datatype, size) is VtkDataType.NOT_FOUND
    assert vtk_data_type(datatype, size) == -999