import pytest

from vlsvtools.amr import AmrMesh


def test_offsets_start_each_level_after_previous():
    mesh = AmrMesh(2, 3, 4, 2)
    assert mesh.offsets[0] == 0
    assert mesh.offsets[1] == mesh.n_cells0
    assert mesh.offsets[2] - mesh.offsets[1] == mesh.n_cells0 * 8
    assert len(mesh.offsets) == 3


def test_unrefined_ids_are_row_major():
    mesh = AmrMesh(4, 3, 2, 0)
    ids = [mesh.global_id(0, i, j, k) for k in range(2) for j in range(3) for i in range(4)]
    assert ids == list(range(mesh.n_cells0))


@pytest.mark.parametrize("level", [0, 1, 2])
def test_round_trip_indices(level):
    mesh = AmrMesh(3, 2, 2, 2)
    m = 2**level
    for k in range(2 * m):
        for j in range(2 * m):
            for i in range(3 * m):
                gid = mesh.global_id(level, i, j, k)
                assert mesh.cell_indices(gid) == (level, i, j, k)


def test_round_trip_global_ids():
    mesh = AmrMesh(2, 2, 3, 2)
    total = mesh.offsets[-1] + mesh.n_cells0 * 64
    for gid in range(total):
        assert mesh.global_id(*mesh.cell_indices(gid)) == gid


def test_first_refined_block():
    mesh = AmrMesh(2, 2, 2, 1)
    assert mesh.cell_indices(mesh.n_cells0) == (1, 0, 0, 0)
    assert mesh.cell_indices(mesh.n_cells0 - 1) == (0, 1, 1, 1)


def test_global_id_rejects_bad_level():
    mesh = AmrMesh(2, 2, 2, 1)
    with pytest.raises(ValueError):
        mesh.global_id(2, 0, 0, 0)
    with pytest.raises(ValueError):
        mesh.global_id(-1, 0, 0, 0)


def test_cell_indices_rejects_negative_id():
    mesh = AmrMesh(2, 2, 2, 1)
    with pytest.raises(ValueError):
        mesh.cell_indices(-1)


def test_constructor_rejects_negative_sizes():
    with pytest.raises(ValueError):
        AmrMesh(-1, 2, 2, 0)
    with pytest.raises(ValueError):
        AmrMesh(1, 2, 2, -1)