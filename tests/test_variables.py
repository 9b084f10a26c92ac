import pytest

from vlsvtools.variables import (
    component_names,
    gather_multimesh_variable,
    matching_input_files,
    mesh_directory_name,
    multimesh_piece_name,
    piece_offsets,
    silo_output_name,
    split_vector_components,
)


def test_split_scalar_is_identity():
    assert split_vector_components([5, 6, 7], 1) == [[5, 6, 7]]


def test_split_vector_round_trip():
    values = list(range(12))
    parts = split_vector_components(values, 3)
    assert len(parts) == 3
    assert all(len(p) == 4 for p in parts)
    rebuilt = [v for triple in zip(*parts) for v in triple]
    assert rebuilt == values


def test_split_rejects_bad_sizes():
    with pytest.raises(ValueError):
        split_vector_components([1, 2, 3, 4], 3)
    with pytest.raises(ValueError):
        split_vector_components([1], 0)


def test_gather_local_cells_only():
    values = ["a", "b", "c", "d", "e"]
    result = gather_multimesh_variable(values, 1, [0, 2, 5], 1, 3, 0, [], [])
    assert result == [["c", "d", "e"]]


def test_gather_ghosts_come_from_other_pieces():
    # piece 0 has two local cells, piece 1 has three; piece 1 borrows a ghost from piece 0
    values = ["p0a", "p0b", "p1a", "p1b", "p1c"]
    result = gather_multimesh_variable(values, 1, [0, 2, 5], 1, 4, 1, [1], [0])
    assert result == [["p1a", "p1b", "p1c", "p0b"]]


def test_gather_vector_components():
    values = [(c, comp) for c in range(4) for comp in range(3)]
    result = gather_multimesh_variable(values, 3, [0, 2, 4], 0, 3, 1, [0], [1])
    assert len(result) == 3
    for comp, column in enumerate(result):
        assert column == [(0, comp), (1, comp), (2, comp)]


def test_gather_rejects_unsupported_vector_size():
    with pytest.raises(ValueError):
        gather_multimesh_variable([1, 2, 3, 4], 2, [0, 2], 0, 2, 0, [], [])


def test_gather_rejects_too_many_ghosts():
    with pytest.raises(ValueError):
        gather_multimesh_variable([1, 2], 1, [0, 2], 0, 1, 2, [0, 0], [0, 0])


def test_gather_rejects_out_of_range_source():
    with pytest.raises(IndexError):
        gather_multimesh_variable([1, 2], 1, [0, 2], 0, 3, 1, [5], [0])


def test_component_names():
    assert component_names("E", 3) == ["E1", "E2", "E3"]
    assert component_names("rho", 1) == ["rho1"]
    with pytest.raises(ValueError):
        component_names("E", 0)


def test_mesh_directory_name_is_zero_padded():
    assert mesh_directory_name(0) == "mesh00000000"
    name = mesh_directory_name(42)
    assert name.startswith("mesh") and len(name) == 12 and int(name[4:]) == 42
    with pytest.raises(ValueError):
        mesh_directory_name(-1)


def test_silo_output_name():
    assert silo_output_name("run.vlsv") == "run.silo"
    assert silo_output_name("a.vlsv.b.vlsv") == "a.vlsv.b.silo"
    assert silo_output_name("data.txt") == "data.txt"


def test_multimesh_piece_name():
    directory = mesh_directory_name(1)
    name = multimesh_piece_name("out.silo", directory)
    assert name == f"out.silo:/{directory}/{directory}"


def test_piece_offsets_are_cumulative():
    cells = [4, 0, 6]
    ghosts = [1, 0, 2]
    var_offsets, ghost_offsets = piece_offsets(cells, ghosts)
    assert len(var_offsets) == len(ghost_offsets) == 4
    assert var_offsets[0] == ghost_offsets[0] == 0
    assert var_offsets[-1] == sum(cells) - sum(ghosts)
    assert ghost_offsets[-1] == sum(ghosts)
    for m in range(3):
        assert var_offsets[m + 1] - var_offsets[m] == cells[m] - ghosts[m]
        assert ghost_offsets[m + 1] - ghost_offsets[m] == ghosts[m]


def test_piece_offsets_errors():
    with pytest.raises(ValueError):
        piece_offsets([1, 2], [0])
    with pytest.raises(ValueError):
        piece_offsets([1], [2])


def test_matching_input_files():
    names = ["bulk.0002.vlsv", "bulk.0001.vlsv", "grid.0001.vlsv", "bulk.txt", ".", ".."]
    assert matching_input_files(names, "bulk") == ["bulk.0001.vlsv", "bulk.0002.vlsv"]
    assert matching_input_files(names, "none") == []
    assert matching_input_files(names + ["bulk.0001.vlsv"], "0001") == [
        "bulk.0001.vlsv",
        "grid.0001.vlsv",
    ]


def test_gather_matches_split_for_single_piece():
    values = list(range(9))
    gathered = gather_multimesh_variable(values, 3, [0, 3], 0, 3, 0, [], [])
    assert gathered == split_vector_components(values, 3)