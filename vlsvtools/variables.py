"""Rearranging variable data and naming output pieces when converting VLSV files."""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

__all__ = [
    "split_vector_components",
    "gather_multimesh_variable",
    "component_names",
    "mesh_directory_name",
    "silo_output_name",
    "multimesh_piece_name",
    "piece_offsets",
    "matching_input_files",
]

T = TypeVar("T")

_VLSV_SUFFIX = ".vlsv"
_SILO_SUFFIX = ".silo"


def split_vector_components(values: Sequence[T], vector_size: int) -> list[list[T]]:
    """Split interleaved vector data into one list per component.

    ``values`` holds the components of each cell next to each other; the
    result holds, for each component, its values over all cells.
    """
    if vector_size < 1:
        raise ValueError(f"vector size must be positive, got {vector_size}")
    if len(values) % vector_size:
        raise ValueError(
            f"{len(values)} values do not divide into vectors of size {vector_size}"
        )
    return [list(values[component::vector_size]) for component in range(vector_size)]


def gather_multimesh_variable(
    values: Sequence[T],
    vector_size: int,
    variable_offsets: Sequence[int],
    mesh_number: int,
    n_cells: int,
    n_ghosts: int,
    ghost_local_ids: Sequence[int],
    ghost_domains: Sequence[int],
) -> list[list[T]]:
    """Collect the values of one mesh piece, local cells first and ghosts after.

    ``values`` is the whole interleaved variable array of all pieces. Local
    cells of piece ``mesh_number`` start at ``variable_offsets[mesh_number]``;
    the value of ghost cell ``b`` is that of cell ``ghost_local_ids[b]`` of
    piece ``ghost_domains[b]``. Only scalars and 3-vectors are supported.
    """
    if vector_size not in (1, 3):
        raise ValueError(f"only scalars and 3-vectors are supported, got size {vector_size}")
    if not 0 <= n_ghosts <= n_cells:
        raise ValueError(f"ghost count {n_ghosts} does not fit in {n_cells} cells")
    if len(ghost_local_ids) < n_ghosts or len(ghost_domains) < n_ghosts:
        raise ValueError("ghost id and domain arrays are shorter than the ghost count")
    if len(values) % vector_size:
        raise ValueError(
            f"{len(values)} values do not divide into vectors of size {vector_size}"
        )

    n_vectors = len(values) // vector_size
    local_start = variable_offsets[mesh_number]
    sources = list(range(local_start, local_start + n_cells - n_ghosts))
    sources.extend(
        variable_offsets[domain] + local_id
        for domain, local_id in zip(ghost_domains[:n_ghosts], ghost_local_ids[:n_ghosts])
    )
    for source in sources:
        if not 0 <= source < n_vectors:
            raise IndexError(f"cell {source} is outside the variable array")

    return [
        [values[source * vector_size + component] for source in sources]
        for component in range(vector_size)
    ]


def component_names(var_name: str, vector_size: int) -> list[str]:
    """Return one name per vector component: the variable name followed by 1, 2, ..."""
    if vector_size < 1:
        raise ValueError(f"vector size must be positive, got {vector_size}")
    return [f"{var_name}{index}" for index in range(1, vector_size + 1)]


def mesh_directory_name(number: int) -> str:
    """Return the directory name of a mesh piece: ``mesh`` and an eight digit number."""
    if number < 0:
        raise ValueError(f"mesh number must be non-negative, got {number}")
    return f"mesh{number:08d}"


def silo_output_name(filename: str) -> str:
    """Return the output file name: the last ``.vlsv`` is replaced by ``.silo``."""
    pos = filename.rfind(_VLSV_SUFFIX)
    if pos < 0:
        return filename
    return filename[:pos] + _SILO_SUFFIX + filename[pos + len(_VLSV_SUFFIX):]


def multimesh_piece_name(filename: str, mesh_dir: str) -> str:
    """Return the full path of a mesh piece, including the file it is stored in."""
    return f"{filename}:/{mesh_dir}/{mesh_dir}"


def piece_offsets(
    cell_counts: Sequence[int], ghost_counts: Sequence[int]
) -> tuple[list[int], list[int]]:
    """Return offsets of each piece into the variable and ghost arrays.

    Each list has one entry more than there are pieces; the variable offsets
    count local (non-ghost) cells, the ghost offsets count ghost cells.
    """
    if len(cell_counts) != len(ghost_counts):
        raise ValueError("cell and ghost counts differ in length")
    variable_offsets = [0]
    ghost_offsets = [0]
    for cells, ghosts in zip(cell_counts, ghost_counts):
        if not 0 <= ghosts <= cells:
            raise ValueError(f"ghost count {ghosts} does not fit in {cells} cells")
        variable_offsets.append(variable_offsets[-1] + cells - ghosts)
        ghost_offsets.append(ghost_offsets[-1] + ghosts)
    return variable_offsets, ghost_offsets


def matching_input_files(
    names: Iterable[str], mask: str, suffix: str = _VLSV_SUFFIX
) -> list[str]:
    """Return, sorted and without repeats, the names containing both mask and suffix."""
    return sorted({name for name in names if mask in name and suffix in name})