# vlsvtools

Building blocks for turning VLSV simulation output into mesh layouts that
visualization tools understand. The package works on plain Python data:
you read arrays from a file however you like and hand the values in. It has
no dependencies outside the standard library.

## Installation

```
pip install vlsvtools
```

## What is inside

- `vlsvtools.datatypes`
  - `DataType` (`UNKNOWN`, `INT`, `UINT`, `FLOAT`) and `SiloType`
    (`DB_INT`, `DB_SHORT`, `DB_LONG`, `DB_FLOAT`, `DB_DOUBLE`).
  - `conv_int(data, datatype, data_size)` and `conv_uint(...)` read one
    little-endian integer of 1, 2, 4 or 8 bytes and return it as a signed or
    unsigned 64-bit value, wrapping where the value does not fit. Unsupported
    types or sizes raise `ValueError`.
  - `silo_type(datatype, data_size)` returns the matching `SiloType`, or
    `None` when there is none.
  - `decode_floats(data, data_size)` decodes a buffer of 4-, 8-, 12- or
    16-byte floating point values (the last two as x87 extended precision).
- `vlsvtools.amr`
  - `AmrMesh(nx0, ny0, nz0, max_refinement_level)` numbers the blocks of an
    adaptively refined mesh; `cell_indices(global_id)` returns
    `(ref_level, i, j, k)` and `global_id(ref_level, i, j, k)` goes back.
- `vlsvtools.vtk_types`
  - `CellType`, `VtkCellType`, `VtkDataType`.
  - `number_of_vertices(cell_type)` and `vtk_cell_type(cell_type)` raise
    `ValueError` for unsupported types; `vtk_data_type(datatype, data_size)`
    returns `VtkDataType.NOT_FOUND` when there is no match.
- `vlsvtools.zones`
  - `eliminate_duplicate_nodes(cells, bbox)` builds a `ZoneMesh` (hexahedral
    zone list, eight node indices per cell, and unique node coordinates in
    single precision) from `(i, j, k)` cell indices and a bounding box
    `(x_min, y_min, z_min, dx, dy, dz)`.
  - `node_hash(i, j, k)` packs indices into one 64-bit integer, 21 bits each.
- `vlsvtools.quad_nodes`
  - `NodeCrd` with `from_offsets`, `matches` and `scaled`; `node_less`
    orders nodes by z, y, x with a relative tolerance.
  - `build_quad_mesh(cells, xscale, yscale, zscale)` builds a `QuadMesh`
    from cells given as `(x0, y0, z0, dx, dy, dz)`, merging nodes that agree
    within the tolerance and numbering them in ascending (z, y, x) order.
- `vlsvtools.directories`
  - `DirectoryTracker.create(directory, root)` records nested directories one
    level at a time, skipping empty components; newly made paths are listed in
    `created`. `clear()` forgets them all.
  - `CoordinateLabels.from_attributes(attributes)` takes axis labels and units
    from `xlabel`, `ylabel`, `zlabel`, `xunit`, `yunit`, `zunit`, defaulting
    to `x-coordinate` … and `m`.
- `vlsvtools.curves`
  - `CurveCollection.add(name, x, y, attributes)` stores samples of named
    curves in any order; `series(name)` returns x and y lists sorted by
    ascending x; `names()` lists the curves in sorted order.
- `vlsvtools.variables`
  - `split_vector_components`, `gather_multimesh_variable` (local cells of a
    mesh piece followed by its ghost cells), `piece_offsets`.
  - Naming helpers: `component_names`, `mesh_directory_name`
    (`mesh00000003`), `silo_output_name` (last `.vlsv` becomes `.silo`),
    `multimesh_piece_name` and `matching_input_files`.

## Example

```python
from vlsvtools.amr import AmrMesh
from vlsvtools.zones import eliminate_duplicate_nodes

mesh = AmrMesh(4, 4, 4, 2)
level, i, j, k = mesh.cell_indices(70)
assert (level, i, j, k) == (1, 6, 0, 0)
assert mesh.global_id(level, i, j, k) == 70

zones = eliminate_duplicate_nodes([(0, 0, 0), (1, 0, 0)], (0.0, 0.0, 0.0, 1.0, 1.0, 1.0))
print(len(zones.zone_list))  # 16 entries, 8 per cell
print(zones.n_nodes)         # 12 unique nodes
```

## What it does not do

The package does not read VLSV files or write SILO or VTK files, and it has
no command-line converter. It supplies the data layout steps in between:
you provide decoded arrays and pass the results to whatever writer you use.

## Running the tests

```
pip install "vlsvtools[test]"
pytest
```