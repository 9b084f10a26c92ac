"""Global ID and (level, i, j, k) index conversion for adaptively refined meshes."""

from __future__ import annotations

import bisect

__all__ = ["AmrMesh"]


class AmrMesh:
    """Block numbering of a mesh with up to ``max_refinement_level`` refinement levels.

    Blocks of refinement level ``r`` are numbered after all blocks of lower levels;
    each level doubles the resolution in every direction.
    """

    def __init__(self, nx0: int, ny0: int, nz0: int, max_refinement_level: int) -> None:
        if min(nx0, ny0, nz0) < 0 or max_refinement_level < 0:
            raise ValueError("mesh sizes and refinement level must be non-negative")
        self.nx0 = nx0
        self.ny0 = ny0
        self.nz0 = nz0
        self.max_refinement_level = max_refinement_level
        self.n_cells0 = nx0 * ny0 * nz0
        offsets = [0]
        for level in range(1, max_refinement_level + 1):
            offsets.append(offsets[-1] + self.n_cells0 * 8 ** (level - 1))
        self.offsets: tuple[int, ...] = tuple(offsets)

    def cell_indices(self, global_id: int) -> tuple[int, int, int, int]:
        """Return ``(ref_level, i, j, k)`` of the block with the given global ID."""
        ref_level = bisect.bisect_right(self.offsets, global_id) - 1
        if ref_level < 0:
            raise ValueError(f"invalid global ID {global_id}")
        multiplier = 2**ref_level
        nx = self.nx0 * multiplier
        ny = self.ny0 * multiplier
        index = global_id - self.offsets[ref_level]
        k, rest = divmod(index, ny * nx)
        j, i = divmod(rest, nx)
        return ref_level, i, j, k

    def global_id(self, ref_level: int, i: int, j: int, k: int) -> int:
        """Return the unique global ID of the block at the given level and indices."""
        if not 0 <= ref_level <= self.max_refinement_level:
            raise ValueError(f"refinement level {ref_level} out of range")
        multiplier = 2**ref_level
        return (
            self.offsets[ref_level]
            + k * self.ny0 * self.nx0 * multiplier * multiplier
            + j * self.nx0 * multiplier
            + i
        )