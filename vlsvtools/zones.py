"""Hexahedral zone lists with shared nodes for meshes given as (i, j, k) cells."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Iterable, Sequence

__all__ = ["ZoneMesh", "node_hash", "eliminate_duplicate_nodes"]

MAX_HASH = 2**21 - 1
_MASK64 = (1 << 64) - 1

# Corner offsets of a hexahedral cell, in the order its nodes are listed.
_CORNERS = (
    (0, 1, 0),
    (0, 0, 0),
    (1, 0, 0),
    (1, 1, 0),
    (0, 1, 1),
    (0, 0, 1),
    (1, 0, 1),
    (1, 1, 1),
)


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _trunc_mod(a: int, m: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % m
    return -r if a < 0 else r


def node_hash(i: int, j: int, k: int) -> int:
    """Pack node indices into one 64-bit hash, 21 bits per index."""
    result = _trunc_mod(i, MAX_HASH) & _MASK64
    result |= ((_trunc_mod(j, MAX_HASH) & _MASK64) << 21) & _MASK64
    result |= ((_trunc_mod(k, MAX_HASH) & _MASK64) << 42) & _MASK64
    return result


@dataclass
class ZoneMesh:
    """Unique node coordinates and eight node indices per hexahedral zone."""

    zone_list: list[int] = field(default_factory=list)
    x: list[float] = field(default_factory=list)
    y: list[float] = field(default_factory=list)
    z: list[float] = field(default_factory=list)

    @property
    def n_zones(self) -> int:
        return len(self.zone_list) // 8

    @property
    def n_nodes(self) -> int:
        return len(self.x)

    def zone(self, index: int) -> list[int]:
        """Return the eight node indices of one zone."""
        return self.zone_list[8 * index:8 * index + 8]


def eliminate_duplicate_nodes(
    cells: Iterable[Sequence[int]], bbox: Sequence[float]
) -> ZoneMesh:
    """Build a zone list from cell (i, j, k) indices, sharing nodes between cells.

    ``bbox`` holds ``(x_min, y_min, z_min, dx, dy, dz)``; node coordinates are
    computed in single precision. Components of a cell beyond the third are ignored.
    """
    if len(bbox) != 6:
        raise ValueError("bounding box must have six values")
    origin = [_f32(v) for v in bbox[:3]]
    step = [_f32(v) for v in bbox[3:]]

    mesh = ZoneMesh()
    node_ids: dict[tuple[int, int, int], int] = {}
    for cell in cells:
        if len(cell) < 3:
            raise ValueError("each cell needs (i, j, k) indices")
        ci, cj, ck = (int(v) for v in cell[:3])
        for di, dj, dk in _CORNERS:
            key = (ci + di, cj + dj, ck + dk)
            node = node_ids.get(key)
            if node is None:
                node = len(node_ids)
                node_ids[key] = node
                mesh.x.append(_f32(origin[0] + _f32(key[0] * step[0])))
                mesh.y.append(_f32(origin[1] + _f32(key[1] * step[1])))
                mesh.z.append(_f32(origin[2] + _f32(key[2] * step[2])))
            mesh.zone_list.append(node)
    return mesh