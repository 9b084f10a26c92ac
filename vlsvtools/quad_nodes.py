"""Shared-node hexahedral meshes built from cells given as corner and size."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

__all__ = ["NodeCrd", "QuadMesh", "node_less", "build_quad_mesh"]

EPS = 1.0e-6

# Offsets (dx, dy, dz) used for each of the eight nodes of a cell, in zone order.
_CORNERS = (
    (False, False, False),
    (True, False, False),
    (True, True, False),
    (False, True, False),
    (False, False, True),
    (True, False, True),
    (True, True, True),
    (False, True, True),
)


def _flush(value: float) -> float:
    return 0.0 if abs(value) < EPS else value


def _close(a: float, b: float) -> bool:
    eps_a = 1.0e-7 if a == 0.0 else 1.0e-6 * abs(a)
    eps_b = 1.0e-7 if b == 0.0 else 1.0e-6 * abs(b)
    return abs(a - b) <= max(eps_a, eps_b)


@dataclass(frozen=True)
class NodeCrd:
    """Coordinates of one mesh node."""

    x: float
    y: float
    z: float

    @classmethod
    def from_offsets(
        cls, x0: float, y0: float, z0: float, dx: float, dy: float, dz: float
    ) -> "NodeCrd":
        """Node at ``(x0 + dx, y0 + dy, z0 + dz)``, with tiny coordinates flushed to zero."""
        return cls(_flush(x0 + dx), _flush(y0 + dy), _flush(z0 + dz))

    def matches(self, other: "NodeCrd") -> bool:
        """True if both nodes agree in every coordinate within a relative tolerance."""
        return (
            _close(self.x, other.x)
            and _close(self.y, other.y)
            and _close(self.z, other.z)
        )

    def scaled(self, xscale: float, yscale: float, zscale: float) -> "NodeCrd":
        """Return the node with each coordinate multiplied by its scale factor."""
        return NodeCrd(self.x * xscale, self.y * yscale, self.z * zscale)


def node_less(a: NodeCrd, b: NodeCrd) -> bool:
    """Order nodes by z, then y, then x; nodes that match are never less."""
    if a.matches(b):
        return False
    for ca, cb in ((a.z, b.z), (a.y, b.y), (a.x, b.x)):
        eps = 0.5e-5 * (abs(ca) + abs(cb))
        if ca > cb + eps:
            return False
        if ca < cb - eps:
            return True
    return False


class _NodeSet:
    """Sorted set of nodes under the tolerant ordering of :func:`node_less`."""

    def __init__(self) -> None:
        self.nodes: list[NodeCrd] = []

    def _lower_bound(self, node: NodeCrd) -> int:
        lo, hi = 0, len(self.nodes)
        while lo < hi:
            mid = (lo + hi) // 2
            if node_less(self.nodes[mid], node):
                lo = mid + 1
            else:
                hi = mid
        return lo

    def add(self, node: NodeCrd) -> None:
        pos = self._lower_bound(node)
        if pos < len(self.nodes) and not node_less(node, self.nodes[pos]):
            return
        self.nodes.insert(pos, node)

    def index(self, node: NodeCrd) -> int:
        pos = self._lower_bound(node)
        if pos < len(self.nodes) and not node_less(node, self.nodes[pos]):
            return pos
        raise LookupError(f"node {node} not found in mesh")


@dataclass
class QuadMesh:
    """Unique node coordinates and eight node indices per hexahedral zone."""

    node_list: list[int] = field(default_factory=list)
    x: list[float] = field(default_factory=list)
    y: list[float] = field(default_factory=list)
    z: list[float] = field(default_factory=list)

    @property
    def n_zones(self) -> int:
        return len(self.node_list) // 8

    @property
    def n_nodes(self) -> int:
        return len(self.x)

    def zone(self, index: int) -> list[int]:
        """Return the eight node indices of one zone."""
        if not 0 <= index < self.n_zones:
            raise IndexError(f"zone {index} out of range")
        return self.node_list[8 * index:8 * index + 8]


def _cell_nodes(cell: Sequence[float]) -> list[NodeCrd]:
    if len(cell) < 6:
        raise ValueError("each cell needs (x0, y0, z0, dx, dy, dz)")
    x0, y0, z0, dx, dy, dz = (float(v) for v in cell[:6])
    return [
        NodeCrd.from_offsets(
            x0, y0, z0, dx if ux else 0.0, dy if uy else 0.0, dz if uz else 0.0
        )
        for ux, uy, uz in _CORNERS
    ]


def build_quad_mesh(
    cells: Iterable[Sequence[float]],
    xscale: float = 1.0,
    yscale: float = 1.0,
    zscale: float = 1.0,
) -> QuadMesh:
    """Build a mesh from cells given as ``(x0, y0, z0, dx, dy, dz)``.

    Nodes shared between cells appear once; nodes are numbered in ascending
    (z, y, x) order and their coordinates are multiplied by the scale factors.
    """
    cell_nodes = [_cell_nodes(cell) for cell in cells]

    unique = _NodeSet()
    for nodes in cell_nodes:
        for node in nodes:
            unique.add(node)

    mesh = QuadMesh()
    for node in unique.nodes:
        scaled = node.scaled(xscale, yscale, zscale)
        mesh.x.append(scaled.x)
        mesh.y.append(scaled.y)
        mesh.z.append(scaled.z)

    for nodes in cell_nodes:
        mesh.node_list.extend(unique.index(node) for node in nodes)
    return mesh