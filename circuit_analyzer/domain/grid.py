"""Per-tick grid index and orthogonal adjacency.

The index maps each occupied cell key to its voxel. Adjacency is the six
axis-aligned neighbors, filtered to the world bounds and to occupied cells,
always enumerated in the order -x, +x, -y, +y, -z, +z. That order drives the
traversal order of every graph search downstream.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import networkx as nx

from circuit_analyzer.config.constants import NEIGHBOR_OFFSETS
from circuit_analyzer.domain.voxel import CellKey, Voxel

GridIndex = dict[CellKey, Voxel]


def build_index(voxels: Iterable[Voxel]) -> GridIndex:
    """Map cell key -> voxel. A repeated key keeps its first position, last value."""
    index: GridIndex = {}
    for voxel in voxels:
        index[voxel.key] = voxel
    return index


def in_bounds(x: int, y: int, z: int, world_size: int) -> bool:
    return 0 <= x < world_size and 0 <= y < world_size and 0 <= z < world_size


def neighbors_of(index: Mapping[CellKey, object], key: CellKey, world_size: int) -> list[CellKey]:
    """Return the occupied, in-bounds orthogonal neighbors of ``key``."""
    x, y, z = key
    result: list[CellKey] = []
    for dx, dy, dz in NEIGHBOR_OFFSETS:
        nx_, ny_, nz_ = x + dx, y + dy, z + dz
        if not in_bounds(nx_, ny_, nz_, world_size):
            continue
        if (nx_, ny_, nz_) in index:
            result.append((nx_, ny_, nz_))
    return result


def build_adjacency_graph(index: Mapping[CellKey, object], world_size: int) -> nx.DiGraph:
    """Build the adjacency graph of the indexed cells.

    Nodes are added in index order and each node's out-edges in neighbor
    order, so ``graph.successors(k)`` reproduces ``neighbors_of(index, k)``.
    Every edge appears in both directions.
    """
    graph = nx.DiGraph()
    graph.add_nodes_from(index)
    for key in index:
        for neighbor in neighbors_of(index, key, world_size):
            graph.add_edge(key, neighbor)
    return graph
