"""Domain layer: voxels, the in-memory world, and grid adjacency."""

from circuit_analyzer.domain.grid import (
    GridIndex,
    build_adjacency_graph,
    build_index,
    in_bounds,
    neighbors_of,
)
from circuit_analyzer.domain.voxel import CellKey, Voxel, format_key, parse_key
from circuit_analyzer.domain.voxel_world import VoxelWorld

__all__ = [
    "CellKey",
    "GridIndex",
    "Voxel",
    "VoxelWorld",
    "build_adjacency_graph",
    "build_index",
    "format_key",
    "in_bounds",
    "neighbors_of",
    "parse_key",
]
