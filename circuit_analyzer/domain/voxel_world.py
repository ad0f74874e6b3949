"""In-memory cubic voxel world.

The world is the source of truth for which cells are occupied and powered.
Analysis reads it through ``get_all_voxels`` once per tick and never writes
back.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from circuit_analyzer.config.constants import WORLD_SIZE
from circuit_analyzer.domain.voxel import CellKey, Voxel


@dataclass
class VoxelWorld:
    """Bounded cubic grid of voxels keyed by (x, y, z)."""

    world_size: int = WORLD_SIZE
    blocks: dict[CellKey, Voxel] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.world_size < 1:
            raise ValueError("world_size must be >= 1")

    def in_bounds(self, x: int, y: int, z: int) -> bool:
        """Return True when (x, y, z) lies inside [0, world_size) on every axis."""
        size = self.world_size
        return 0 <= x < size and 0 <= y < size and 0 <= z < size

    def set_voxel(
        self,
        x: int,
        y: int,
        z: int,
        kind: str = "wire",
        powered: bool = False,
        power_level: int = 0,
    ) -> Voxel:
        """Place (or replace) a voxel at (x, y, z)."""
        if not self.in_bounds(x, y, z):
            raise ValueError(f"voxel ({x}, {y}, {z}) is outside the world")
        voxel = Voxel(x=x, y=y, z=z, powered=powered, kind=kind, power_level=power_level)
        self.blocks[voxel.key] = voxel
        return voxel

    def set_powered(self, x: int, y: int, z: int, powered: bool) -> Voxel:
        """Update the powered flag of an existing voxel."""
        voxel = replace(self.blocks[(x, y, z)], powered=powered)
        self.blocks[voxel.key] = voxel
        return voxel

    def get_voxel(self, x: int, y: int, z: int) -> Voxel | None:
        return self.blocks.get((x, y, z))

    def remove_voxel(self, x: int, y: int, z: int) -> bool:
        """Remove the voxel at (x, y, z); return whether one was present."""
        return self.blocks.pop((x, y, z), None) is not None

    def clear(self) -> None:
        self.blocks.clear()

    def set_snapshot(self, voxels: Iterable[Voxel]) -> None:
        """Replace the world contents, silently dropping out-of-bounds voxels."""
        self.blocks.clear()
        for voxel in voxels:
            if self.in_bounds(voxel.x, voxel.y, voxel.z):
                self.blocks[voxel.key] = voxel

    def get_all_voxels(self) -> list[Voxel]:
        """Return every occupied voxel in insertion order (a fresh list)."""
        return list(self.blocks.values())

    def __len__(self) -> int:
        return len(self.blocks)
