"""Voxel cells and their coordinate keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

CellKey: TypeAlias = tuple[int, int, int]
"""Hashable (x, y, z) coordinate used directly as a mapping key."""


@dataclass(frozen=True)
class Voxel:
    """One occupied cell of the world as seen by a single tick.

    ``kind`` and ``power_level`` are carried through from the world for the
    simulation samples; the graph analysis only looks at adjacency and
    ``powered``.
    """

    x: int
    y: int
    z: int
    powered: bool = False
    kind: str = "wire"
    power_level: int = 0

    @property
    def key(self) -> CellKey:
        return (self.x, self.y, self.z)


def format_key(key: CellKey) -> str:
    """Render ``key`` as ``"x,y,z"``."""
    return f"{key[0]},{key[1]},{key[2]}"


def parse_key(text: str) -> CellKey:
    """Parse an ``"x,y,z"`` string back into a key.

    Raises ``ValueError`` for anything that is not three comma-separated
    integers, so a malformed key never reaches the bounds checks.
    """
    parts = text.split(",")
    if len(parts) != 3:
        raise ValueError(f"malformed cell key: {text!r}")
    try:
        x, y, z = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"malformed cell key: {text!r}") from None
    return (x, y, z)
