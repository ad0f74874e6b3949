"""Shared constants for the voxel world and its circuit analysis.

Analysis modules and the simulation side both read these, so a changed
window or bound applies to the whole pipeline.
"""

from __future__ import annotations

WORLD_SIZE = 16
"""Default world edge length in cells (shared by all three axes)."""

HISTORY_CAPACITY = 32
"""Number of per-tick powered-state snapshots kept for oscillation detection."""

MIN_OSCILLATION_TOGGLES = 4
"""Minimum toggles within the window before a cell is reported as an oscillator."""

MAX_FANOUT = 6
"""Upper bound on orthogonal neighbors of a cell in a 3D grid."""

SIM_HISTORY_CAPACITY = 256
"""Maximum number of simulation samples retained by the sample history."""

NEIGHBOR_OFFSETS: tuple[tuple[int, int, int], ...] = (
    (-1, 0, 0),
    (1, 0, 0),
    (0, -1, 0),
    (0, 1, 0),
    (0, 0, -1),
    (0, 0, 1),
)
"""Orthogonal neighbor offsets in traversal order: -x, +x, -y, +y, -z, +z."""

GATE_KINDS: frozenset[str] = frozenset(
    {"gate_and", "gate_or", "gate_not", "repeater", "comparator", "torch"}
)
"""Voxel kinds counted as gates in simulation samples."""
