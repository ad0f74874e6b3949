"""Bounded sliding window of per-tick powered-state snapshots."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from circuit_analyzer.config.constants import HISTORY_CAPACITY
from circuit_analyzer.domain.voxel import CellKey, Voxel

PoweredSnapshot = dict[CellKey, bool]


def snapshot_powered(voxels: Iterable[Voxel]) -> PoweredSnapshot:
    """Map cell key -> powered flag for one tick."""
    return {voxel.key: voxel.powered for voxel in voxels}


@dataclass
class HistoryBuffer:
    """FIFO window holding at most ``capacity`` snapshots, oldest evicted first."""

    capacity: int = HISTORY_CAPACITY
    _snapshots: deque[PoweredSnapshot] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._snapshots = deque(maxlen=self.capacity)

    def append(self, snapshot: Mapping[CellKey, bool]) -> None:
        """Append a copy of ``snapshot``, evicting the oldest entry when full."""
        self._snapshots.append(dict(snapshot))

    @property
    def is_full(self) -> bool:
        return len(self._snapshots) == self.capacity

    def snapshots(self) -> list[PoweredSnapshot]:
        """Return the retained snapshots, oldest first."""
        return list(self._snapshots)

    def clear(self) -> None:
        self._snapshots.clear()

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[PoweredSnapshot]:
        return iter(self._snapshots)
