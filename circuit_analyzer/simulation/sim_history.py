"""Rolling history of per-tick simulation samples.

The simulator pushes one sample per tick. Listeners are told after every push
(and on reset) and receive a copy of the retained samples; the circuit
analyzer uses that notification as its "re-read the world now" signal.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace

from circuit_analyzer.analysis.publisher import ResultPublisher, Subscription
from circuit_analyzer.config.constants import (
    GATE_KINDS,
    NEIGHBOR_OFFSETS,
    SIM_HISTORY_CAPACITY,
)
from circuit_analyzer.domain.voxel import CellKey, Voxel

SimListener = Callable[[list["SimSample"]], object]


@dataclass(frozen=True)
class SimSample:
    """Summary of one simulation tick."""

    tick: int
    powered_count: int
    total_blocks: int
    changed_count: int
    eval_ms: float
    cluster_count: int
    max_cluster_size: int
    wire_count: int = 0
    gate_count: int = 0
    output_count: int = 0


def powered_clusters(voxels: Iterable[Voxel]) -> tuple[int, int]:
    """Return (cluster count, largest cluster size) of 6-connected powered voxels."""
    powered = {v.key for v in voxels if v.powered}
    seen: set[CellKey] = set()
    clusters = 0
    largest = 0

    for start in powered:
        if start in seen:
            continue
        clusters += 1
        size = 0
        stack = [start]
        seen.add(start)
        while stack:
            x, y, z = stack.pop()
            size += 1
            for dx, dy, dz in NEIGHBOR_OFFSETS:
                nb = (x + dx, y + dy, z + dz)
                if nb in seen or nb not in powered:
                    continue
                seen.add(nb)
                stack.append(nb)
        largest = max(largest, size)

    return clusters, largest


def build_sample(
    prev: Sequence[Voxel], next_: Sequence[Voxel], eval_ms: float, tick: int = 0
) -> SimSample:
    """Derive a sample from the voxel snapshots before and after one tick.

    ``changed_count`` only counts cells present in both snapshots whose
    powered flag or power level differs.
    """
    before = {v.key: (v.powered, v.power_level) for v in prev}
    changed = sum(
        1
        for v in next_
        if v.key in before and before[v.key] != (v.powered, v.power_level)
    )
    clusters, largest = powered_clusters(next_)
    return SimSample(
        tick=tick,
        powered_count=sum(1 for v in next_ if v.powered),
        total_blocks=len(next_),
        changed_count=changed,
        eval_ms=eval_ms,
        cluster_count=clusters,
        max_cluster_size=largest,
        wire_count=sum(1 for v in next_ if v.kind == "wire"),
        gate_count=sum(1 for v in next_ if v.kind in GATE_KINDS),
        output_count=sum(1 for v in next_ if v.kind == "output"),
    )


class SimHistory:
    """Bounded FIFO of ``SimSample`` with change notification."""

    def __init__(self, capacity: int = SIM_HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._samples: deque[SimSample] = deque(maxlen=capacity)
        self._tick = 0
        self._listeners: ResultPublisher[list[SimSample]] = ResultPublisher()

    @property
    def tick(self) -> int:
        return self._tick

    def samples(self) -> list[SimSample]:
        return list(self._samples)

    def push_sample(self, sample: SimSample) -> SimSample:
        """Stamp ``sample`` with the next tick number, store it and notify."""
        self._tick += 1
        stamped = replace(sample, tick=self._tick)
        self._samples.append(stamped)
        self._listeners.publish(self.samples())
        return stamped

    def reset(self) -> None:
        self._samples.clear()
        self._tick = 0
        self._listeners.publish(self.samples())

    def subscribe(self, listener: SimListener) -> Subscription:
        """Register ``listener`` and call it once right away with the current history.

        Errors from that first call propagate to the caller; later
        notifications are isolated per listener.
        """
        handle = self._listeners.subscribe(listener)
        listener(self.samples())
        return handle

    def __len__(self) -> int:
        return len(self._samples)
