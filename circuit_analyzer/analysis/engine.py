"""Per-tick circuit analysis pipeline.

One ``CircuitAnalyzer`` owns its history window and subscriber list, so
several analyzers (and isolated tests) can run side by side. Everything runs
synchronously on the thread that delivers the tick notification; the history
window is the only state that survives between ticks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from circuit_analyzer.analysis.history import HistoryBuffer, snapshot_powered
from circuit_analyzer.analysis.publisher import ResultPublisher, Subscription
from circuit_analyzer.analysis.result import AnalysisResult
from circuit_analyzer.config.types import AnalyzerConfig
from circuit_analyzer.domain.grid import build_adjacency_graph, build_index
from circuit_analyzer.domain.voxel import Voxel
from circuit_analyzer.metrics.connectivity import compute_depth, compute_fanout
from circuit_analyzer.metrics.loops import detect_loops
from circuit_analyzer.metrics.oscillation import detect_oscillations

logger = logging.getLogger(__name__)

AnalysisListener = Callable[[AnalysisResult], object]


class VoxelSource(Protocol):
    """Read side of the world: its bound and a full snapshot of occupied cells."""

    world_size: int

    def get_all_voxels(self) -> list[Voxel]: ...


class TickSource(Protocol):
    """Anything that calls back once per simulation tick."""

    def subscribe(self, listener: Callable[[Any], object]) -> Subscription: ...


class CircuitAnalyzer:
    """Derive loops, oscillators, fan-out and depth from the world each tick."""

    def __init__(self, world: VoxelSource, config: AnalyzerConfig | None = None) -> None:
        self.world = world
        self.config = config or AnalyzerConfig()
        if self.config.world_size is not None and self.config.world_size != world.world_size:
            raise ValueError(
                f"config world_size {self.config.world_size} does not match "
                f"world size {world.world_size}"
            )
        self.world_size = world.world_size
        self.history = HistoryBuffer(self.config.history_capacity)
        self.last_result: AnalysisResult | None = None
        self._publisher: ResultPublisher[AnalysisResult] = ResultPublisher()
        self._tick_subscription: Subscription | None = None
        self._ticks = 0

    def subscribe(self, listener: AnalysisListener) -> Subscription:
        """Receive every future result; the returned handle unsubscribes."""
        return self._publisher.subscribe(listener)

    def refresh(self) -> AnalysisResult:
        """Read the world, analyze it, update the history and publish the result."""
        cfg = self.config
        voxels = self.world.get_all_voxels()
        index = build_index(voxels)
        graph = build_adjacency_graph(index, self.world_size)

        loops = detect_loops(graph, dedupe=cfg.dedupe_loops)
        fanout = compute_fanout(graph)
        depth = compute_depth(graph)

        self.history.append(snapshot_powered(index.values()))
        oscillators = detect_oscillations(
            self.history.snapshots(),
            window=cfg.history_capacity,
            min_toggles=cfg.min_toggles,
        )

        self._ticks += 1
        result = AnalysisResult(
            loops=tuple(loops),
            oscillators=tuple(oscillators),
            fanout=tuple(fanout),
            depth=depth,
            tick=self._ticks,
        )
        logger.debug(
            "tick %d: %d cells, %d loops, %d oscillators, max depth %d",
            self._ticks,
            len(index),
            len(loops),
            len(oscillators),
            depth.max_depth,
        )
        self.last_result = result
        self._publisher.publish(result)
        return result

    def _on_tick(self, _payload: object = None) -> None:
        self.refresh()

    def attach(self, ticks: TickSource) -> Subscription:
        """Run ``refresh`` on every notification from ``ticks``.

        Replaces any earlier attachment. Sources that replay their state on
        subscribe trigger one refresh immediately.
        """
        self.detach()
        self._tick_subscription = ticks.subscribe(self._on_tick)
        return self._tick_subscription

    def detach(self) -> None:
        if self._tick_subscription is not None:
            self._tick_subscription.unsubscribe()
            self._tick_subscription = None

    def close(self) -> None:
        """Detach from the tick source and drop subscribers and history."""
        self.detach()
        self._publisher.clear()
        self.history.clear()
        self.last_result = None

    def __enter__(self) -> CircuitAnalyzer:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
