"""Tests for circuit_analyzer.simulation.sim_history."""

from __future__ import annotations

import pytest

from circuit_analyzer.domain.voxel import Voxel
from circuit_analyzer.simulation.sim_history import (
    SimHistory,
    SimSample,
    build_sample,
    powered_clusters,
)


def _sample(powered: int = 0) -> SimSample:
    return SimSample(
        tick=0,
        powered_count=powered,
        total_blocks=0,
        changed_count=0,
        eval_ms=0.0,
        cluster_count=0,
        max_cluster_size=0,
    )


class TestSimHistory:
    def test_push_assigns_increasing_ticks(self) -> None:
        sim = SimHistory()
        assert sim.push_sample(_sample()).tick == 1
        assert sim.push_sample(_sample()).tick == 2
        assert [s.tick for s in sim.samples()] == [1, 2]

    def test_capacity_evicts_oldest(self) -> None:
        sim = SimHistory(capacity=3)
        for _ in range(5):
            sim.push_sample(_sample())
        assert [s.tick for s in sim.samples()] == [3, 4, 5]
        assert len(sim) == 3

    def test_subscribe_replays_current_history(self) -> None:
        sim = SimHistory()
        sim.push_sample(_sample(powered=2))
        got: list[list[SimSample]] = []
        sim.subscribe(got.append)
        assert len(got) == 1
        assert got[0][0].powered_count == 2

    def test_listeners_notified_on_push_and_reset(self) -> None:
        sim = SimHistory()
        got: list[int] = []
        handle = sim.subscribe(lambda samples: got.append(len(samples)))
        sim.push_sample(_sample())
        sim.reset()
        assert got == [0, 1, 0]
        assert sim.tick == 0
        handle()
        sim.push_sample(_sample())
        assert got == [0, 1, 0]

    def test_failing_listener_is_isolated_after_registration(self) -> None:
        sim = SimHistory()
        calls: list[int] = []

        def flaky(samples: list[SimSample]) -> None:
            if samples:
                raise RuntimeError("bad listener")

        sim.subscribe(flaky)
        sim.subscribe(lambda samples: calls.append(len(samples)))
        sim.push_sample(_sample())
        assert calls == [0, 1]

    def test_rejects_zero_capacity(self) -> None:
        with pytest.raises(ValueError):
            SimHistory(capacity=0)


class TestBuildSample:
    def test_counts(self) -> None:
        prev = [Voxel(0, 0, 0, powered=False), Voxel(1, 0, 0, powered=True)]
        next_ = [
            Voxel(0, 0, 0, powered=True),
            Voxel(1, 0, 0, powered=True),
            Voxel(5, 5, 5, powered=True),
        ]
        sample = build_sample(prev, next_, eval_ms=1.5)
        assert sample.powered_count == 3
        assert sample.total_blocks == 3
        assert sample.changed_count == 1
        assert sample.eval_ms == 1.5
        assert sample.cluster_count == 2
        assert sample.max_cluster_size == 2

    def test_unpowered_cells_split_clusters(self) -> None:
        voxels = [
            Voxel(0, 0, 0, powered=True),
            Voxel(1, 0, 0, powered=False),
            Voxel(2, 0, 0, powered=True),
            Voxel(2, 1, 0, powered=True),
            Voxel(2, 1, 1, powered=True),
        ]
        assert powered_clusters(voxels) == (2, 3)

    def test_no_powered_cells(self) -> None:
        assert powered_clusters([Voxel(0, 0, 0)]) == (0, 0)

    def test_kind_counts(self) -> None:
        next_ = [
            Voxel(0, 0, 0, kind="wire"),
            Voxel(1, 0, 0, kind="wire"),
            Voxel(2, 0, 0, kind="torch"),
            Voxel(3, 0, 0, kind="gate_and"),
            Voxel(4, 0, 0, kind="repeater"),
            Voxel(5, 0, 0, kind="output"),
            Voxel(6, 0, 0, kind="source"),
        ]
        sample = build_sample([], next_, eval_ms=0.0)
        assert sample.wire_count == 2
        assert sample.gate_count == 3
        assert sample.output_count == 1
        assert sample.total_blocks == 7

    def test_power_level_change_counts_as_changed(self) -> None:
        prev = [
            Voxel(0, 0, 0, powered=True, power_level=15),
            Voxel(1, 0, 0, powered=True, power_level=3),
        ]
        next_ = [
            Voxel(0, 0, 0, powered=True, power_level=14),
            Voxel(1, 0, 0, powered=True, power_level=3),
        ]
        assert build_sample(prev, next_, eval_ms=0.0).changed_count == 1
