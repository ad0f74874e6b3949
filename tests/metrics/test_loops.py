"""Tests for circuit_analyzer.metrics.loops."""

from __future__ import annotations

import pytest

from circuit_analyzer.domain.grid import build_adjacency_graph, build_index
from circuit_analyzer.domain.voxel import Voxel
from circuit_analyzer.metrics.loops import LoopInfo, canonical_cycle, detect_loops

RING = ((0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0))


def _graph(keys, world_size: int = 16):
    index = build_index(Voxel(x, y, z) for x, y, z in keys)
    return build_adjacency_graph(index, world_size)


def _cube(origin: tuple[int, int, int]) -> list[tuple[int, int, int]]:
    ox, oy, oz = origin
    return [(ox + dx, oy + dy, oz + dz) for dx in (0, 1) for dy in (0, 1) for dz in (0, 1)]


class TestAcyclic:
    def test_empty_world(self) -> None:
        assert detect_loops(_graph([])) == []

    def test_single_cell(self) -> None:
        assert detect_loops(_graph([(3, 3, 3)])) == []

    def test_two_adjacent_cells_are_not_a_loop(self) -> None:
        assert detect_loops(_graph([(0, 0, 0), (1, 0, 0)])) == []

    def test_straight_wire(self) -> None:
        assert detect_loops(_graph([(x, 4, 4) for x in range(10)])) == []

    def test_branching_tree(self) -> None:
        center = (5, 5, 5)
        arms = [(4, 5, 5), (6, 5, 5), (5, 4, 5), (5, 6, 5), (5, 5, 4), (5, 5, 6)]
        tips = [(3, 5, 5), (7, 5, 5), (5, 3, 5)]
        assert detect_loops(_graph([center, *arms, *tips])) == []

    def test_long_wire_does_not_hit_recursion_limit(self) -> None:
        n = 3000
        graph = _graph([(x, 0, 0) for x in range(n)], world_size=n)
        assert detect_loops(graph) == []


class TestCycles:
    def test_square_ring_reports_one_four_cycle(self) -> None:
        loops = detect_loops(_graph(RING))
        assert loops == [LoopInfo(cycle=RING, length=4)]

    def test_ring_found_from_any_insertion_order(self) -> None:
        loops = detect_loops(_graph(reversed(RING)))
        assert any(loop.length == 4 for loop in loops)
        assert {canonical_cycle(loop.cycle) for loop in loops} == {canonical_cycle(RING)}

    def test_length_matches_cycle(self) -> None:
        for loop in detect_loops(_graph(_cube((0, 0, 0)))):
            assert loop.length == len(loop.cycle)
            assert loop.length >= 4
            assert len(set(loop.cycle)) == loop.length

    def test_consecutive_cycle_cells_are_adjacent(self) -> None:
        graph = _graph(_cube((2, 2, 2)))
        for loop in detect_loops(graph):
            closed = loop.cycle + loop.cycle[:1]
            for a, b in zip(closed, closed[1:]):
                assert graph.has_edge(a, b)

    def test_disconnected_components_are_each_searched(self) -> None:
        far_ring = tuple((x + 8, y + 8, z + 8) for x, y, z in RING)
        loops = detect_loops(_graph([*RING, (5, 5, 5), *far_ring]))
        canon = {canonical_cycle(loop.cycle) for loop in loops}
        assert canon == {canonical_cycle(RING), canonical_cycle(far_ring)}

    def test_dedupe_keeps_one_report_per_cycle(self) -> None:
        graph = _graph(_cube((0, 0, 0)))
        raw = detect_loops(graph)
        deduped = detect_loops(graph, dedupe=True)
        canon = [canonical_cycle(loop.cycle) for loop in deduped]
        assert len(canon) == len(set(canon))
        assert set(canon) == {canonical_cycle(loop.cycle) for loop in raw}
        assert len(deduped) <= len(raw)


class TestLoopInfo:
    def test_rejects_inconsistent_length(self) -> None:
        with pytest.raises(ValueError):
            LoopInfo(cycle=RING, length=3)


class TestCanonicalCycle:
    def test_rotations_and_reversals_agree(self) -> None:
        expected = canonical_cycle(RING)
        for shift in range(len(RING)):
            rotated = RING[shift:] + RING[:shift]
            assert canonical_cycle(rotated) == expected
            assert canonical_cycle(tuple(reversed(rotated))) == expected

    def test_starts_at_smallest_cell(self) -> None:
        assert canonical_cycle(((1, 1, 0), (0, 1, 0), (0, 0, 0), (1, 0, 0)))[0] == (0, 0, 0)

    def test_empty(self) -> None:
        assert canonical_cycle(()) == ()
