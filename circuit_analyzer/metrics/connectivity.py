"""Connectivity metrics: per-cell fan-out and graph eccentricity."""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from circuit_analyzer.config.constants import MAX_FANOUT
from circuit_analyzer.domain.voxel import CellKey


@dataclass(frozen=True)
class FanoutInfo:
    """Number of occupied orthogonal neighbors of one cell."""

    key: CellKey
    fanout: int

    def __post_init__(self) -> None:
        if not 0 <= self.fanout <= MAX_FANOUT:
            raise ValueError(f"fanout must be in [0, {MAX_FANOUT}]")


@dataclass(frozen=True)
class DepthInfo:
    """Largest BFS distance seen from any source, and the cell reaching it.

    ``deepest_node`` is None when no cell is reachable at distance >= 1.
    """

    max_depth: int
    deepest_node: CellKey | None

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")


def compute_fanout(graph: nx.DiGraph) -> list[FanoutInfo]:
    """Rank cells by fan-out, highest first; ties keep graph order."""
    ranked = [FanoutInfo(key=key, fanout=graph.out_degree(key)) for key in graph]
    ranked.sort(key=lambda info: info.fanout, reverse=True)
    return ranked


def compute_depth(graph: nx.DiGraph) -> DepthInfo:
    """Profile the eccentricity of every node and keep the overall maximum.

    Runs one BFS per source, O(V * (V + E)); fine for a grid bounded by the
    world size. Distances are visited in BFS discovery order, and only a
    strictly larger distance replaces the current best, so ties go to the
    first (source, node) pair encountered.
    """
    max_depth = 0
    deepest: CellKey | None = None
    for source in graph:
        lengths = nx.single_source_shortest_path_length(graph, source)
        for node, dist in lengths.items():
            if dist > max_depth:
                max_depth = dist
                deepest = node
    return DepthInfo(max_depth=max_depth, deepest_node=deepest)
