"""Feedback-loop detection over the cell adjacency graph.

The search is a depth-first walk from every not-yet-visited node. A neighbor
that is already on the active path (other than the node we just came from)
closes a cycle, which is recorded as the path suffix starting at that node.
A global visited set keeps completed subtrees from being walked again, so the
total work stays near O(V + E) plus the cost of recording cycles.

Cycles are reported once per back-edge found. The same physical ring can
therefore appear more than once, rotated or reversed, when it is reached from
different entry points. ``dedupe=True`` collapses those reports.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import networkx as nx

from circuit_analyzer.domain.voxel import CellKey


@dataclass(frozen=True)
class LoopInfo:
    """One cycle, in traversal order, without repeating the closing cell."""

    cycle: tuple[CellKey, ...]
    length: int

    def __post_init__(self) -> None:
        if self.length != len(self.cycle):
            raise ValueError("length must equal len(cycle)")


def canonical_cycle(cycle: tuple[CellKey, ...]) -> tuple[CellKey, ...]:
    """Return the rotation/reflection of ``cycle`` that starts at its smallest
    cell and walks toward the smaller of that cell's two ring neighbors."""
    if not cycle:
        return cycle
    start = cycle.index(min(cycle))
    forward = cycle[start:] + cycle[:start]
    backward = (forward[0],) + tuple(reversed(forward[1:]))
    return min(forward, backward)


def detect_loops(graph: nx.DiGraph, *, dedupe: bool = False) -> list[LoopInfo]:
    """Find feedback loops with an explicit-stack DFS.

    Each stack frame carries its own immutable path tuple, so no frame ever
    sees a later mutation and recursion depth is not a concern.
    """
    visited: set[CellKey] = set()
    loops: list[LoopInfo] = []
    seen_cycles: set[tuple[CellKey, ...]] = set()

    for start in graph:
        if start in visited:
            continue
        visited.add(start)
        on_path: set[CellKey] = {start}
        stack: list[tuple[CellKey, tuple[CellKey, ...], Iterator[CellKey]]] = [
            (start, (start,), iter(graph.successors(start)))
        ]
        while stack:
            node, path, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                on_path.discard(node)
                continue
            if child in on_path:
                # Stepping straight back along the edge we arrived on is not a loop.
                if len(path) >= 2 and path[-2] == child:
                    continue
                cycle = path[path.index(child) :]
                if dedupe:
                    canon = canonical_cycle(cycle)
                    if canon in seen_cycles:
                        continue
                    seen_cycles.add(canon)
                loops.append(LoopInfo(cycle=cycle, length=len(cycle)))
            elif child not in visited:
                visited.add(child)
                on_path.add(child)
                stack.append((child, path + (child,), iter(graph.successors(child))))

    return loops
