"""Configuration dataclasses for the circuit analyzer."""

from __future__ import annotations

from dataclasses import dataclass

from circuit_analyzer.config.constants import HISTORY_CAPACITY, MIN_OSCILLATION_TOGGLES

__all__ = ["AnalyzerConfig"]


@dataclass(frozen=True)
class AnalyzerConfig:
    """Knobs for one analyzer instance.

    ``world_size`` defaults to None, meaning the bound is read from the world;
    when set it must agree with the world the analyzer is built on.
    ``dedupe_loops`` collapses rotations and reversals of the same cycle.
    It is off by default, so every back-edge found by the search is reported.
    """

    world_size: int | None = None
    history_capacity: int = HISTORY_CAPACITY
    min_toggles: int = MIN_OSCILLATION_TOGGLES
    dedupe_loops: bool = False

    def __post_init__(self) -> None:
        if self.world_size is not None and self.world_size < 1:
            raise ValueError("world_size must be >= 1")
        if self.history_capacity < 2:
            raise ValueError("history_capacity must be >= 2")
        if self.min_toggles < 1:
            raise ValueError("min_toggles must be >= 1")
        if self.min_toggles >= self.history_capacity:
            raise ValueError("min_toggles must be < history_capacity")
