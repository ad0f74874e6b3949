"""Configuration layer: constants and typed config dataclasses."""

from circuit_analyzer.config.constants import (
    GATE_KINDS,
    HISTORY_CAPACITY,
    MAX_FANOUT,
    MIN_OSCILLATION_TOGGLES,
    NEIGHBOR_OFFSETS,
    SIM_HISTORY_CAPACITY,
    WORLD_SIZE,
)
from circuit_analyzer.config.types import AnalyzerConfig

__all__ = [
    "AnalyzerConfig",
    "GATE_KINDS",
    "HISTORY_CAPACITY",
    "MAX_FANOUT",
    "MIN_OSCILLATION_TOGGLES",
    "NEIGHBOR_OFFSETS",
    "SIM_HISTORY_CAPACITY",
    "WORLD_SIZE",
]
