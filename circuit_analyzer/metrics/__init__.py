"""Structural and temporal circuit metrics."""

from circuit_analyzer.metrics.connectivity import (
    DepthInfo,
    FanoutInfo,
    compute_depth,
    compute_fanout,
)
from circuit_analyzer.metrics.loops import LoopInfo, canonical_cycle, detect_loops
from circuit_analyzer.metrics.oscillation import (
    OscillationInfo,
    detect_oscillations,
    state_matrix,
    toggle_counts,
)

__all__ = [
    "DepthInfo",
    "FanoutInfo",
    "LoopInfo",
    "OscillationInfo",
    "canonical_cycle",
    "compute_depth",
    "compute_fanout",
    "detect_loops",
    "detect_oscillations",
    "state_matrix",
    "toggle_counts",
]
