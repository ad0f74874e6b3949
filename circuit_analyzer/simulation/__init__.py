"""Simulation side: per-tick sample history that drives analysis refreshes."""

from circuit_analyzer.simulation.sim_history import (
    SimHistory,
    SimSample,
    build_sample,
    powered_clusters,
)

__all__ = ["SimHistory", "SimSample", "build_sample", "powered_clusters"]
