"""Circuit analysis for 3D voxel logic worlds.

Each simulation tick the analyzer reads the occupied cells, finds feedback
loops, ranks fan-out, measures propagation depth, tracks powered-state
history to spot oscillators, and broadcasts the combined result.
"""

from circuit_analyzer.analysis import AnalysisResult, CircuitAnalyzer, format_report
from circuit_analyzer.config import AnalyzerConfig
from circuit_analyzer.domain import Voxel, VoxelWorld
from circuit_analyzer.simulation import SimHistory

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "AnalyzerConfig",
    "CircuitAnalyzer",
    "SimHistory",
    "Voxel",
    "VoxelWorld",
    "format_report",
]
