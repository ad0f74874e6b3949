"""Combined per-tick analysis result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from circuit_analyzer.domain.voxel import format_key
from circuit_analyzer.metrics.connectivity import DepthInfo, FanoutInfo
from circuit_analyzer.metrics.loops import LoopInfo
from circuit_analyzer.metrics.oscillation import OscillationInfo


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable aggregate of the four analyses for one tick."""

    loops: tuple[LoopInfo, ...]
    oscillators: tuple[OscillationInfo, ...]
    fanout: tuple[FanoutInfo, ...]
    depth: DepthInfo
    tick: int = 0

    def as_dict(self) -> dict[str, Any]:
        """JSON-ready view with ``"x,y,z"`` string keys."""
        deepest = self.depth.deepest_node
        return {
            "tick": self.tick,
            "loops": [
                {"cycle": [format_key(k) for k in loop.cycle], "length": loop.length}
                for loop in self.loops
            ],
            "oscillators": [
                {"key": format_key(o.key), "frequency": o.frequency, "period": o.period}
                for o in self.oscillators
            ],
            "fanout": [{"key": format_key(f.key), "fanout": f.fanout} for f in self.fanout],
            "depth": {
                "maxDepth": self.depth.max_depth,
                "deepestNode": format_key(deepest) if deepest is not None else "",
            },
        }
