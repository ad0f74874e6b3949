"""Plain-text rendering of an analysis result."""

from __future__ import annotations

from circuit_analyzer.analysis.result import AnalysisResult
from circuit_analyzer.domain.voxel import format_key

# Fan-out rows shown in the report.
TOP_FANOUT = 10


def format_report(result: AnalysisResult, top_fanout: int = TOP_FANOUT) -> str:
    lines = [f"Loops Detected ({len(result.loops)})"]
    for loop in result.loops:
        path = " → ".join(format_key(k) for k in loop.cycle)
        lines.append(f"  Length {loop.length} → {path}")
    if not result.loops:
        lines.append("  No loops found.")

    lines.append(f"Oscillators ({len(result.oscillators)})")
    for osc in result.oscillators:
        lines.append(f"  {format_key(osc.key)} → period {osc.period}, freq {osc.frequency:.2f}")
    if not result.oscillators:
        lines.append("  No oscillators found.")

    lines.append("Fan-out (top)")
    for info in result.fanout[:top_fanout]:
        lines.append(f"  {format_key(info.key)} → {info.fanout}")
    if not result.fanout:
        lines.append("  No blocks.")

    deepest = result.depth.deepest_node
    node = format_key(deepest) if deepest is not None else "-"
    lines.append(f"Depth: max {result.depth.max_depth} at {node}")
    return "\n".join(lines)
