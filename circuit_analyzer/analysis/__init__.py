"""Analysis layer: history window, result publishing and the per-tick engine."""

from circuit_analyzer.analysis.engine import CircuitAnalyzer
from circuit_analyzer.analysis.history import HistoryBuffer, snapshot_powered
from circuit_analyzer.analysis.publisher import ResultPublisher, Subscription
from circuit_analyzer.analysis.report import format_report
from circuit_analyzer.analysis.result import AnalysisResult

__all__ = [
    "AnalysisResult",
    "CircuitAnalyzer",
    "HistoryBuffer",
    "ResultPublisher",
    "Subscription",
    "format_report",
    "snapshot_powered",
]
