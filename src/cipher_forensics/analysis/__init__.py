"""Silnik analizy lokalnej i orkiestracja ścieżki chmurowej."""

from .engine import analyze_locally, inspect_buffer, partition_artifacts, synthesize_report
from .orchestrator import AnalysisOrchestrator

__all__ = [
	"AnalysisOrchestrator",
	"analyze_locally",
	"inspect_buffer",
	"partition_artifacts",
	"synthesize_report",
]
