"""Interfejsy eksportu raportów."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Protocol

from cipher_forensics.core.models import ForensicReport


class ExportFormat(str, Enum):
    """Formaty eksportu raportów."""

    JSON = "json"
    TEXT = "text"


class ReportExporter(Protocol):
    """Interfejs dla mechanizmów eksportu."""

    def render(self, report: ForensicReport, fmt: ExportFormat) -> str:
        """Zwraca raport w postaci tekstowej."""

    def export(self, report: ForensicReport, destination: Path, fmt: ExportFormat) -> Path:
        """Eksportuje raport do wybranego formatu i zwraca ścieżkę docelową."""
