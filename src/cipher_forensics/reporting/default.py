"""Domyślna implementacja eksportu raportów (JSON/tekst)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from cipher_forensics.core.models import AnalysisResult, FileProfile, ForensicReport
from .exporter import ExportFormat, ReportExporter


class DefaultReportExporter(ReportExporter):
    """Eksporter zapisujący raport do pliku JSON lub tekstowego."""

    def render(self, report: ForensicReport, fmt: ExportFormat) -> str:
        if fmt is ExportFormat.JSON:
            return json.dumps(self._build_json_payload(report), indent=2, ensure_ascii=False)
        if fmt is ExportFormat.TEXT:
            return self._build_text(report)
        raise ValueError(f"Nieobsługiwany format eksportu: {fmt}")  # pragma: no cover

    def export(self, report: ForensicReport, destination: Path, fmt: ExportFormat) -> Path:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(self.render(report, fmt), encoding="utf-8")
        return destination

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def _build_json_payload(self, report: ForensicReport) -> Dict[str, object]:
        return {
            "file": self._profile_to_dict(report.profile),
            "source": report.result.source.value,
            "analysis": report.result.to_dict(),
        }

    @staticmethod
    def _profile_to_dict(profile: FileProfile) -> Dict[str, object]:
        return {
            "name": profile.name,
            "size": profile.size,
            "signature": profile.signature,
            "entropy": round(profile.entropy, 2),
            "protocols": list(profile.protocols),
            "target_host": profile.target_host,
            "artifacts": [
                {"tag": artifact.tag.value, "value": artifact.value, "depth": artifact.depth}
                for artifact in profile.artifacts
            ],
        }

    # ------------------------------------------------------------------
    # Tekst
    # ------------------------------------------------------------------

    def _build_text(self, report: ForensicReport) -> str:
        profile = report.profile
        lines: List[str] = [
            f"File: {profile.name} ({profile.size} bytes)",
            f"Signature: {profile.signature}",
            f"Entropy: {profile.entropy:.2f}%",
            f"Protocols: {', '.join(profile.protocols) or 'none'}",
            f"Target host: {profile.target_host or 'none'}",
            "",
        ]
        lines.extend(self._result_lines(report.result))
        lines.append("")
        lines.append("ARTIFACTS:")
        lines.extend(profile.rendered_artifacts() or ["(none)"])
        lines.append("")
        lines.append("HEX PREVIEW:")
        lines.append(profile.hex_preview.rstrip())
        return "\n".join(lines) + "\n"

    @staticmethod
    def _result_lines(result: AnalysisResult) -> List[str]:
        lines = [
            f"File type: {result.file_type}",
            f"Encryption: {result.encryption_method or 'none'}",
            f"Structure: {result.structure}",
            "",
            "METADATA:",
        ]
        lines.extend(f"  {key}: {value}" for key, value in result.extracted_metadata.items())
        lines.append("")
        lines.append("DECRYPTED SEGMENTS:")
        lines.extend(result.decrypted_segments or ["(none)"])
        lines.append("")
        lines.append(result.ai_insight)
        return lines


__all__ = ["DefaultReportExporter"]
