"""Wybór ścieżki analizy: analizator w chmurze z lokalnym fallbackiem."""

from __future__ import annotations

from dataclasses import replace

import structlog
from structlog.stdlib import BoundLogger

from cipher_forensics.ai import CLOUD_PROVENANCE, ChatCloudAnalyzer, CloudAnalyzer, CloudRequest, load_ai_config
from cipher_forensics.core.models import AnalysisResult, AnalysisSource
from cipher_forensics.detection import detect_signature
from cipher_forensics.extraction import extract_printable_strings, scan_artifacts, to_hex_preview

from .engine import analyze_locally


class AnalysisOrchestrator:
    """Uruchamia analizę zdalną, a przy każdej porażce przechodzi na silnik lokalny."""

    def __init__(self, cloud: CloudAnalyzer | None = None, *, logger: BoundLogger | None = None) -> None:
        self._cloud = cloud
        self._logger = logger or structlog.get_logger(__name__)

    @classmethod
    def from_env(cls, *, allow_cloud: bool = True) -> "AnalysisOrchestrator":
        """Tworzy orkiestrator; chmura jest aktywna tylko przy skonfigurowanym kluczu."""

        config = load_ai_config() if allow_cloud else None
        return cls(ChatCloudAnalyzer(config) if config is not None else None)

    @property
    def cloud_enabled(self) -> bool:
        return self._cloud is not None

    def build_request(self, file_name: str, buffer: bytes) -> CloudRequest:
        return CloudRequest(
            file_name=file_name,
            hex_preview=to_hex_preview(buffer),
            text_preview=extract_printable_strings(buffer),
            signature=detect_signature(buffer),
            artifacts=[artifact.render() for artifact in scan_artifacts(buffer)],
        )

    def analyze(self, file_name: str, buffer: bytes) -> AnalysisResult:
        """Zwraca raport; silnik lokalny jest zawsze ostatecznym fallbackiem."""

        if self._cloud is None:
            self._logger.info("local-analysis-selected", file=file_name, reason="no-api-key")
            return analyze_locally(file_name, buffer)

        try:
            result = self._cloud.analyze(self.build_request(file_name, buffer))
            if not isinstance(result, AnalysisResult) or not result.file_type.strip():
                raise ValueError("empty or malformed cloud result")
        except Exception as exc:
            self._logger.warning("cloud-analysis-failed", file=file_name, error=str(exc))
            return analyze_locally(file_name, buffer)

        self._logger.info("cloud-analysis-complete", file=file_name)
        return replace(
            result,
            ai_insight=CLOUD_PROVENANCE + result.ai_insight,
            source=AnalysisSource.CLOUD,
        )


__all__ = ["AnalysisOrchestrator"]
