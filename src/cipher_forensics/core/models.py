"""Modele danych używane w rdzeniu silnika analizy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


class ArtifactTag(str, Enum):
    """Kategorie artefaktów wykrywanych w zrzucie tekstowym."""

    IP = "IP"
    URL = "URL"
    DOMAIN = "DOMAIN"
    EMAIL = "EMAIL"
    POTENTIAL_SECRET = "POTENTIAL_SECRET"
    VPN_LINK = "VPN_LINK"
    HTTP_PAYLOAD = "HTTP_PAYLOAD"
    FILE_PATH = "FILE_PATH"
    DATE = "DATE"
    DECODED_BASE64 = "DECODED_BASE64"


class AnalysisSource(str, Enum):
    """Pochodzenie raportu: lokalny silnik lub zewnętrzny analizator."""

    LOCAL = "local"
    CLOUD = "cloud"


@dataclass(frozen=True, slots=True)
class Artifact:
    """Pojedynczy, otagowany fakt wyciągnięty z zawartości pliku."""

    tag: ArtifactTag
    value: str
    depth: Optional[int] = None

    def render(self) -> str:
        """Zwraca postać tekstową `[TAG] wartość`."""

        if self.tag is ArtifactTag.DECODED_BASE64 and self.depth is not None:
            return f"[{self.tag.value} L{self.depth}] {self.value}"
        return f"[{self.tag.value}] {self.value}"


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Ustrukturyzowany raport z analizy pojedynczego pliku."""

    file_type: str
    encryption_method: Optional[str]
    extracted_metadata: Dict[str, str] = field(default_factory=dict)
    decrypted_segments: List[str] = field(default_factory=list)
    ai_insight: str = ""
    structure: str = ""
    source: AnalysisSource = AnalysisSource.LOCAL

    def to_dict(self) -> Dict[str, Any]:
        """Postać słownikowa zgodna z formatem wymiany (camelCase)."""

        return {
            "fileType": self.file_type,
            "encryptionMethod": self.encryption_method,
            "extractedMetadata": dict(self.extracted_metadata),
            "decryptedSegments": list(self.decrypted_segments),
            "aiInsight": self.ai_insight,
            "structure": self.structure,
        }

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        *,
        source: AnalysisSource = AnalysisSource.CLOUD,
    ) -> "AnalysisResult":
        """Buduje wynik z odpowiedzi zdalnego analizatora.

        Zgłasza `ValueError`, gdy odpowiedź nie ma wymaganego kształtu.
        """

        if not isinstance(payload, Mapping):
            raise ValueError("Payload analizy musi być obiektem JSON")

        file_type = payload.get("fileType")
        insight = payload.get("aiInsight")
        if not isinstance(file_type, str) or not file_type.strip():
            raise ValueError("Brak pola fileType w odpowiedzi")
        if not isinstance(insight, str):
            raise ValueError("Brak pola aiInsight w odpowiedzi")

        method = payload.get("encryptionMethod")
        metadata = payload.get("extractedMetadata") or {}
        segments = payload.get("decryptedSegments") or []
        if not isinstance(metadata, Mapping):
            raise ValueError("Pole extractedMetadata musi być obiektem")
        if not isinstance(segments, list):
            raise ValueError("Pole decryptedSegments musi być listą")

        return cls(
            file_type=file_type,
            encryption_method=None if method is None else str(method),
            extracted_metadata={str(key): str(value) for key, value in metadata.items()},
            decrypted_segments=[str(segment) for segment in segments],
            ai_insight=insight,
            structure=str(payload.get("structure") or ""),
            source=source,
        )


@dataclass(frozen=True, slots=True)
class FileProfile:
    """Zestaw wyników wstępnej triażu pliku, niezależny od raportu."""

    name: str
    size: int
    signature: str
    entropy: float
    protocols: List[str]
    hex_preview: str
    text_preview: str
    artifacts: List[Artifact]
    target_host: Optional[str] = None

    def rendered_artifacts(self) -> List[str]:
        """Artefakty w postaci tekstowej, w kolejności wykrycia."""

        return [artifact.render() for artifact in self.artifacts]


@dataclass(frozen=True, slots=True)
class ForensicReport:
    """Raport końcowy: profil pliku wraz z wynikiem analizy."""

    profile: FileProfile
    result: AnalysisResult


__all__ = [
    "AnalysisResult",
    "AnalysisSource",
    "Artifact",
    "ArtifactTag",
    "FileProfile",
    "ForensicReport",
]
