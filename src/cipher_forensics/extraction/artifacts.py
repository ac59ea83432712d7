"""Skaner artefaktów sieciowych i bezpieczeństwa w zrzucie tekstowym.

Skan składa się z dwóch przebiegów:

1. rekurencyjnego wyszukiwania zagnieżdżonego base64 (maksymalnie trzy
   poziomy dekodowania),
2. przebiegu kategorii wzorców: najpierw po całym tekście, potem linia po
   linii.

Wszystkie wartości są deduplikowane, a lista wynikowa jest ograniczona do
80 pozycji. Stan skanu (`ScanState`) żyje wyłącznie w obrębie jednego
wywołania.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Pattern, Set, Tuple

import structlog

from cipher_forensics.core.models import Artifact, ArtifactTag

from .encoding import bytes_to_text, decode_base64, printable_ratio
from .strings import ARTIFACT_MIN_LENGTH, extract_printable_strings

logger = structlog.get_logger(__name__)

MAX_ARTIFACTS = 80
MAX_DECODE_DEPTH = 2
MIN_DECODED_LENGTH = 5
MIN_PRINTABLE_RATIO = 0.6
DECODED_PREVIEW_CHARS = 200
MIN_LINE_LENGTH = 4
MIN_PATH_LENGTH = 10
EXCLUDED_PATH_MARKER = "node_modules"

BASE64_CANDIDATE = re.compile(r"[a-zA-Z0-9+/=]{20,}")

IP_PATTERN = re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b")
DOMAIN_PATTERN = re.compile(
    r"(?:[a-zA-Z0-9-]+\.)+(?:com|net|org|io|xyz|co|uk|us|me|info|biz|gov|edu)(?![A-Za-z0-9-])",
    re.IGNORECASE,
)
URL_PATTERN = re.compile(r"https?://[^\s\"']+", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
VPN_LINK_PATTERN = re.compile(r"(?:vmess|vless|trojan|ss|ssr)://[a-zA-Z0-9+/=_\-@:?&.#%~]+", re.IGNORECASE)
PAYLOAD_PATTERN = re.compile(r"(?:CONNECT|GET|POST|PUT|HEAD|OPTIONS|TRACE) \S+ HTTP", re.IGNORECASE)
PATH_PATTERN = re.compile(r"[a-zA-Z]:\\[^\s<>:\"|?*]+|(?:/[a-zA-Z0-9._-]+)+")
DATE_PATTERN = re.compile(r"\b(?:19|20)\d{2}[-/](?:0[1-9]|1[0-2])[-/](?:0[1-9]|[12]\d|3[01])\b")
SECRET_PATTERN = re.compile(
    r"(?:api_key|secret|password|auth|token|access_key)[\s=:\"']{1,3}[a-zA-Z0-9_-]{8,}",
    re.IGNORECASE,
)

Extractor = Callable[[str], List[str]]


def _keep_ip(value: str) -> bool:
    return not value.startswith("0.") and value != "127.0.0.1"


def _keep_path(value: str) -> bool:
    return len(value) > MIN_PATH_LENGTH and EXCLUDED_PATH_MARKER not in value


def _matches(pattern: Pattern[str], keep: Optional[Callable[[str], bool]] = None) -> Extractor:
    def extract(text: str) -> List[str]:
        found = [match.group(0) for match in pattern.finditer(text)]
        return [value for value in found if keep is None or keep(value)]

    return extract


def _whole_line(pattern: Pattern[str]) -> Extractor:
    def extract(line: str) -> List[str]:
        return [line] if pattern.search(line) else []

    return extract


# Kategorie skanowane po całym zrzucie, w ustalonej kolejności.
TEXT_CATEGORIES: Tuple[Tuple[ArtifactTag, Extractor], ...] = (
    (ArtifactTag.URL, _matches(URL_PATTERN)),
    (ArtifactTag.DOMAIN, _matches(DOMAIN_PATTERN)),
    (ArtifactTag.EMAIL, _matches(EMAIL_PATTERN)),
    (ArtifactTag.POTENTIAL_SECRET, _matches(SECRET_PATTERN)),
)

# Kategorie skanowane linia po linii, w ustalonej kolejności.
LINE_CATEGORIES: Tuple[Tuple[ArtifactTag, Extractor], ...] = (
    (ArtifactTag.VPN_LINK, _matches(VPN_LINK_PATTERN)),
    (ArtifactTag.HTTP_PAYLOAD, _whole_line(PAYLOAD_PATTERN)),
    (ArtifactTag.IP, _matches(IP_PATTERN, _keep_ip)),
    (ArtifactTag.FILE_PATH, _matches(PATH_PATTERN, _keep_path)),
    (ArtifactTag.DATE, _matches(DATE_PATTERN)),
)


@dataclass(slots=True)
class ScanState:
    """Stan pojedynczego skanu: lista wynikowa, zbiór widzianych wartości i limit."""

    artifacts: List[Artifact] = field(default_factory=list)
    seen: Set[str] = field(default_factory=set)
    limit: int = MAX_ARTIFACTS

    @property
    def full(self) -> bool:
        return len(self.artifacts) >= self.limit

    def add(self, tag: ArtifactTag, value: str, *, depth: Optional[int] = None) -> bool:
        """Dodaje artefakt, jeśli wartość jest nowa i limit nie został osiągnięty."""

        if self.full or len(value) <= 3 or value in self.seen:
            return False
        self.seen.add(value)
        self.artifacts.append(Artifact(tag=tag, value=value, depth=depth))
        return True


def decode_nested_base64(text: str, state: ScanState, depth: int = 0) -> ScanState:
    """Wyszukuje i dekoduje ciągi base64, schodząc rekurencyjnie w wynik."""

    if depth > MAX_DECODE_DEPTH:
        return state

    for candidate in BASE64_CANDIDATE.findall(text):
        raw = decode_base64(candidate)
        if raw is None:
            continue
        decoded = bytes_to_text(raw)
        if len(decoded) <= MIN_DECODED_LENGTH or printable_ratio(decoded) <= MIN_PRINTABLE_RATIO:
            continue
        preview = decoded[:DECODED_PREVIEW_CHARS].replace("\n", " ")
        state.add(ArtifactTag.DECODED_BASE64, preview, depth=depth + 1)
        decode_nested_base64(decoded, state, depth + 1)

    return state


def scan_patterns(text: str, state: ScanState) -> ScanState:
    """Przebieg kategorii wzorców: cały tekst, a następnie kolejne linie."""

    for tag, extract in TEXT_CATEGORIES:
        for value in extract(text):
            state.add(tag, value)

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if len(line) < MIN_LINE_LENGTH:
            continue
        for tag, extract in LINE_CATEGORIES:
            for value in extract(line):
                state.add(tag, value)

    return state


def scan_text(text: str, *, limit: int = MAX_ARTIFACTS) -> List[Artifact]:
    """Skanuje gotowy zrzut tekstowy."""

    state = ScanState(limit=limit)
    state = decode_nested_base64(text, state)
    state = scan_patterns(text, state)
    logger.debug("artifact-scan-complete", artifacts=len(state.artifacts), capped=state.full)
    return list(state.artifacts)


def scan_artifacts(buffer: bytes) -> List[Artifact]:
    """Wyodrębnia artefakty z bufora (ciągi drukowalne o długości >= 4)."""

    return scan_text(extract_printable_strings(buffer, ARTIFACT_MIN_LENGTH))


__all__ = [
    "LINE_CATEGORIES",
    "MAX_ARTIFACTS",
    "MAX_DECODE_DEPTH",
    "ScanState",
    "TEXT_CATEGORIES",
    "decode_nested_base64",
    "scan_artifacts",
    "scan_patterns",
    "scan_text",
]
