"""Rozpoznawanie typu pliku na podstawie sygnatur (magic bytes).

Tabela sygnatur jest zasobem pakietu (`file_signatures.json`) i jest
sprawdzana w ustalonej kolejności; wygrywa pierwsze dopasowanie.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Sequence

_DATA_PACKAGE = "cipher_forensics.data"
_DEFAULT_FILE = "file_signatures.json"

SIGNATURE_WINDOW = 8
UNKNOWN_LABEL = "Unknown Binary / Raw Data"


@dataclass(frozen=True, slots=True)
class SignatureMatcher:
    """Pojedyncza reguła porównania bajtów pod zadanym przesunięciem."""

    type: str
    pattern: bytes
    offset: int = 0

    @property
    def end(self) -> int:
        return self.offset + len(self.pattern)

    def matches(self, data: bytes) -> bool:
        if self.type != "equals":
            raise ValueError(f"Nieobsługiwany typ matchera: {self.type}")
        if self.end > len(data):
            return False
        return data[self.offset : self.end] == self.pattern


@dataclass(frozen=True, slots=True)
class FileSignature:
    """Konfiguracyjna definicja typu pliku."""

    identifier: str
    label: str
    matchers: Sequence[SignatureMatcher]

    @property
    def window(self) -> int:
        return max(matcher.end for matcher in self.matchers)

    def matches(self, data: bytes) -> bool:
        return all(matcher.matches(data) for matcher in self.matchers)


def _pattern_to_bytes(pattern: str, encoding: str | None) -> bytes:
    if encoding is None or encoding.lower() == "ascii":
        return pattern.encode("ascii")
    if encoding.lower() == "hex":
        return bytes.fromhex(pattern)
    raise ValueError(f"Nieobsługiwane kodowanie wzorca: {encoding}")


def _load_raw_config(path: Path | None = None) -> Iterable[dict]:
    if path is not None:
        with Path(path).open("r", encoding="utf-8") as handle:
            return json.load(handle)
    with resources.files(_DATA_PACKAGE).joinpath(_DEFAULT_FILE).open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _parse_signature(raw: dict) -> FileSignature:
    matchers = [
        SignatureMatcher(
            type=matcher.get("type", "equals"),
            pattern=_pattern_to_bytes(matcher["pattern"], matcher.get("encoding")),
            offset=int(matcher.get("offset", 0)),
        )
        for matcher in raw["matchers"]
    ]
    if not matchers:
        raise ValueError(f"Sygnatura {raw.get('id')} nie ma żadnych matcherów")
    return FileSignature(identifier=raw["id"], label=raw["label"], matchers=matchers)


def load_signatures(path: Path | None = None) -> List[FileSignature]:
    """Wczytuje tabelę sygnatur z zasobu pakietu lub wskazanego pliku."""

    return [_parse_signature(entry) for entry in _load_raw_config(path)]


@lru_cache(maxsize=1)
def load_default_signatures() -> tuple[FileSignature, ...]:
    """Wczytuje i cache'uje domyślną tabelę sygnatur."""

    return tuple(load_signatures())


def detect_signature(buffer: bytes, signatures: Sequence[FileSignature] | None = None) -> str:
    """Zwraca etykietę typu pliku dla podanego bufora.

    Prefiksy są sprawdzane w obrębie pierwszych 8 bajtów; jedynie WebP
    wymaga drugiego znacznika (`WEBP`) pod przesunięciem 8.
    """

    table = signatures if signatures is not None else load_default_signatures()
    for signature in table:
        window = max(SIGNATURE_WINDOW, signature.window)
        if signature.matches(bytes(buffer[:window])):
            return signature.label
    return UNKNOWN_LABEL


__all__ = [
    "FileSignature",
    "SignatureMatcher",
    "SIGNATURE_WINDOW",
    "UNKNOWN_LABEL",
    "detect_signature",
    "load_default_signatures",
    "load_signatures",
]
