"""Ekstrakcja ciągów drukowalnych i podgląd szesnastkowy bufora."""

from __future__ import annotations

MAX_DUMP_CHARS = 50_000
DEFAULT_MIN_LENGTH = 3
ARTIFACT_MIN_LENGTH = 4
HEX_PREVIEW_LIMIT = 1024

_TAB = 9
_NEWLINE = 10


def _is_printable(byte: int) -> bool:
    return 32 <= byte <= 126 or byte == _NEWLINE or byte == _TAB


def extract_printable_strings(buffer: bytes, min_length: int = DEFAULT_MIN_LENGTH) -> str:
    """Buduje zrzut ciągów drukowalnych ("string dump").

    Bajty ASCII 32-126 oraz tabulator i nowa linia przedłużają bieżący
    ciąg; każdy inny bajt kończy go. Ciągi krótsze niż `min_length` są
    pomijane, a wynik jest obcinany do 50 000 znaków.
    """

    runs: list[str] = []
    current = bytearray()

    for byte in buffer:
        if _is_printable(byte):
            current.append(byte)
            continue
        if len(current) >= min_length:
            runs.append(current.decode("ascii") + "\n")
        current.clear()

    if len(current) >= min_length:
        runs.append(current.decode("ascii") + "\n")

    return "".join(runs)[:MAX_DUMP_CHARS]


def to_hex_preview(buffer: bytes, limit: int = HEX_PREVIEW_LIMIT) -> str:
    """Podgląd pierwszych `limit` bajtów jako wielkie litery hex, 16 na wiersz."""

    parts: list[str] = []
    for index, byte in enumerate(buffer[:limit], start=1):
        parts.append(f"{byte:02X} ")
        if index % 16 == 0:
            parts.append("\n")
    return "".join(parts)


__all__ = [
    "ARTIFACT_MIN_LENGTH",
    "DEFAULT_MIN_LENGTH",
    "HEX_PREVIEW_LIMIT",
    "MAX_DUMP_CHARS",
    "extract_printable_strings",
    "to_hex_preview",
]
