"""Tolerancyjne dekodowanie base64 w stylu przeglądarkowego `atob`."""

from __future__ import annotations

import base64
import binascii
import re

_WHITESPACE = re.compile(r"[\t\n\f\r ]")
_ALPHABET = re.compile(r"[A-Za-z0-9+/]*")


def decode_base64(text: str) -> bytes | None:
    """Dekoduje base64; zwraca `None`, gdy wejście nie jest poprawne.

    Białe znaki są ignorowane, brakujące dopełnienie `=` jest akceptowane,
    a długość dająca resztę 1 z dzielenia przez 4 jest odrzucana.
    """

    data = _WHITESPACE.sub("", text)
    if len(data) % 4 == 0:
        for _ in range(2):
            if data.endswith("="):
                data = data[:-1]
    if len(data) % 4 == 1 or not _ALPHABET.fullmatch(data):
        return None

    padded = data + "=" * (-len(data) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError):
        return None


def bytes_to_text(data: bytes) -> str:
    """Mapuje bajty 1:1 na znaki (latin-1), tak jak binarny ciąg `atob`."""

    return data.decode("latin-1")


def printable_ratio(text: str) -> float:
    if not text:
        return 0.0
    readable = sum(1 for char in text if 31 < ord(char) < 127)
    return readable / len(text)


__all__ = ["bytes_to_text", "decode_base64", "printable_ratio"]
