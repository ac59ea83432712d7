"""Ręczne dekodowanie i proste kodowania tekstu dla analityka."""

from __future__ import annotations

import base64
import re
from enum import Enum
from urllib.parse import unquote

from cipher_forensics.extraction.encoding import bytes_to_text, decode_base64

DECODE_FAILED = "Could not decode. Invalid Base64 or URL format."

_BROKEN_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class EncodeMode(str, Enum):
    """Obsługiwane tryby kodowania."""

    BASE64 = "base64"
    HEX = "hex"
    ROT13 = "rot13"


def to_rot13(text: str) -> str:
    result: list[str] = []
    for char in text:
        if "a" <= char <= "z":
            result.append(chr((ord(char) - ord("a") + 13) % 26 + ord("a")))
        elif "A" <= char <= "Z":
            result.append(chr((ord(char) - ord("A") + 13) % 26 + ord("A")))
        else:
            result.append(char)
    return "".join(result)


def text_to_hex(text: str) -> str:
    return "".join(f"{ord(char):02x}" for char in text)


def encode_text(text: str, mode: EncodeMode | str) -> str:
    """Koduje tekst w wybranym trybie.

    Base64 przyjmuje wyłącznie znaki latin-1 (jak `btoa`); inne zgłaszają
    `ValueError`.
    """

    mode = EncodeMode(mode)
    if mode is EncodeMode.BASE64:
        try:
            raw = text.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ValueError("Base64 wymaga znaków z zakresu latin-1") from exc
        return base64.b64encode(raw).decode("ascii")
    if mode is EncodeMode.HEX:
        return text_to_hex(text)
    return to_rot13(text)


def manual_decode(text: str) -> str:
    """Próbuje base64, następnie dekodowania procentowego URL."""

    raw = decode_base64(text)
    if raw is not None:
        return bytes_to_text(raw)
    if _BROKEN_ESCAPE.search(text):
        return DECODE_FAILED
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError:
        return DECODE_FAILED


__all__ = [
    "DECODE_FAILED",
    "EncodeMode",
    "encode_text",
    "manual_decode",
    "text_to_hex",
    "to_rot13",
]
