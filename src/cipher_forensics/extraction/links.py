"""Dekodery linków konfiguracyjnych proxy (VMess, Trojan).

Każdy dekoder jest czystą funkcją: zwraca sformatowany blok konfiguracji
albo ciąg-wartownik z prefiksem linku. Wyjątki nie wychodzą poza moduł.
"""

from __future__ import annotations

import json
import re
from typing import Any, Mapping
from urllib.parse import parse_qs, urlsplit

from .encoding import bytes_to_text, decode_base64

VMESS_PREFIX = "vmess://"
TROJAN_PREFIX = "trojan://"
FAILED_VMESS = "FAILED_TO_DECODE_VMESS"
FAILED_TROJAN = "FAILED_TO_DECODE_TROJAN"
LINK_PREVIEW_CHARS = 20

_VALID_HOST = re.compile(r"[A-Za-z0-9.\-_~%:]+")
_VMESS_BODY = re.compile(r"[A-Za-z0-9+/=]*")


def _failure(sentinel: str, link: str) -> str:
    return f"{sentinel}: {link[:LINK_PREVIEW_CHARS]}..."


def _field(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _render_vmess(config: Mapping[str, Any]) -> str:
    sni = config.get("host") or config.get("sni") or "none"
    return (
        "V2RAY CONFIG (VMESS):\n"
        f"Server: {_field(config.get('add'))}\n"
        f"Port: {_field(config.get('port'))}\n"
        f"UUID: {_field(config.get('id'))}\n"
        f"Network: {_field(config.get('net'))}\n"
        f"TLS: {_field(config.get('tls'))}\n"
        f"Path: {_field(config.get('path') or 'none')}\n"
        f"SNI: {_field(sni)}"
    )


def decode_vmess_link(link: str) -> str:
    """Dekoduje `vmess://<base64(JSON)>` do czytelnego bloku konfiguracji."""

    body = link[len(VMESS_PREFIX) :] if link.lower().startswith(VMESS_PREFIX) else link
    # Fragment `#nazwa` i interpunkcja za linkiem nie należą do base64.
    body = _VMESS_BODY.match(body).group(0)
    raw = decode_base64(body)
    if raw is None:
        return _failure(FAILED_VMESS, link)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        text = bytes_to_text(raw)
    try:
        config = json.loads(text)
    except ValueError:
        return _failure(FAILED_VMESS, link)
    if not isinstance(config, dict):
        return _failure(FAILED_VMESS, link)
    return _render_vmess(config)


def decode_trojan_link(link: str) -> str:
    """Dekoduje `trojan://hasło@host:port?parametry#nazwa`."""

    try:
        parts = urlsplit(link)
        port = parts.port
    except ValueError:
        return _failure(FAILED_TROJAN, link)

    host = parts.hostname
    if parts.scheme.lower() != "trojan" or not host or not _VALID_HOST.fullmatch(host):
        return _failure(FAILED_TROJAN, link)

    params = parse_qs(parts.query)
    sni = params.get("sni", [""])[0] or "none"
    transport = params.get("type", [""])[0] or "tcp"
    return (
        "TROJAN CONFIG:\n"
        f"Host: {host}\n"
        f"Port: {'' if port is None else port}\n"
        f"Password: {parts.username or ''}\n"
        f"SNI: {sni}\n"
        f"Type: {transport}"
    )


def decode_link(link: str) -> str:
    """Wybiera dekoder na podstawie schematu linku."""

    lowered = link.lower()
    if lowered.startswith(VMESS_PREFIX):
        return decode_vmess_link(link)
    if lowered.startswith(TROJAN_PREFIX):
        return decode_trojan_link(link)
    return f"RAW LINK: {link}"


__all__ = [
    "FAILED_TROJAN",
    "FAILED_VMESS",
    "decode_link",
    "decode_trojan_link",
    "decode_vmess_link",
]
