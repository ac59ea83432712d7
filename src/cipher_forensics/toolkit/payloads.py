"""Offline szablony payloadów HTTP Injector."""

from __future__ import annotations

from typing import Dict

DEFAULT_HOST = "example.com"

_TEMPLATES: Dict[str, str] = {
    "CONNECT": (
        "CONNECT {h}:443 HTTP/1.1[crlf]Host: {h}[crlf]X-Online-Host: {h}[crlf]"
        "Connection: Keep-Alive[crlf]User-Agent: [ua][crlf][crlf]"
    ),
    "GET": (
        "GET http://{h}/ HTTP/1.1[crlf]Host: {h}[crlf]X-Online-Host: {h}[crlf]X-Forward-Host: {h}[crlf]"
        "Connection: Keep-Alive[crlf]User-Agent: [ua][crlf][crlf]"
    ),
    "POST": (
        "POST http://{h}/ HTTP/1.1[crlf]Host: {h}[crlf]Content-Length: 9999999999[crlf]"
        "Connection: Keep-Alive[crlf]User-Agent: [ua][crlf][crlf]"
    ),
    "PUT": "PUT http://{h}/ HTTP/1.1[crlf]Host: {h}[crlf]X-Online-Host: {h}[crlf]Connection: Keep-Alive[crlf][crlf]",
    "HEAD": "HEAD http://{h}/ HTTP/1.1[crlf]Host: {h}[crlf]Connection: Keep-Alive[crlf][crlf]",
    "SPLIT": (
        "GET http://{h}/ HTTP/1.1[crlf]Host: {h}[crlf]X-Online-Host: {h}[crlf]X-Forwarded-For: {h}[crlf]"
        "Connection: Keep-Alive[split]CONNECT {h}:443 HTTP/1.1[crlf]Host: {h}[crlf][crlf]"
    ),
}

_FALLBACK = "CONNECT {h}:443 HTTP/1.1[crlf]Host: {h}[crlf][crlf]"

PAYLOAD_METHODS = tuple(_TEMPLATES)


def generate_local_payload(host: str, method: str) -> str:
    """Buduje payload dla hosta; nieznana metoda daje minimalny CONNECT."""

    h = host.strip() or DEFAULT_HOST
    template = _TEMPLATES.get(method.strip().upper(), _FALLBACK)
    return template.format(h=h)


__all__ = ["PAYLOAD_METHODS", "generate_local_payload"]
