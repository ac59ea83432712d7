"""Identyfikacja protokołów tunelujących na podstawie słów kluczowych."""

from __future__ import annotations

import re
from typing import List, Pattern, Tuple

# Kolejność tabeli wyznacza kolejność wyników.
PROTOCOL_TABLE: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("SSH/Dropbear", re.compile(r"ssh|dropbear|openssh", re.IGNORECASE)),
    ("V2Ray/Vmess", re.compile(r"vmess|vless", re.IGNORECASE)),
    ("Trojan", re.compile(r"trojan", re.IGNORECASE)),
    ("Shadowsocks", re.compile(r"shadowsocks|ss:", re.IGNORECASE)),
    ("OpenVPN", re.compile(r"openvpn|ovpn", re.IGNORECASE)),
    ("Hysteria", re.compile(r"hysteria", re.IGNORECASE)),
    ("DNSTT (DNS Tunnel)", re.compile(r"dnstt", re.IGNORECASE)),
    ("HTTP/HTTPS", re.compile(r"http/\d\.\d", re.IGNORECASE)),
    ("FTP", re.compile(r"ftp", re.IGNORECASE)),
    ("Email Protocol", re.compile(r"smtp|imap|pop3", re.IGNORECASE)),
)


def identify_protocols(text: str) -> List[str]:
    """Zwraca etykiety protokołów, których słowa kluczowe występują w tekście."""

    return [label for label, pattern in PROTOCOL_TABLE if pattern.search(text)]


__all__ = ["PROTOCOL_TABLE", "identify_protocols"]
