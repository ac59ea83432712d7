"""Testy narzędzi analityka: kodowanie, dekodowanie, payloady, host docelowy."""

from __future__ import annotations

import pytest

from cipher_forensics.core.models import Artifact, ArtifactTag
from cipher_forensics.toolkit import (
    DECODE_FAILED,
    PAYLOAD_METHODS,
    EncodeMode,
    encode_text,
    find_target_host,
    generate_local_payload,
    manual_decode,
    text_to_hex,
    to_rot13,
)


def test_rot13_shifts_letters_only() -> None:
    assert to_rot13("Hello, World! 123") == "Uryyb, Jbeyq! 123"
    assert to_rot13(to_rot13("Trojan")) == "Trojan"


def test_text_to_hex_uses_two_lowercase_digits() -> None:
    assert text_to_hex("Hi\n") == "48690a"


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (EncodeMode.BASE64, "aGVsbG8="),
        ("hex", "68656c6c6f"),
        ("rot13", "uryyb"),
    ],
)
def test_encode_text_modes(mode, expected) -> None:
    assert encode_text("hello", mode) == expected


def test_base64_rejects_text_outside_latin1() -> None:
    with pytest.raises(ValueError):
        encode_text("zażółć", EncodeMode.BASE64)


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        encode_text("hello", "morse")


def test_manual_decode_prefers_base64() -> None:
    assert manual_decode("aGVsbG8gd29ybGQ=") == "hello world"


def test_manual_decode_falls_back_to_url_decoding() -> None:
    assert manual_decode("Host%3A%20bug.example.com") == "Host: bug.example.com"


@pytest.mark.parametrize("text", ["100%", "%E0%A4%A", "%ZZ", "%C3%28"])
def test_manual_decode_reports_failure(text) -> None:
    assert manual_decode(text) == DECODE_FAILED


def test_payload_templates_substitute_host() -> None:
    payload = generate_local_payload("bug.example.com", "connect")

    assert payload.startswith("CONNECT bug.example.com:443 HTTP/1.1[crlf]Host: bug.example.com[crlf]")
    assert payload.endswith("[crlf][crlf]")


def test_split_payload_contains_split_marker() -> None:
    assert "[split]CONNECT cdn.example.net:443" in generate_local_payload("cdn.example.net", "SPLIT")


def test_payload_defaults() -> None:
    assert "Host: example.com" in generate_local_payload("  ", "GET")
    assert generate_local_payload("h.example", "TRACE") == "CONNECT h.example:443 HTTP/1.1[crlf]Host: h.example[crlf][crlf]"


def test_payload_methods_are_listed() -> None:
    assert PAYLOAD_METHODS == ("CONNECT", "GET", "POST", "PUT", "HEAD", "SPLIT")


def test_target_host_prefers_first_ip_or_url() -> None:
    artifacts = [
        Artifact(ArtifactTag.EMAIL, "ops@corp.org"),
        Artifact(ArtifactTag.URL, "https://cdn.example.com/path/x.js"),
        Artifact(ArtifactTag.IP, "45.33.12.9"),
    ]

    assert find_target_host(artifacts) == "cdn.example.com"
    assert find_target_host(artifacts[2:]) == "45.33.12.9"
    assert find_target_host(artifacts[:1]) is None
