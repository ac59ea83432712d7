"""Wspólne fiksury testowe: syntetyczne bufory i linki konfiguracyjne."""

from __future__ import annotations

import base64
import json
from typing import Any, Callable

import pytest


_DEVELOPER_ENV_KEYS = (
    "CIPHER_API_KEY",
    "CIPHER_ENDPOINT",
    "CIPHER_MODEL",
    "OPENAI_API_KEY",
    "OPENAI_ENDPOINT",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "CIPHER_AI_TIMEOUT",
    "CIPHER_MAX_FILE_SIZE",
    "CIPHER_DISABLE_CLOUD",
)


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


@pytest.fixture
def make_vmess_link() -> Callable[[dict[str, Any]], str]:
    def _make(config: dict[str, Any]) -> str:
        return "vmess://" + b64(json.dumps(config, separators=(",", ":")))

    return _make


@pytest.fixture
def trojan_link() -> str:
    return "trojan://secretpw@proxy.example.net:443?sni=cdn.example.net&type=ws#node1"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path) -> None:
    """Odcina testy od lokalnego `.env` i kluczy API programisty."""

    monkeypatch.setenv("CIPHER_DISABLE_DOTENV", "1")
    monkeypatch.setenv("CIPHER_ERROR_DIR", str(tmp_path / "error_reports"))
    for key in _DEVELOPER_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
