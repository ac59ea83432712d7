"""Testy konfiguracji aplikacji."""

from __future__ import annotations

from pathlib import Path

import pytest

from cipher_forensics.shared import AppConfig, FileTooLargeError
from cipher_forensics.shared.config import DEFAULT_MAX_FILE_SIZE


def test_defaults() -> None:
    config = AppConfig.from_env()

    assert config.max_file_size == DEFAULT_MAX_FILE_SIZE == 50 * 1024 * 1024
    assert config.cloud_enabled is True
    assert config.report_dir == Path.cwd()


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CIPHER_MAX_FILE_SIZE", "1024")
    monkeypatch.setenv("CIPHER_DISABLE_CLOUD", "yes")

    config = AppConfig.from_env()

    assert config.max_file_size == 1024
    assert config.cloud_enabled is False


def test_invalid_limit_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("CIPHER_MAX_FILE_SIZE", "fifty")

    with pytest.raises(ValueError, match="CIPHER_MAX_FILE_SIZE"):
        AppConfig.from_env()


def test_read_input_enforces_limit(tmp_path) -> None:
    path = tmp_path / "big.bin"
    path.write_bytes(b"x" * 11)
    config = AppConfig(report_dir=tmp_path, max_file_size=10)

    with pytest.raises(FileTooLargeError, match="Limit is 10 bytes"):
        config.read_input(path)

    config.max_file_size = 11
    assert config.read_input(path) == b"x" * 11
