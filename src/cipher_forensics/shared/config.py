"""Konfiguracja aplikacji."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAX_FILE_SIZE = 50 * 1024 * 1024

_TRUTHY = {"1", "true", "yes", "on"}


class FileTooLargeError(ValueError):
    """Plik przekracza dopuszczalny rozmiar analizy."""


@dataclass(slots=True)
class AppConfig:
    """Konfiguracja ogólna aplikacji."""

    report_dir: Path
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    cloud_enabled: bool = True

    @classmethod
    def default(cls) -> "AppConfig":
        """Tworzy domyślną konfigurację."""

        return cls(report_dir=Path.cwd())

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Konfiguracja domyślna nadpisana zmiennymi `CIPHER_*`."""

        config = cls.default()
        raw_limit = (os.getenv("CIPHER_MAX_FILE_SIZE") or "").strip()
        if raw_limit:
            try:
                config.max_file_size = max(int(raw_limit), 0)
            except ValueError as exc:
                raise ValueError(f"Niepoprawna wartość CIPHER_MAX_FILE_SIZE: {raw_limit}") from exc
        if (os.getenv("CIPHER_DISABLE_CLOUD") or "").strip().lower() in _TRUTHY:
            config.cloud_enabled = False
        return config

    def read_input(self, path: Path) -> bytes:
        """Wczytuje plik do analizy, pilnując limitu rozmiaru."""

        size = path.stat().st_size
        if size > self.max_file_size:
            raise FileTooLargeError(
                f"File is too large ({size} bytes). Limit is {self.max_file_size} bytes."
            )
        return path.read_bytes()
