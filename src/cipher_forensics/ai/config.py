"""Environment-based configuration for the cloud analyzer."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

DEFAULT_ENDPOINT = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class AiConfig:
    api_key: str
    endpoint: str = DEFAULT_ENDPOINT
    model: str = DEFAULT_MODEL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


# Lookup order per field; the first non-empty variable wins.
_API_KEY_VARS = ("CIPHER_API_KEY", "OPENAI_API_KEY")
_ENDPOINT_VARS = ("CIPHER_ENDPOINT", "OPENAI_ENDPOINT", "OPENAI_BASE_URL")
_MODEL_VARS = ("CIPHER_MODEL", "OPENAI_MODEL")
_TIMEOUT_VARS = ("CIPHER_AI_TIMEOUT",)

_SUPPORTED_ENV_KEYS = frozenset(_API_KEY_VARS + _ENDPOINT_VARS + _MODEL_VARS + _TIMEOUT_VARS)

_TRUTHY = {"1", "true", "yes", "on"}


def _parse_dotenv_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = line.split("=", 1)
    return key.strip(), value.strip().strip('"').strip("'")


def _load_dotenv_if_present() -> None:
    """Best-effort `.env` loader.

    Rules:
    - Only keys this module reads are loaded.
    - Variables already set (non-empty) in `os.environ` are never overwritten.
    - Only the current working directory is searched.
    - `CIPHER_DISABLE_DOTENV=1` turns the loader off.
    """

    if (os.getenv("CIPHER_DISABLE_DOTENV") or "").strip().lower() in _TRUTHY:
        return

    dotenv_path = Path.cwd() / ".env"
    if not dotenv_path.is_file():
        return

    try:
        lines = dotenv_path.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return

    for raw_line in lines:
        parsed = _parse_dotenv_line(raw_line)
        if parsed is None:
            continue
        key, value = parsed
        if key not in _SUPPORTED_ENV_KEYS or (os.getenv(key) or "").strip():
            continue
        if value:
            os.environ[key] = value


def _first_env(names: tuple[str, ...]) -> str:
    for name in names:
        value = (os.getenv(name) or "").strip()
        if value:
            return value
    return ""


def _timeout_seconds() -> float:
    raw = _first_env(_TIMEOUT_VARS)
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_TIMEOUT_SECONDS


def load_ai_config() -> AiConfig | None:
    """Loads cloud analyzer config from the environment.

    - API key: `CIPHER_API_KEY` or `OPENAI_API_KEY` (required)
    - Endpoint: `CIPHER_ENDPOINT`, `OPENAI_ENDPOINT` or `OPENAI_BASE_URL`
      (default: the public OpenAI API)
    - Model: `CIPHER_MODEL` or `OPENAI_MODEL` (default: "gpt-4o-mini")
    - Timeout: `CIPHER_AI_TIMEOUT` in seconds (default: 30)

    Without an API key the cloud path is disabled and `None` is returned.
    """

    _load_dotenv_if_present()

    api_key = _first_env(_API_KEY_VARS)
    if not api_key:
        return None

    return AiConfig(
        api_key=api_key,
        endpoint=_first_env(_ENDPOINT_VARS) or DEFAULT_ENDPOINT,
        model=_first_env(_MODEL_VARS) or DEFAULT_MODEL,
        timeout_seconds=_timeout_seconds(),
    )
