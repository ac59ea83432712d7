"""Crash reports for unexpected analysis failures.

A report is a plain text file: a JSON header describing the run (never the
analysed bytes, never secret values) followed by the Python traceback.
"""

from __future__ import annotations

import json
import os
import platform
import sys
import traceback
from dataclasses import dataclass
from datetime import datetime, timezone
from importlib import metadata
from pathlib import Path
from typing import Any
from uuid import uuid4

ERROR_DIR_ENV = "CIPHER_ERROR_DIR"

# Only presence flags are recorded for these keys.
_SECRET_ENV_KEYS = (
    "CIPHER_API_KEY",
    "OPENAI_API_KEY",
    "CIPHER_ENDPOINT",
    "OPENAI_ENDPOINT",
    "OPENAI_BASE_URL",
    "CIPHER_MODEL",
    "OPENAI_MODEL",
)


@dataclass(frozen=True, slots=True)
class ErrorReport:
    path: Path
    created_at: datetime
    where: str


def get_error_reports_dir() -> Path:
    """Returns a writable directory for error reports.

    `CIPHER_ERROR_DIR` wins; otherwise `~/.cipher_forensics/error_reports`.
    """

    override = (os.getenv(ERROR_DIR_ENV) or "").strip()
    base = Path(override) if override else Path.home() / ".cipher_forensics" / "error_reports"
    base.mkdir(parents=True, exist_ok=True)
    return base


def _app_version() -> str:
    try:
        return metadata.version("cipher-forensics")
    except metadata.PackageNotFoundError:
        return "unknown"


def _describe_input(path: Path | None) -> dict[str, Any] | None:
    if path is None:
        return None
    try:
        size: int | None = path.stat().st_size
    except OSError:
        size = None
    return {"name": path.name, "suffix": path.suffix.lower(), "size": size}


def _build_header(
    error: BaseException,
    *,
    where: str,
    created_at: datetime,
    context: dict[str, Any],
    input_path: Path | None,
) -> dict[str, Any]:
    return {
        "created_at": created_at.isoformat(),
        "where": where,
        "app_version": _app_version(),
        "python": sys.version.replace("\n", " "),
        "platform": platform.platform(),
        "input": _describe_input(input_path),
        "context": dict(context),
        "env_presence": {key: bool((os.getenv(key) or "").strip()) for key in _SECRET_ENV_KEYS},
        "error_type": type(error).__name__,
        "error_message": str(error),
    }


def write_error_report(
    error: BaseException,
    *,
    where: str,
    context: dict[str, Any] | None = None,
    input_path: Path | None = None,
) -> ErrorReport:
    """Writes a timestamped error report and returns its location."""

    created_at = datetime.now(timezone.utc)
    path = get_error_reports_dir() / f"error_{created_at:%Y%m%d_%H%M%S}_{uuid4().hex[:8]}.txt"

    header = _build_header(
        error,
        where=where,
        created_at=created_at,
        context=context or {},
        input_path=input_path,
    )
    tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))

    title = "cipher-forensics Error Report"
    content = (
        f"{title}\n{'=' * len(title)}\n\n"
        + json.dumps(header, ensure_ascii=False, indent=2, default=str)
        + "\n\nTraceback\n---------\n"
        + tb
    )

    path.write_text(content, encoding="utf-8", errors="replace")
    return ErrorReport(path=path, created_at=created_at, where=where)
