"""Wybór hosta docelowego spośród artefaktów."""

from __future__ import annotations

from typing import Iterable, Optional

from cipher_forensics.core.models import Artifact, ArtifactTag


def find_target_host(artifacts: Iterable[Artifact]) -> Optional[str]:
    """Zwraca pierwszy IP lub host z URL-a (bez schematu i ścieżki)."""

    for artifact in artifacts:
        if artifact.tag not in (ArtifactTag.IP, ArtifactTag.URL):
            continue
        host = artifact.value.replace("http://", "").replace("https://", "").split("/")[0]
        if host:
            return host
    return None


__all__ = ["find_target_host"]
