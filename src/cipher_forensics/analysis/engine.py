"""Lokalny silnik analizy: deterministyczna synteza raportu z artefaktów.

Silnik nie ma zależności zewnętrznych i jest ostatecznym fallbackiem dla
analizatora w chmurze, dlatego zawsze zwraca kompletny `AnalysisResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import structlog

from cipher_forensics.core.models import AnalysisResult, AnalysisSource, Artifact, ArtifactTag, FileProfile
from cipher_forensics.detection import calculate_entropy, detect_signature, identify_protocols
from cipher_forensics.extraction import (
    decode_link,
    extract_printable_strings,
    scan_artifacts,
    to_hex_preview,
)
from cipher_forensics.toolkit import find_target_host

logger = structlog.get_logger(__name__)

INJECTOR_EXTENSION = ".ehi"
INJECTOR_FILE_TYPE = "HTTP Injector Config (.ehi)"
LOCAL_ENCRYPTION_METHOD = "Unknown (Local Analysis)"
LOCAL_STRUCTURE = "Binary Stream -> Artifact Extraction (Regex) -> Local Heuristics Engine"
LOCAL_REPORT_HEADER = "CIPHER LOCAL ENGINE REPORT"
LOCAL_MODE_MARKER = "Mode: OFFLINE / LOCAL HEURISTICS"

_DOMAIN_HINTS = (".com", ".net", ".org")
_RAW_SEGMENT_MARKERS = ("HTTP", "ssh")


@dataclass(slots=True)
class ArtifactBuckets:
    """Artefakty rozdzielone według przeznaczenia w raporcie."""

    ips: List[str] = field(default_factory=list)
    domains: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)
    secrets: List[str] = field(default_factory=list)
    links: List[str] = field(default_factory=list)


def partition_artifacts(artifacts: Sequence[Artifact]) -> ArtifactBuckets:
    """Dzieli artefakty na koszyki IP, domen/URL, e-maili, sekretów i linków."""

    buckets = ArtifactBuckets()
    for artifact in artifacts:
        if artifact.tag is ArtifactTag.IP:
            buckets.ips.append(artifact.value)
        elif artifact.tag in (ArtifactTag.URL, ArtifactTag.DOMAIN):
            buckets.domains.append(artifact.value)
        elif artifact.tag is ArtifactTag.EMAIL:
            buckets.emails.append(artifact.value)
        elif artifact.tag is ArtifactTag.POTENTIAL_SECRET:
            buckets.secrets.append(artifact.value)
        elif artifact.tag is ArtifactTag.VPN_LINK:
            buckets.links.append(artifact.value)
        else:
            rendered = artifact.render()
            if any(hint in rendered for hint in _DOMAIN_HINTS):
                # Heurystyka: każdy token z kropką spoza nagłówka tagu.
                buckets.domains.extend(
                    part for part in rendered.split(" ") if "." in part and not part.startswith("[")
                )
    return buckets


def _fallback_segments(buckets: ArtifactBuckets, artifacts: Sequence[Artifact]) -> List[str]:
    segments: List[str] = []
    if buckets.ips:
        segments.append("POSSIBLE PROXIES/HOSTS:\n" + "\n".join(buckets.ips))
    if buckets.domains:
        segments.append("POSSIBLE SNI/BUG HOSTS:\n" + "\n".join(buckets.domains))
    if buckets.secrets:
        segments.append("POTENTIAL CREDENTIALS:\n" + "\n".join(buckets.secrets))
    for artifact in artifacts:
        rendered = artifact.render()
        if any(marker in rendered for marker in _RAW_SEGMENT_MARKERS):
            segments.append(rendered)
    return segments


def _build_metadata(
    file_name: str,
    signature: str,
    buckets: ArtifactBuckets,
    artifact_count: int,
) -> Dict[str, str]:
    metadata: Dict[str, str] = {"File Name": file_name, "Signature": signature}
    if buckets.ips:
        metadata["Primary Host Candidate"] = buckets.ips[0]
    if buckets.emails:
        metadata["Author Email"] = buckets.emails[0]
    metadata["Artifacts Found"] = str(artifact_count)
    return metadata


def _classify(
    file_name: str,
    signature: str,
    metadata: Dict[str, str],
    has_segments: bool,
) -> tuple[str, str]:
    """Zwraca (typ pliku, zdanie narracji zależne od typu)."""

    file_type = signature.split(" / ")[0] or "Unknown Binary"

    if file_name.endswith(INJECTOR_EXTENSION) or "Injector" in signature:
        sentence = "Analysis indicates this is an HTTP Injector configuration file. "
        if has_segments:
            sentence += (
                "The local engine successfully extracted potential proxy/payload information "
                "from the binary strings. "
            )
        else:
            sentence += (
                "The configuration appears heavily obfuscated. "
                "No cleartext credentials were found in the standard blocks. "
            )
        return INJECTOR_FILE_TYPE, sentence

    if "Image" in signature:
        sentence = "File identified as an Image. "
        if "Author Email" in metadata:
            sentence += f"Metadata contains email address: {metadata['Author Email']}. "
        return file_type, sentence

    return file_type, f"File appears to be a {file_type}. "


def synthesize_report(file_name: str, signature: str, artifacts: Sequence[Artifact]) -> AnalysisResult:
    """Składa raport z etykiety sygnatury i listy artefaktów."""

    buckets = partition_artifacts(artifacts)

    segments = [decode_link(link) for link in buckets.links]
    if not segments:
        segments = _fallback_segments(buckets, artifacts)

    metadata = _build_metadata(file_name, signature, buckets, len(artifacts))
    file_type, sentence = _classify(file_name, signature, metadata, bool(segments))

    insight = (
        f"{LOCAL_REPORT_HEADER}\n\n"
        f"Target: {file_name}\n"
        f"{LOCAL_MODE_MARKER}\n\n"
        f"{sentence}"
        "\n\nSUMMARY:\n"
        f"- {len(buckets.ips)} IP Addresses identified\n"
        f"- {len(buckets.domains)} Domains/Hosts identified\n"
        f"- {len(buckets.secrets)} Potential Secrets/Keys identified"
    )

    return AnalysisResult(
        file_type=file_type,
        encryption_method=LOCAL_ENCRYPTION_METHOD,
        extracted_metadata=metadata,
        decrypted_segments=segments,
        ai_insight=insight,
        structure=LOCAL_STRUCTURE,
        source=AnalysisSource.LOCAL,
    )


def analyze_locally(file_name: str, buffer: bytes) -> AnalysisResult:
    """Pełna analiza offline: sygnatura -> artefakty -> raport."""

    signature = detect_signature(buffer)
    artifacts = scan_artifacts(buffer)
    result = synthesize_report(file_name, signature, artifacts)
    logger.debug(
        "local-analysis-complete",
        file=file_name,
        signature=signature,
        artifacts=len(artifacts),
        segments=len(result.decrypted_segments),
    )
    return result


def inspect_buffer(file_name: str, buffer: bytes) -> FileProfile:
    """Wstępna triaż pliku: sygnatura, entropia, protokoły, podglądy i artefakty."""

    text_preview = extract_printable_strings(buffer)
    artifacts = scan_artifacts(buffer)
    return FileProfile(
        name=file_name,
        size=len(buffer),
        signature=detect_signature(buffer),
        entropy=calculate_entropy(buffer),
        protocols=identify_protocols(text_preview),
        hex_preview=to_hex_preview(buffer),
        text_preview=text_preview,
        artifacts=artifacts,
        target_host=find_target_host(artifacts),
    )


__all__ = [
    "ArtifactBuckets",
    "LOCAL_ENCRYPTION_METHOD",
    "LOCAL_STRUCTURE",
    "analyze_locally",
    "inspect_buffer",
    "partition_artifacts",
    "synthesize_report",
]
