"""Cloud analyzer boundary: request shape, protocol and chat-based adapter."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import List, Protocol

from cipher_forensics.core.models import AnalysisResult, AnalysisSource

from .config import AiConfig
from .openai_client import AiClientError, OpenAIChatClient

CLOUD_PROVENANCE = "[SOURCE: CLOUD AI - ELITE FORENSIC MODE] "
TEXT_PREVIEW_CHARS = 4000


@dataclass(frozen=True, slots=True)
class CloudRequest:
    file_name: str
    hex_preview: str
    text_preview: str
    signature: str
    artifacts: List[str] = field(default_factory=list)


class CloudAnalyzer(Protocol):
    """Anything that turns a `CloudRequest` into an `AnalysisResult` or raises."""

    def analyze(self, request: CloudRequest) -> AnalysisResult:
        """Runs the remote analysis."""


_SYSTEM_PROMPT = (
    "You are a forensic cryptanalyst inspecting VPN/proxy configuration containers. "
    "Base your output strictly on the provided data. Never invent values; "
    "write UNKNOWN when a field cannot be determined. Return JSON only."
)


def build_user_prompt(request: CloudRequest) -> str:
    artifacts = "\n".join(request.artifacts) if request.artifacts else "No cleartext artifacts found via regex."
    return (
        f"TARGET FILE: {request.file_name}\n"
        f"DETECTED SIGNATURE: {request.signature}\n\n"
        f"--- DETECTED ARTIFACTS ---\n{artifacts}\n\n"
        f"--- HEX PREVIEW ---\n{request.hex_preview}\n\n"
        f"--- RAW STRING DUMP ---\n{request.text_preview[:TEXT_PREVIEW_CHARS]}\n\n"
        "Decode any base64/vmess/trojan material you find and return a JSON object with keys: "
        "fileType (string), encryptionMethod (string), extractedMetadata (object of strings), "
        "decryptedSegments (array of strings), aiInsight (string), structure (string)."
    )


def extract_json_object(text: str) -> dict:
    """Strips code fences and parses the outermost `{...}` block."""

    cleaned = text.replace("```json", "").replace("```", "")
    first = cleaned.find("{")
    last = cleaned.rfind("}")
    if first == -1 or last == -1 or last < first:
        raise AiClientError("Invalid JSON structure in AI response")
    try:
        parsed = json.loads(cleaned[first : last + 1])
    except ValueError as exc:
        raise AiClientError("AI returned malformed JSON payload") from exc
    if not isinstance(parsed, dict):
        raise AiClientError("AI payload is not a JSON object")
    return parsed


class ChatCloudAnalyzer:
    """Cloud analyzer backed by an OpenAI-compatible chat endpoint."""

    def __init__(self, config: AiConfig) -> None:
        self._client = OpenAIChatClient(config)

    def analyze(self, request: CloudRequest) -> AnalysisResult:
        text = self._client.chat(
            system=_SYSTEM_PROMPT,
            user=build_user_prompt(request),
            temperature=0.2,
            json_mode=True,
        )
        if not text.strip():
            raise AiClientError("No response from AI")

        payload = extract_json_object(text)
        try:
            result = AnalysisResult.from_payload(payload, source=AnalysisSource.CLOUD)
        except ValueError as exc:
            raise AiClientError(f"AI payload rejected: {exc}") from exc
        return result
