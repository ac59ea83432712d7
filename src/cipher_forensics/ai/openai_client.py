"""Minimal OpenAI-compatible Chat Completions client.

Transport is `urllib` from the standard library. Every failure surfaces as
`AiClientError`, which the orchestrator treats as "use the local engine".
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .config import AiConfig

_CHAT_PATH = "/chat/completions"
_ERROR_BODY_CHARS = 500


class AiClientError(RuntimeError):
    pass


@dataclass(slots=True)
class OpenAIChatClient:
    config: AiConfig

    def chat(self, *, system: str, user: str, temperature: float = 0.2, json_mode: bool = False) -> str:
        """Sends one system+user exchange and returns the assistant message text."""

        request = self._build_request(system=system, user=user, temperature=temperature, json_mode=json_mode)
        return self._message_content(self._send(request))

    def _build_request(self, *, system: str, user: str, temperature: float, json_mode: bool) -> Request:
        payload: dict[str, Any] = {
            "model": self.config.model,
            "temperature": float(temperature),
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        return Request(
            self._chat_completions_url(self.config.endpoint),
            data=json.dumps(payload).encode("utf-8"),
            method="POST",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.config.api_key}",
            },
        )

    def _send(self, request: Request) -> dict[str, Any]:
        try:
            with urlopen(request, timeout=self.config.timeout_seconds) as response:
                raw = response.read().decode("utf-8", "replace")
        except HTTPError as exc:
            detail = exc.read().decode("utf-8", "replace")[:_ERROR_BODY_CHARS] if exc.fp is not None else ""
            raise AiClientError(f"AI HTTP error: {exc.code} {exc.reason} - {detail}") from exc
        except URLError as exc:
            raise AiClientError(f"AI connection error: {exc.reason}") from exc
        except OSError as exc:
            raise AiClientError(f"AI request failed: {exc}") from exc

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise AiClientError("AI returned invalid JSON") from exc
        if not isinstance(data, dict):
            raise AiClientError("AI response is not a JSON object")
        return data

    @staticmethod
    def _message_content(data: dict[str, Any]) -> str:
        if "error" in data and "choices" not in data:
            raise AiClientError(f"AI error: {data['error']}")
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise AiClientError("AI response missing choices/message/content") from exc
        return "" if content is None else str(content)

    @staticmethod
    def _chat_completions_url(endpoint: str) -> str:
        base = endpoint.strip().rstrip("/")
        if not base:
            raise AiClientError("Missing AI endpoint")
        if base.lower().endswith(_CHAT_PATH):
            return base
        if base.lower().endswith("/v1"):
            return base + _CHAT_PATH
        return base + "/v1" + _CHAT_PATH
