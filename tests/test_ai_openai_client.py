import json
import urllib.error

import pytest


class _FakeResponse:
    def __init__(self, status: int, payload):
        self.status = status
        self._body = json.dumps(payload).encode("utf-8") if not isinstance(payload, bytes) else payload

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


def _client(endpoint: str = "https://api.example.test"):
    from cipher_forensics.ai.config import AiConfig
    from cipher_forensics.ai.openai_client import OpenAIChatClient

    return OpenAIChatClient(AiConfig(api_key="k", endpoint=endpoint, model="gpt-4o-mini"))


def test_builds_v1_chat_completions_when_missing(monkeypatch):
    captured = {}

    def fake_urlopen(req, timeout=None):
        captured["url"] = req.full_url
        captured["timeout"] = timeout
        captured["auth"] = req.get_header("Authorization")
        captured["body"] = json.loads(req.data.decode("utf-8"))
        return _FakeResponse(200, {"choices": [{"message": {"content": "ok"}}]})

    monkeypatch.setattr("cipher_forensics.ai.openai_client.urlopen", fake_urlopen)

    out = _client().chat(system="sys", user="hi", temperature=0)

    assert out == "ok"
    assert captured["url"] == "https://api.example.test/v1/chat/completions"
    assert captured["timeout"] == 30.0
    assert captured["auth"] == "Bearer k"
    assert captured["body"]["model"] == "gpt-4o-mini"
    assert captured["body"]["messages"][0] == {"role": "system", "content": "sys"}
    assert "response_format" not in captured["body"]


def test_keeps_existing_v1_prefix(monkeypatch):
    captured = {}

    def fake_urlopen(req, timeout=None):
        captured["url"] = req.full_url
        return _FakeResponse(200, {"choices": [{"message": {"content": "ok"}}]})

    monkeypatch.setattr("cipher_forensics.ai.openai_client.urlopen", fake_urlopen)

    _client("https://api.example.test/v1/").chat(system="sys", user="hi")

    assert captured["url"] == "https://api.example.test/v1/chat/completions"


def test_json_mode_requests_json_object(monkeypatch):
    captured = {}

    def fake_urlopen(req, timeout=None):
        captured["body"] = json.loads(req.data.decode("utf-8"))
        return _FakeResponse(200, {"choices": [{"message": {"content": "{}"}}]})

    monkeypatch.setattr("cipher_forensics.ai.openai_client.urlopen", fake_urlopen)

    _client().chat(system="sys", user="hi", json_mode=True)

    assert captured["body"]["response_format"] == {"type": "json_object"}


def test_raises_on_http_error(monkeypatch):
    from cipher_forensics.ai.openai_client import AiClientError

    class _Fp:
        def read(self):
            return b"{\"error\":\"nope\"}"

        def close(self):
            return None

    def fake_urlopen(req, timeout=None):
        raise urllib.error.HTTPError(req.full_url, 401, "unauthorized", hdrs=None, fp=_Fp())

    monkeypatch.setattr("cipher_forensics.ai.openai_client.urlopen", fake_urlopen)

    with pytest.raises(AiClientError, match="401"):
        _client().chat(system="sys", user="hi", temperature=0)


def test_raises_on_connection_error(monkeypatch):
    from cipher_forensics.ai.openai_client import AiClientError

    def fake_urlopen(req, timeout=None):
        raise urllib.error.URLError("offline")

    monkeypatch.setattr("cipher_forensics.ai.openai_client.urlopen", fake_urlopen)

    with pytest.raises(AiClientError, match="offline"):
        _client().chat(system="sys", user="hi")


def test_raises_on_error_payload(monkeypatch):
    from cipher_forensics.ai.openai_client import AiClientError

    monkeypatch.setattr(
        "cipher_forensics.ai.openai_client.urlopen",
        lambda req, timeout=None: _FakeResponse(200, {"error": {"message": "quota"}}),
    )

    with pytest.raises(AiClientError, match="quota"):
        _client().chat(system="sys", user="hi")


def test_raises_on_invalid_json(monkeypatch):
    from cipher_forensics.ai.openai_client import AiClientError

    monkeypatch.setattr(
        "cipher_forensics.ai.openai_client.urlopen",
        lambda req, timeout=None: _FakeResponse(200, b"<html>gateway</html>"),
    )

    with pytest.raises(AiClientError, match="invalid JSON"):
        _client().chat(system="sys", user="hi")


def test_empty_endpoint_is_rejected():
    from cipher_forensics.ai.openai_client import AiClientError

    with pytest.raises(AiClientError):
        _client("   ").chat(system="sys", user="hi")
