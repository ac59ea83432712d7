import json

import pytest

from cipher_forensics.ai import AiClientError, AiConfig, ChatCloudAnalyzer, CloudRequest
from cipher_forensics.ai.analyzer import TEXT_PREVIEW_CHARS, build_user_prompt, extract_json_object
from cipher_forensics.core.models import AnalysisSource

_PAYLOAD = {
    "fileType": "HTTP Injector Config",
    "encryptionMethod": "AES-128-ECB",
    "extractedMetadata": {"Host": "bug.example.com", "Port": 443},
    "decryptedSegments": ["CONNECT bug.example.com:443 HTTP/1.1"],
    "aiInsight": "Config targets a zero-rated host.",
    "structure": "Header -> Encrypted body",
}


def _request(**overrides) -> CloudRequest:
    fields = {
        "file_name": "config.ehi",
        "hex_preview": "65 68 69 ",
        "text_preview": "ehi",
        "signature": "HTTP Injector (.ehi)",
        "artifacts": ["[IP] 45.33.12.9"],
    }
    fields.update(overrides)
    return CloudRequest(**fields)


class _FakeClient:
    def __init__(self, reply: str):
        self.reply = reply
        self.calls = []

    def chat(self, **kwargs):
        self.calls.append(kwargs)
        return self.reply


def _analyzer(reply: str) -> ChatCloudAnalyzer:
    analyzer = ChatCloudAnalyzer(AiConfig(api_key="k"))
    analyzer._client = _FakeClient(reply)
    return analyzer


def test_prompt_lists_artifacts_and_truncates_dump():
    prompt = build_user_prompt(_request(text_preview="A" * (TEXT_PREVIEW_CHARS + 100)))

    assert "TARGET FILE: config.ehi" in prompt
    assert "DETECTED SIGNATURE: HTTP Injector (.ehi)" in prompt
    assert "[IP] 45.33.12.9" in prompt
    assert "A" * TEXT_PREVIEW_CHARS in prompt
    assert "A" * (TEXT_PREVIEW_CHARS + 1) not in prompt


def test_prompt_without_artifacts_says_so():
    assert "No cleartext artifacts found via regex." in build_user_prompt(_request(artifacts=[]))


def test_extract_json_object_strips_code_fences():
    text = "```json\n" + json.dumps(_PAYLOAD) + "\n```"

    assert extract_json_object(text) == _PAYLOAD


def test_extract_json_object_uses_outer_braces():
    assert extract_json_object('Sure! {"a": {"b": 1}} hope it helps') == {"a": {"b": 1}}


@pytest.mark.parametrize("text", ["no json here", "} backwards {", "{not: valid}", "[1, 2]"])
def test_extract_json_object_rejects_garbage(text):
    with pytest.raises(AiClientError):
        extract_json_object(text)


def test_analyzer_maps_payload_to_result():
    analyzer = _analyzer(json.dumps(_PAYLOAD))

    result = analyzer.analyze(_request())

    assert result.source is AnalysisSource.CLOUD
    assert result.file_type == "HTTP Injector Config"
    assert result.extracted_metadata == {"Host": "bug.example.com", "Port": "443"}
    assert result.decrypted_segments == ["CONNECT bug.example.com:443 HTTP/1.1"]
    call = analyzer._client.calls[0]
    assert call["json_mode"] is True
    assert "TARGET FILE: config.ehi" in call["user"]


def test_analyzer_rejects_empty_reply():
    with pytest.raises(AiClientError, match="No response"):
        _analyzer("   ").analyze(_request())


def test_analyzer_rejects_payload_without_file_type():
    payload = dict(_PAYLOAD, fileType="")

    with pytest.raises(AiClientError, match="rejected"):
        _analyzer(json.dumps(payload)).analyze(_request())


def test_analyzer_rejects_non_list_segments():
    payload = dict(_PAYLOAD, decryptedSegments="oops")

    with pytest.raises(AiClientError):
        _analyzer(json.dumps(payload)).analyze(_request())
