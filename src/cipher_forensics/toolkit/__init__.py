"""Narzędzia pomocnicze analityka: dekodowanie, kodowanie, payloady."""

from .codecs import DECODE_FAILED, EncodeMode, encode_text, manual_decode, text_to_hex, to_rot13
from .hosts import find_target_host
from .payloads import PAYLOAD_METHODS, generate_local_payload

__all__ = [
	"DECODE_FAILED",
	"EncodeMode",
	"encode_text",
	"manual_decode",
	"text_to_hex",
	"to_rot13",
	"find_target_host",
	"PAYLOAD_METHODS",
	"generate_local_payload",
]
