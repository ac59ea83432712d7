"""Ekstrakcja ciągów, artefaktów i konfiguracji z surowych bajtów."""

from .artifacts import MAX_ARTIFACTS, MAX_DECODE_DEPTH, ScanState, decode_nested_base64, scan_artifacts, scan_text
from .encoding import decode_base64
from .links import decode_link, decode_trojan_link, decode_vmess_link
from .strings import extract_printable_strings, to_hex_preview

__all__ = [
	"MAX_ARTIFACTS",
	"MAX_DECODE_DEPTH",
	"ScanState",
	"decode_base64",
	"decode_link",
	"decode_nested_base64",
	"decode_trojan_link",
	"decode_vmess_link",
	"extract_printable_strings",
	"scan_artifacts",
	"scan_text",
	"to_hex_preview",
]
