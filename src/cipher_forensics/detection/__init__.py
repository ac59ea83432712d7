"""Moduły rozpoznające typ pliku, entropię i protokoły."""

from .entropy import calculate_entropy, shannon_entropy
from .protocols import PROTOCOL_TABLE, identify_protocols
from .signatures import (
	UNKNOWN_LABEL,
	FileSignature,
	SignatureMatcher,
	detect_signature,
	load_default_signatures,
	load_signatures,
)

__all__ = [
	"calculate_entropy",
	"shannon_entropy",
	"PROTOCOL_TABLE",
	"identify_protocols",
	"UNKNOWN_LABEL",
	"FileSignature",
	"SignatureMatcher",
	"detect_signature",
	"load_default_signatures",
	"load_signatures",
]
