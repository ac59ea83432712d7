"""Znormalizowana entropia Shannona bufora bajtów (0-100)."""

from __future__ import annotations

import math

MAX_BITS_PER_BYTE = 8


def shannon_entropy(data: bytes) -> float:
    """Entropia w bitach na bajt (0.0 - 8.0)."""

    if not data:
        return 0.0
    counts = [0] * 256
    for b in data:
        counts[b] += 1
    length = len(data)
    entropy = 0.0
    for c in counts:
        if c == 0:
            continue
        p = c / length
        entropy -= p * math.log2(p)
    return entropy


def calculate_entropy(buffer: bytes) -> float:
    """Entropia przeskalowana do procentu maksymalnej losowości."""

    return min(100.0, (shannon_entropy(buffer) / MAX_BITS_PER_BYTE) * 100)


__all__ = ["calculate_entropy", "shannon_entropy"]
