"""Testy znormalizowanej entropii Shannona."""

from __future__ import annotations

import pytest

from cipher_forensics.detection import calculate_entropy, shannon_entropy


@pytest.mark.parametrize("length", [1, 2, 100, 4096])
def test_repeated_byte_has_zero_entropy(length: int) -> None:
    assert calculate_entropy(bytes([0x41]) * length) == 0.0


def test_empty_buffer_has_zero_entropy() -> None:
    assert calculate_entropy(b"") == 0.0


def test_all_byte_values_once_is_maximal() -> None:
    assert calculate_entropy(bytes(range(256))) == pytest.approx(100.0)


def test_sixteen_distinct_values_is_half_scale() -> None:
    data = bytes(range(16)) * 8

    assert shannon_entropy(data) == pytest.approx(4.0)
    assert calculate_entropy(data) == pytest.approx(50.0)


def test_entropy_never_exceeds_hundred() -> None:
    assert calculate_entropy(bytes(range(256)) * 3) <= 100.0
