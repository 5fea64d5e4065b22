"""Tests for the simple value generators."""

from __future__ import annotations

import pytest

from harness_fuzzer.core import Fuzzer
from harness_fuzzer.core.generators import SINT32_MAX, SINT32_MIN, UINT32_MAX


def test_random_integer_is_signed_32_bit(fuzzer: Fuzzer) -> None:
    for _ in range(500):
        assert SINT32_MIN <= fuzzer.random_integer() <= SINT32_MAX


def test_random_positive_integer_is_unsigned_32_bit(fuzzer: Fuzzer) -> None:
    for _ in range(500):
        assert 0 <= fuzzer.random_positive_integer() <= UINT32_MAX


def test_integer_in_range_swaps_bounds(fuzzer: Fuzzer) -> None:
    values = {fuzzer.random_integer_in_range(5, -5) for _ in range(500)}
    assert values <= set(range(-5, 6))
    assert -5 in values and 5 in values


def test_integer_in_range_single_point(fuzzer: Fuzzer) -> None:
    assert fuzzer.random_integer_in_range(-7, -7) == -7


def test_integer_in_range_rejects_out_of_width(fuzzer: Fuzzer) -> None:
    with pytest.raises(ValueError):
        fuzzer.random_integer_in_range(0, SINT32_MAX + 1)


def test_ascii_string_with_maximum_length(fuzzer: Fuzzer) -> None:
    for _ in range(200):
        text = fuzzer.random_ascii_string_with_maximum_length(5)
        assert 1 <= len(text) <= 5
        assert all(1 <= ord(ch) <= 127 for ch in text)


def test_ascii_string_default_cap(fuzzer: Fuzzer) -> None:
    for _ in range(50):
        assert 1 <= len(fuzzer.random_ascii_string()) <= 255


@pytest.mark.parametrize("max_length", [0, -3])
def test_ascii_string_rejects_non_positive_length(fuzzer: Fuzzer, max_length: int) -> None:
    with pytest.raises(ValueError):
        fuzzer.random_ascii_string_with_maximum_length(max_length)
