"""Tests for boundary value generation."""

from __future__ import annotations

import random

import pytest

from harness_fuzzer.core import BoundaryDomain, Fuzzer, UnsupportedDomainError
from harness_fuzzer.core.boundaries import boundary_candidates, random_boundary_value

UNSIGNED = [BoundaryDomain.UINT8, BoundaryDomain.UINT16, BoundaryDomain.UINT32, BoundaryDomain.UINT64]
DRAWS = 200


def _draw_set(method, b1: int, b2: int, valid: bool) -> set[int]:
    return {method(b1, b2, valid) for _ in range(DRAWS)}


def test_uint8_documented_examples(fuzzer: Fuzzer) -> None:
    assert _draw_set(fuzzer.random_uint8_boundary_value, 10, 20, True) == {10, 11, 19, 20}
    assert _draw_set(fuzzer.random_uint8_boundary_value, 20, 10, True) == {10, 11, 19, 20}
    assert _draw_set(fuzzer.random_uint8_boundary_value, 1, 20, False) == {0, 21}
    assert fuzzer.random_uint8_boundary_value(0, 99, False) == 100
    assert fuzzer.random_uint8_boundary_value(0, 255, False) == 255


@pytest.mark.parametrize(
    "method",
    [
        "random_uint16_boundary_value",
        "random_uint32_boundary_value",
        "random_uint64_boundary_value",
    ],
)
def test_wider_widths_documented_examples(fuzzer: Fuzzer, method: str) -> None:
    fn = getattr(fuzzer, method)
    assert _draw_set(fn, 10, 20, True) == {10, 11, 19, 20}
    assert _draw_set(fn, 1, 20, False) == {0, 21}
    assert fn(0, 99, False) == 100


@pytest.mark.parametrize("domain", UNSIGNED)
def test_full_domain_invalid_returns_no_value(fuzzer: Fuzzer, domain: BoundaryDomain) -> None:
    result = fuzzer.boundary_value(domain, 0, domain.max_value, False)
    assert result.value is None
    assert result.raw == domain.sentinel == domain.max_value


@pytest.mark.parametrize("domain", UNSIGNED)
def test_full_domain_valid_returns_edges(fuzzer: Fuzzer, domain: BoundaryDomain) -> None:
    seen = {fuzzer.boundary_value(domain, domain.max_value, 0, True).value for _ in range(DRAWS)}
    assert seen == {0, domain.max_value}


@pytest.mark.parametrize("domain", UNSIGNED)
@pytest.mark.parametrize("value", [0, 1, 77])
def test_degenerate_range_valid_returns_the_point(fuzzer: Fuzzer, domain: BoundaryDomain, value: int) -> None:
    assert fuzzer.boundary_value(domain, value, value, True).value == value


@pytest.mark.parametrize("domain", UNSIGNED)
def test_degenerate_range_invalid_steps_outside(fuzzer: Fuzzer, domain: BoundaryDomain) -> None:
    assert fuzzer.boundary_value(domain, 5, 5, False).value == 4
    assert fuzzer.boundary_value(domain, 0, 0, False).value == 1
    top = domain.max_value
    assert fuzzer.boundary_value(domain, top, top, False).value == top - 1


@pytest.mark.parametrize("domain", UNSIGNED)
def test_range_touching_top_invalid_returns_low_neighbour(fuzzer: Fuzzer, domain: BoundaryDomain) -> None:
    top = domain.max_value
    assert fuzzer.boundary_value(domain, 100, top, False).value == 99
    seen = {fuzzer.boundary_value(domain, 100, top, True).value for _ in range(DRAWS)}
    assert seen == {100, 101, top - 1, top}


@pytest.mark.parametrize("domain", UNSIGNED)
def test_interior_invalid_never_inside_range(fuzzer: Fuzzer, domain: BoundaryDomain) -> None:
    lo, hi = 3, domain.max_value - 3
    seen = {fuzzer.boundary_value(domain, lo, hi, False).value for _ in range(DRAWS)}
    assert seen == {lo - 1, hi + 1}


def test_narrow_range_collapses_duplicates() -> None:
    assert boundary_candidates(BoundaryDomain.UINT8, 10, 11, True) == [10, 11]
    assert boundary_candidates(BoundaryDomain.UINT8, 10, 12, True) == [10, 11, 12]
    assert boundary_candidates(BoundaryDomain.UINT8, 0, 1, True) == [0, 1]


def test_narrow_range_is_not_biased() -> None:
    rng = random.Random(1234)
    counts = {10: 0, 11: 0}
    for _ in range(4000):
        counts[random_boundary_value(rng, BoundaryDomain.UINT8, 10, 11, True).value] += 1
    # duplicates counted twice would give a 3:1 split
    assert 0.4 < counts[10] / 4000 < 0.6


def test_swapped_bounds_give_identical_sequence() -> None:
    a = random.Random(99)
    b = random.Random(99)
    for _ in range(50):
        left = random_boundary_value(a, BoundaryDomain.UINT32, 1000, 20, True)
        right = random_boundary_value(b, BoundaryDomain.UINT32, 20, 1000, True)
        assert left == right


def test_reseeded_fuzzer_reproduces_sequence() -> None:
    def sequence(key: int) -> list[int]:
        fz = Fuzzer(key)
        return [fz.random_uint64_boundary_value(7, 2**40, bool(i % 2)) for i in range(64)]

    assert sequence(42) == sequence(42)


def test_results_stay_within_width() -> None:
    rng = random.Random(7)
    for domain in UNSIGNED:
        for _ in range(100):
            b1 = rng.randint(0, domain.max_value)
            b2 = rng.randint(0, domain.max_value)
            for valid in (True, False):
                raw = random_boundary_value(rng, domain, b1, b2, valid).raw
                assert 0 <= raw <= domain.max_value


@pytest.mark.parametrize("bounds", [(-1, 5), (0, 256)])
def test_out_of_width_bounds_are_rejected(fuzzer: Fuzzer, bounds: tuple[int, int]) -> None:
    with pytest.raises(ValueError):
        fuzzer.random_uint8_boundary_value(*bounds, True)


def test_signed_variant_fails_loudly(fuzzer: Fuzzer) -> None:
    with pytest.raises(UnsupportedDomainError):
        fuzzer.random_sint8_boundary_value()
    with pytest.raises(NotImplementedError):
        fuzzer.boundary_value(BoundaryDomain.SINT8, -1, 1, True)


@pytest.mark.parametrize("domain", UNSIGNED)
def test_range_touching_floor_valid_returns_edges_and_neighbours(fuzzer: Fuzzer, domain: BoundaryDomain) -> None:
    seen = {fuzzer.boundary_value(domain, 0, 99, True).value for _ in range(DRAWS)}
    assert seen == {0, 1, 98, 99}

    narrow = {fuzzer.boundary_value(domain, 2, 0, True).value for _ in range(DRAWS)}
    assert narrow == {0, 1, 2}
