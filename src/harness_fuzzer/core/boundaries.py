"""Boundary value generation for fixed-width unsigned integer domains.

A boundary value sits on an edge of the inclusive range [lo, hi] or right next
to it. In valid mode the candidates are the edges and their inner neighbours;
in invalid mode they are the outer neighbours that are still representable in
the domain. When no candidate exists the result carries no value.
"""

from __future__ import annotations

import random

import structlog

from .errors import UnsupportedDomainError
from .models import BoundaryDomain, BoundaryResult

logger = structlog.get_logger(__name__)


def _check_bound(domain: BoundaryDomain, value: int, *, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if not domain.min_value <= value <= domain.max_value:
        raise ValueError(
            f"{name}={value} outside {domain.value} range [{domain.min_value}, {domain.max_value}]"
        )
    return value


def boundary_candidates(domain: BoundaryDomain, lo: int, hi: int, valid_domain: bool) -> list[int]:
    """Returns the sorted, de-duplicated candidates for a normalized range."""

    maximum = domain.max_value

    if lo == hi:
        if valid_domain:
            return [lo]
        if lo > 0:
            return [lo - 1]
        if lo < maximum:
            return [lo + 1]
        return []

    if valid_domain:
        if lo == 0 and hi == maximum:
            return [lo, hi]
        return sorted({lo, lo + 1, hi - 1, hi})

    candidates = []
    if lo > 0:
        candidates.append(lo - 1)
    if hi < maximum:
        candidates.append(hi + 1)
    return candidates


def random_boundary_value(
    rng: random.Random,
    domain: BoundaryDomain,
    boundary1: int,
    boundary2: int,
    valid_domain: bool,
) -> BoundaryResult:
    """Draws one boundary value of [boundary1, boundary2] in the given domain.

    The bounds may be passed in either order. Each distinct candidate has the
    same probability. Signed domains raise `UnsupportedDomainError`.
    """

    if not domain.supported:
        raise UnsupportedDomainError(domain.value)

    _check_bound(domain, boundary1, name="boundary1")
    _check_bound(domain, boundary2, name="boundary2")
    lo, hi = (boundary1, boundary2) if boundary1 <= boundary2 else (boundary2, boundary1)

    candidates = boundary_candidates(domain, lo, hi, bool(valid_domain))
    if not candidates:
        logger.debug(
            "no-valid-boundary",
            domain=domain.value,
            lo=lo,
            hi=hi,
            valid_domain=bool(valid_domain),
        )
        return BoundaryResult(domain=domain, value=None)

    if len(candidates) == 1:
        return BoundaryResult(domain=domain, value=candidates[0])
    return BoundaryResult(domain=domain, value=rng.choice(candidates))
