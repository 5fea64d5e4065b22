"""Fuzzer bound to a single execution key.

`Fuzzer` owns its random engine, so independent instances never interfere.
The module-level functions keep one fuzzer per thread for harnesses that
prefer the init/generate/deinit call style.
"""

from __future__ import annotations

import random
import threading
from contextlib import contextmanager
from typing import Iterator

import structlog

from . import generators
from .boundaries import random_boundary_value
from .errors import FuzzerNotInitializedError, UnsupportedDomainError
from .exec_key import EXEC_KEY_BITS
from .models import BoundaryDomain, BoundaryResult

logger = structlog.get_logger(__name__)

_EXEC_KEY_MAX = (1 << EXEC_KEY_BITS) - 1


class Fuzzer:
    """Generator wartości losowych powiązany z kluczem wykonania."""

    def __init__(self, exec_key: int | None = None) -> None:
        self._rng: random.Random | None = None
        self._exec_key: int | None = None
        if exec_key is not None:
            self.init(exec_key)

    @property
    def initialized(self) -> bool:
        return self._rng is not None

    @property
    def exec_key(self) -> int | None:
        return self._exec_key

    def init(self, exec_key: int) -> None:
        """Wiąże silnik losowy z kluczem; ponowne wywołanie resetuje sekwencję."""

        if isinstance(exec_key, bool) or not isinstance(exec_key, int):
            raise TypeError(f"exec_key must be int, got {type(exec_key).__name__}")
        if not 0 <= exec_key <= _EXEC_KEY_MAX:
            raise ValueError(f"exec_key must be an unsigned 64-bit value, got {exec_key}")
        self._rng = random.Random(exec_key)
        self._exec_key = exec_key
        logger.debug("fuzzer-initialized", exec_key=exec_key)

    def deinit(self) -> None:
        """Zwalnia silnik; bezpieczne także bez wcześniejszej inicjalizacji."""

        if self._rng is not None:
            logger.debug("fuzzer-deinitialized", exec_key=self._exec_key)
        self._rng = None
        self._exec_key = None

    def _engine(self) -> random.Random:
        if self._rng is None:
            raise FuzzerNotInitializedError("fuzzer is not initialized; call init() first")
        return self._rng

    def random_integer(self) -> int:
        return generators.random_integer(self._engine())

    def random_positive_integer(self) -> int:
        return generators.random_positive_integer(self._engine())

    def random_integer_in_range(self, minimum: int, maximum: int) -> int:
        return generators.random_integer_in_range(self._engine(), minimum, maximum)

    def random_ascii_string(self) -> str:
        return generators.random_ascii_string(self._engine())

    def random_ascii_string_with_maximum_length(self, max_length: int) -> str:
        return generators.random_ascii_string(self._engine(), max_length)

    def boundary_value(
        self,
        domain: BoundaryDomain,
        boundary1: int,
        boundary2: int,
        valid_domain: bool,
    ) -> BoundaryResult:
        """Returns a tagged boundary result; `value` is None when none exists."""

        return random_boundary_value(self._engine(), domain, boundary1, boundary2, valid_domain)

    def random_uint8_boundary_value(self, boundary1: int, boundary2: int, valid_domain: bool) -> int:
        return self.boundary_value(BoundaryDomain.UINT8, boundary1, boundary2, valid_domain).raw

    def random_uint16_boundary_value(self, boundary1: int, boundary2: int, valid_domain: bool) -> int:
        return self.boundary_value(BoundaryDomain.UINT16, boundary1, boundary2, valid_domain).raw

    def random_uint32_boundary_value(self, boundary1: int, boundary2: int, valid_domain: bool) -> int:
        return self.boundary_value(BoundaryDomain.UINT32, boundary1, boundary2, valid_domain).raw

    def random_uint64_boundary_value(self, boundary1: int, boundary2: int, valid_domain: bool) -> int:
        return self.boundary_value(BoundaryDomain.UINT64, boundary1, boundary2, valid_domain).raw

    def random_sint8_boundary_value(self, *_args: object) -> int:
        raise UnsupportedDomainError(BoundaryDomain.SINT8.value)


_local = threading.local()


def _current() -> Fuzzer:
    fuzzer = getattr(_local, "fuzzer", None)
    if fuzzer is None:
        fuzzer = Fuzzer()
        _local.fuzzer = fuzzer
    return fuzzer


def current_fuzzer() -> Fuzzer:
    """Zwraca fuzzer bieżącego wątku."""

    return _current()


def init_fuzzer(exec_key: int) -> None:
    _current().init(exec_key)


def deinit_fuzzer() -> None:
    _current().deinit()


@contextmanager
def fuzzer_session(exec_key: int) -> Iterator[Fuzzer]:
    """Initializes the calling thread's fuzzer for the duration of the block."""

    fuzzer = _current()
    fuzzer.init(exec_key)
    try:
        yield fuzzer
    finally:
        fuzzer.deinit()


def random_integer() -> int:
    return _current().random_integer()


def random_positive_integer() -> int:
    return _current().random_positive_integer()


def random_integer_in_range(minimum: int, maximum: int) -> int:
    return _current().random_integer_in_range(minimum, maximum)


def random_ascii_string() -> str:
    return _current().random_ascii_string()


def random_ascii_string_with_maximum_length(max_length: int) -> str:
    return _current().random_ascii_string_with_maximum_length(max_length)


def random_uint8_boundary_value(boundary1: int, boundary2: int, valid_domain: bool) -> int:
    return _current().random_uint8_boundary_value(boundary1, boundary2, valid_domain)


def random_uint16_boundary_value(boundary1: int, boundary2: int, valid_domain: bool) -> int:
    return _current().random_uint16_boundary_value(boundary1, boundary2, valid_domain)


def random_uint32_boundary_value(boundary1: int, boundary2: int, valid_domain: bool) -> int:
    return _current().random_uint32_boundary_value(boundary1, boundary2, valid_domain)


def random_uint64_boundary_value(boundary1: int, boundary2: int, valid_domain: bool) -> int:
    return _current().random_uint64_boundary_value(boundary1, boundary2, valid_domain)


def random_sint8_boundary_value(*_args: object) -> int:
    raise UnsupportedDomainError(BoundaryDomain.SINT8.value)
