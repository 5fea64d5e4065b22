"""Wyjątki generatora wartości."""

from __future__ import annotations


class FuzzerError(RuntimeError):
    """Błąd bazowy generatora."""


class FuzzerNotInitializedError(FuzzerError):
    """Generator użyty przed `init_fuzzer` lub po `deinit_fuzzer`."""


class UnsupportedDomainError(FuzzerError, NotImplementedError):
    """Dziedzina bez zdefiniowanego algorytmu wartości brzegowych."""

    def __init__(self, domain: object) -> None:
        super().__init__(f"boundary values are not implemented for {domain}")
        self.domain = domain
