"""Inicjalizacja pakietu harness_fuzzer."""

__all__ = [
    "core",
    "harness",
    "shared",
]
