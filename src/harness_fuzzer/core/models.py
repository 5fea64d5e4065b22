"""Modele danych używane przez generatory wartości."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BoundaryDomain(str, Enum):
    """Dziedziny całkowitoliczbowe, dla których generowane są wartości brzegowe."""

    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    # No boundary algorithm exists for signed domains.
    SINT8 = "sint8"

    @property
    def bits(self) -> int:
        return int(self.value.partition("int")[2])

    @property
    def signed(self) -> bool:
        return self.value.startswith("s")

    @property
    def supported(self) -> bool:
        return not self.signed

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def sentinel(self) -> int:
        """Wartość -1 zapisana w szerokości dziedziny (wszystkie bity ustawione)."""

        return (1 << self.bits) - 1

    @classmethod
    def unsigned(cls, bits: int) -> "BoundaryDomain":
        """Zwraca dziedzinę bez znaku o podanej szerokości."""

        try:
            return cls(f"uint{int(bits)}")
        except ValueError:
            raise ValueError(f"unsupported width: {bits}") from None


@dataclass(frozen=True, slots=True)
class BoundaryResult:
    """Wynik generowania wartości brzegowej.

    `value` is None when no value satisfies the requested range and mode.
    """

    domain: BoundaryDomain
    value: Optional[int]

    @property
    def found(self) -> bool:
        return self.value is not None

    @property
    def raw(self) -> int:
        """Wartość zgodna z dawnym API: brak wyniku kodowany jako sentinel."""

        return self.domain.sentinel if self.value is None else self.value
