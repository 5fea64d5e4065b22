"""Modele przebiegu testów."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from harness_fuzzer.core.fuzzer import Fuzzer

TestFunc = Callable[[Fuzzer], None]


class InvocationStatus(str, Enum):
    """Wynik pojedynczego wywołania testu."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class FuzzTest:
    """Test otrzymujący fuzzer związany z kluczem wywołania."""

    name: str
    func: TestFunc


@dataclass(slots=True)
class FuzzSuite:
    """Nazwany zbiór testów."""

    name: str
    tests: List[FuzzTest] = field(default_factory=list)

    def add_test(self, name: str, func: TestFunc) -> FuzzTest:
        """Dodaje test, odrzucając zduplikowane nazwy."""

        if name in {existing.name for existing in self.tests}:
            raise ValueError(f"duplicate test {name!r} in suite {self.name!r}")
        test = FuzzTest(name=name, func=func)
        self.tests.append(test)
        return test

    def test(self, func: TestFunc) -> TestFunc:
        """Dekorator rejestrujący funkcję pod jej nazwą."""

        self.add_test(func.__name__, func)
        return func


@dataclass(frozen=True, slots=True)
class InvocationResult:
    suite: str
    test: str
    iteration: int
    exec_key: int
    status: InvocationStatus
    message: Optional[str] = None
