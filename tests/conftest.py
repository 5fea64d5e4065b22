"""Wspólne fixtures testów."""

from __future__ import annotations

from typing import Iterator

import pytest

from harness_fuzzer.core import Fuzzer, deinit_fuzzer

FIXED_EXEC_KEY = 0xC4A23064F60B27A4


@pytest.fixture
def fuzzer() -> Iterator[Fuzzer]:
    instance = Fuzzer(FIXED_EXEC_KEY)
    yield instance
    instance.deinit()


@pytest.fixture(autouse=True)
def _reset_thread_fuzzer():
    yield
    deinit_fuzzer()
