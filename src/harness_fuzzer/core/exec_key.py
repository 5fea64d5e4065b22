"""Execution key derivation.

The key identifies one test invocation: the same run seed, suite name, test
name and iteration always map to the same unsigned 64-bit value.
"""

from __future__ import annotations

import hashlib

EXEC_KEY_BITS = 64


def _as_bytes(value: str | bytes, *, name: str) -> bytes:
    if value is None:
        raise TypeError(f"{name} must not be None")
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"{name} must be str or bytes, got {type(value).__name__}")


def generate_exec_key(
    run_seed: str | bytes,
    suite_name: str | bytes,
    test_name: str | bytes,
    iteration: int,
) -> int:
    """Derives the execution key for a single test invocation.

    The identifiers are concatenated with the decimal iteration number, hashed
    with MD5, and the first eight digest bytes are read as a little-endian
    unsigned integer.
    """

    if isinstance(iteration, bool) or not isinstance(iteration, int):
        raise TypeError(f"iteration must be int, got {type(iteration).__name__}")
    if iteration < 0:
        raise ValueError(f"iteration must be non-negative, got {iteration}")

    buffer = b"".join(
        (
            _as_bytes(run_seed, name="run_seed"),
            _as_bytes(suite_name, name="suite_name"),
            _as_bytes(test_name, name="test_name"),
            str(iteration).encode("ascii"),
        )
    )
    digest = hashlib.md5(buffer, usedforsecurity=False).digest()
    return int.from_bytes(digest[: EXEC_KEY_BITS // 8], "little")
