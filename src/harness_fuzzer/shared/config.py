"""Environment-based configuration for the harness."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from harness_fuzzer.core.generators import DEFAULT_MAX_STRING_LENGTH

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass(frozen=True, slots=True)
class FuzzerConfig:
    """Konfiguracja przebiegu testów."""

    run_seed: str | None = None
    iterations: int = 1
    max_string_length: int = DEFAULT_MAX_STRING_LENGTH
    log_level: int = logging.INFO

    @classmethod
    def default(cls) -> "FuzzerConfig":
        """Tworzy domyślną konfigurację."""

        return cls()


def _env_int(name: str, default: int, *, minimum: int = 1) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw, 10)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_log_level(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip().upper()
    if not raw:
        return default
    if raw not in _LOG_LEVELS:
        raise ValueError(f"{name} must be one of {sorted(_LOG_LEVELS)}, got {raw!r}")
    return _LOG_LEVELS[raw]


def load_config() -> FuzzerConfig:
    """Loads the harness config from environment.

    Variables:
    - `HARNESS_FUZZER_RUN_SEED`: fixed run seed (default: generated per run)
    - `HARNESS_FUZZER_ITERATIONS`: iterations per test (default: 1)
    - `HARNESS_FUZZER_MAX_STRING_LENGTH`: cap for generated strings (default: 255)
    - `HARNESS_FUZZER_LOG_LEVEL`: DEBUG/INFO/WARNING/ERROR (default: INFO)
    """

    defaults = FuzzerConfig.default()
    run_seed = (os.getenv("HARNESS_FUZZER_RUN_SEED") or "").strip() or None

    return FuzzerConfig(
        run_seed=run_seed,
        iterations=_env_int("HARNESS_FUZZER_ITERATIONS", defaults.iterations),
        max_string_length=_env_int("HARNESS_FUZZER_MAX_STRING_LENGTH", defaults.max_string_length),
        log_level=_env_log_level("HARNESS_FUZZER_LOG_LEVEL", defaults.log_level),
    )
