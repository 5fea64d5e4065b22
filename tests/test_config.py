import logging

import pytest

_VARS = (
    "HARNESS_FUZZER_RUN_SEED",
    "HARNESS_FUZZER_ITERATIONS",
    "HARNESS_FUZZER_MAX_STRING_LENGTH",
    "HARNESS_FUZZER_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_load_config_defaults(clean_env):
    from harness_fuzzer.shared.config import FuzzerConfig, load_config

    assert load_config() == FuzzerConfig.default()
    cfg = load_config()
    assert cfg.run_seed is None
    assert cfg.iterations == 1
    assert cfg.max_string_length == 255
    assert cfg.log_level == logging.INFO


def test_load_config_reads_environment(clean_env):
    clean_env.setenv("HARNESS_FUZZER_RUN_SEED", " ABC123 ")
    clean_env.setenv("HARNESS_FUZZER_ITERATIONS", "5")
    clean_env.setenv("HARNESS_FUZZER_MAX_STRING_LENGTH", "16")
    clean_env.setenv("HARNESS_FUZZER_LOG_LEVEL", "debug")

    from harness_fuzzer.shared.config import load_config

    cfg = load_config()
    assert cfg.run_seed == "ABC123"
    assert cfg.iterations == 5
    assert cfg.max_string_length == 16
    assert cfg.log_level == logging.DEBUG


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("HARNESS_FUZZER_ITERATIONS", "many"),
        ("HARNESS_FUZZER_ITERATIONS", "0"),
        ("HARNESS_FUZZER_MAX_STRING_LENGTH", "-1"),
        ("HARNESS_FUZZER_LOG_LEVEL", "LOUD"),
    ],
)
def test_load_config_rejects_malformed_values(clean_env, name, value):
    clean_env.setenv(name, value)

    from harness_fuzzer.shared.config import load_config

    with pytest.raises(ValueError, match=name):
        load_config()
