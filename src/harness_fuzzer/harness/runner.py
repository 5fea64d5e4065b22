"""Test harness runner and report generation.

Every (suite, test, iteration) invocation gets its own execution key and its
own `Fuzzer`, so the values a test sees depend only on the run seed and the
invocation identifiers.
"""

from __future__ import annotations

import json
import random
import string
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

import structlog

from harness_fuzzer.core.exec_key import generate_exec_key
from harness_fuzzer.core.fuzzer import Fuzzer
from harness_fuzzer.shared.config import load_config

from .models import FuzzSuite, FuzzTest, InvocationResult, InvocationStatus

logger = structlog.get_logger(__name__)

RUN_SEED_ALPHABET = string.ascii_uppercase + string.digits
DEFAULT_RUN_SEED_LENGTH = 16


def generate_run_seed(length: int = DEFAULT_RUN_SEED_LENGTH) -> str:
    """Creates a fresh run seed from the OS entropy source."""

    if length < 1:
        raise ValueError(f"length must be at least 1, got {length}")
    rng = random.SystemRandom()
    return "".join(rng.choice(RUN_SEED_ALPHABET) for _ in range(int(length)))


@dataclass(frozen=True, slots=True)
class RunReport:
    run_seed: str
    iterations: int
    created_at: str
    results: list[InvocationResult]

    def counts(self) -> dict[str, int]:
        out = {status.value: 0 for status in InvocationStatus}
        for result in self.results:
            out[result.status.value] += 1
        return out

    @property
    def ok(self) -> bool:
        return all(result.status is InvocationStatus.PASSED for result in self.results)

    def to_dict(self) -> dict:
        return {
            "run_seed": self.run_seed,
            "iterations": self.iterations,
            "created_at": self.created_at,
            "counts": self.counts(),
            "results": [
                {
                    "suite": r.suite,
                    "test": r.test,
                    "iteration": r.iteration,
                    "exec_key": f"{r.exec_key:016x}",
                    "status": r.status.value,
                    "message": r.message,
                }
                for r in self.results
            ],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    def to_markdown(self) -> str:
        lines: list[str] = []
        lines.append("# Fuzz Run Report")
        lines.append("")
        lines.append(f"Generated: {self.created_at}")
        lines.append(f"Run seed: {self.run_seed}")
        lines.append(f"Iterations: {self.iterations}")
        lines.append("")

        lines.append("## Summary")
        counts = self.counts()
        for k in sorted(counts):
            lines.append(f"- {k}: {counts[k]}")
        lines.append("")

        problems = [r for r in self.results if r.status is not InvocationStatus.PASSED]
        if problems:
            lines.append("## Problems")
            for r in problems:
                lines.append(
                    f"- {r.suite}/{r.test} #{r.iteration} [{r.status.value}] "
                    f"key={r.exec_key:016x}: {r.message or ''}".rstrip()
                )
            lines.append("")

        return "\n".join(lines).rstrip() + "\n"


def run_test(suite_name: str, test: FuzzTest, *, run_seed: str, iteration: int) -> InvocationResult:
    """Runs one invocation of a test with a freshly bound fuzzer."""

    exec_key = generate_exec_key(run_seed, suite_name, test.name, iteration)
    fuzzer = Fuzzer(exec_key)
    log = logger.bind(suite=suite_name, test=test.name, iteration=iteration, exec_key=exec_key)

    try:
        test.func(fuzzer)
    except AssertionError as exc:
        log.warning("invocation-failed", error=str(exc))
        return InvocationResult(suite_name, test.name, iteration, exec_key, InvocationStatus.FAILED, str(exc) or "assertion failed")
    except MemoryError:
        raise
    except Exception as exc:
        log.error("invocation-error", error=str(exc), error_type=type(exc).__name__)
        return InvocationResult(suite_name, test.name, iteration, exec_key, InvocationStatus.ERROR, f"{type(exc).__name__}: {exc}")
    finally:
        fuzzer.deinit()

    log.debug("invocation-passed")
    return InvocationResult(suite_name, test.name, iteration, exec_key, InvocationStatus.PASSED)


def run_suites(
    suites: Iterable[FuzzSuite],
    *,
    run_seed: str | None = None,
    iterations: int | None = None,
) -> RunReport:
    """Runs every test of every suite `iterations` times.

    Missing `run_seed` and `iterations` come from `load_config()`; a run seed
    is generated when none is configured.
    """

    if run_seed is None or iterations is None:
        config = load_config()
        run_seed = run_seed if run_seed is not None else config.run_seed
        iterations = iterations if iterations is not None else config.iterations

    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    if run_seed is None:
        run_seed = generate_run_seed()

    suites = list(suites)
    logger.info("run-started", run_seed=run_seed, suites=len(suites), iterations=iterations)

    results: list[InvocationResult] = []
    for suite in suites:
        for test in suite.tests:
            for iteration in range(1, int(iterations) + 1):
                results.append(run_test(suite.name, test, run_seed=run_seed, iteration=iteration))

    created_at = datetime.now(timezone.utc).isoformat()
    report = RunReport(run_seed=run_seed, iterations=int(iterations), created_at=created_at, results=results)
    logger.info("run-complete", run_seed=run_seed, **report.counts())
    return report


def write_report(
    report: RunReport,
    *,
    output_dir: Path,
    stem: str = "fuzz_report",
    formats: tuple[str, ...] = ("json", "md"),
) -> list[Path]:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    if "json" in formats:
        path = output_dir / f"{stem}.json"
        path.write_text(report.to_json(), encoding="utf-8")
        written.append(path)

    if "md" in formats:
        path = output_dir / f"{stem}.md"
        path.write_text(report.to_markdown(), encoding="utf-8")
        written.append(path)

    return written
