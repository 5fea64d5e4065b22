"""Test harness: per-invocation execution keys, fuzzers and run reports."""

from .models import FuzzSuite, FuzzTest, InvocationResult, InvocationStatus
from .runner import RunReport, generate_run_seed, run_suites, run_test, write_report

__all__ = [
    "FuzzSuite",
    "FuzzTest",
    "InvocationResult",
    "InvocationStatus",
    "RunReport",
    "generate_run_seed",
    "run_suites",
    "run_test",
    "write_report",
]
