"""Interfejs wiersza poleceń generatora."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, Namespace

import structlog

from harness_fuzzer.core import BoundaryDomain, Fuzzer, generate_exec_key
from harness_fuzzer.harness import generate_run_seed
from harness_fuzzer.shared import configure_logging, load_config, write_error_report

NO_VALID_BOUNDARY = "no-valid-boundary"


def _int_literal(raw: str) -> int:
    """Parses decimal or 0x-prefixed integers."""

    return int(raw, 0)


def _add_key_arguments(parser: ArgumentParser) -> None:
    parser.add_argument(
        "--exec-key",
        type=_int_literal,
        help="Klucz wykonania (dziesiętnie lub 0x...)",
    )
    parser.add_argument("--run-seed", help="Ziarno przebiegu (zamiast --exec-key)")
    parser.add_argument("--suite", default="", help="Nazwa zestawu testów")
    parser.add_argument("--test", default="", help="Nazwa testu")
    parser.add_argument("--iteration", type=int, default=0, help="Numer iteracji (domyślnie: 0)")
    parser.add_argument("--count", type=int, default=1, help="Liczba wartości (domyślnie: 1)")


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="harness-fuzzer",
        description="Deterministyczny generator wartości testowych i kluczy wykonania.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Wyświetla szczegółowe logi",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    exec_key = commands.add_parser("exec-key", help="Wylicza klucz wykonania testu")
    exec_key.add_argument("run_seed")
    exec_key.add_argument("suite")
    exec_key.add_argument("test")
    exec_key.add_argument("--iteration", type=int, default=0, help="Numer iteracji (domyślnie: 0)")
    exec_key.add_argument("--hex", action="store_true", help="Wypisuje klucz szesnastkowo")

    boundary = commands.add_parser("boundary", help="Generuje wartości brzegowe")
    boundary.add_argument("boundary1", type=_int_literal)
    boundary.add_argument("boundary2", type=_int_literal)
    boundary.add_argument("--width", type=int, choices=[8, 16, 32, 64], default=32)
    boundary.add_argument(
        "--invalid",
        action="store_true",
        help="Generuje wartości spoza przedziału",
    )
    _add_key_arguments(boundary)

    strings = commands.add_parser("string", help="Generuje napisy ASCII")
    strings.add_argument("--max-length", type=int, help="Maksymalna długość (domyślnie z konfiguracji)")
    _add_key_arguments(strings)

    run_seed = commands.add_parser("run-seed", help="Generuje nowe ziarno przebiegu")
    run_seed.add_argument("--length", type=int, default=16)

    return parser


def _resolve_exec_key(args: Namespace) -> int:
    if args.exec_key is not None:
        return args.exec_key
    run_seed = args.run_seed or load_config().run_seed
    if run_seed is None:
        raise ValueError("either --exec-key or --run-seed (or HARNESS_FUZZER_RUN_SEED) is required")
    return generate_exec_key(run_seed, args.suite, args.test, args.iteration)


def _run_command(args: Namespace) -> int:
    logger = structlog.get_logger(__name__)

    try:
        if args.command == "exec-key":
            key = generate_exec_key(args.run_seed, args.suite, args.test, args.iteration)
            print(f"0x{key:016x}" if args.hex else key)
            return 0

        if args.command == "run-seed":
            print(generate_run_seed(args.length))
            return 0

        if args.count < 1:
            raise ValueError(f"--count must be at least 1, got {args.count}")

        fuzzer = Fuzzer(_resolve_exec_key(args))
        try:
            if args.command == "boundary":
                domain = BoundaryDomain.unsigned(args.width)
                for _ in range(args.count):
                    result = fuzzer.boundary_value(domain, args.boundary1, args.boundary2, not args.invalid)
                    print(result.value if result.found else NO_VALID_BOUNDARY)
            else:
                max_length = args.max_length if args.max_length is not None else load_config().max_string_length
                for _ in range(args.count):
                    print(repr(fuzzer.random_ascii_string_with_maximum_length(max_length)))
        finally:
            fuzzer.deinit()
        return 0

    except (ValueError, TypeError) as exc:
        logger.error("invalid-arguments", command=args.command, error=str(exc))
        return 1
    except Exception as exc:  # pragma: no cover - nieoczekiwane błędy
        report = write_error_report(exc, where="cli", context={"command": args.command})
        logger.exception("command-failed", command=args.command, report=str(report.path))
        return 1


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        level = load_config().log_level
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(level=logging.DEBUG if args.verbose else level)
    return _run_command(args)


if __name__ == "__main__":
    sys.exit(main())
