import argparse
import json
import logging
import os
import sys
from pathlib import Path

from freqtable.adapters.clock import MonotonicClock
from freqtable.adapters.console import ConsoleWriter
from freqtable.adapters.rules import CasesRulesAdapter, ReportRulesAdapter
from freqtable.components.cases import RunCasesInput, run_cases
from freqtable.components.frequency import (
    InvalidArgumentError,
    count_frequencies,
    most_common,
)
from freqtable.components.report import RenderReportInput, run_render
from freqtable.rules.loader import load_rules
from freqtable.rules.models import Rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"
RULES_ENV = "FREQTABLE_RULES"

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_INPUT = 2


def get_rules(path: str | None) -> Rules:
    """Load rules from --rules, $FREQTABLE_RULES, or ./rules.yaml; else defaults."""
    explicit = path or os.environ.get(RULES_ENV)
    if explicit:
        return load_rules(Path(explicit))

    if Path(RULES_PATH).exists():
        return load_rules(Path(RULES_PATH))

    logger.debug("No rules file found, using defaults.")
    return Rules()


def handle_count(args: argparse.Namespace) -> int:
    raw = args.data if args.data is not None else sys.stdin.read()
    try:
        items = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON input: {e}")
        return EXIT_BAD_INPUT

    try:
        frequencies = count_frequencies(items)
    except InvalidArgumentError as e:
        logger.error(str(e))
        return EXIT_FAILED

    if args.top is not None:
        frequencies = dict(most_common(frequencies, args.top))

    print(json.dumps(frequencies, ensure_ascii=False))
    return EXIT_OK


def handle_selftest(rules: Rules, args: argparse.Namespace) -> int:
    result = run_cases(
        RunCasesInput(),
        clock=MonotonicClock(),
        rules=CasesRulesAdapter(rules),
    )
    if not result.success or result.summary is None:
        for err in result.errors:
            logger.error(f"{err.code}: {err.message}")
        return EXIT_FAILED

    report = run_render(
        RenderReportInput(outcomes=result.summary.outcomes),
        writer=ConsoleWriter(),
        rules=ReportRulesAdapter(rules),
    )
    if not report.success:
        for report_err in report.errors:
            logger.error(f"{report_err.code}: {report_err.message}")
        return EXIT_FAILED

    return EXIT_OK if result.summary.all_passed else EXIT_FAILED


def main(argv: list[str] | None = None) -> int:
    rules_help = f"Path to rules file (default: ${RULES_ENV} or {RULES_PATH})"
    parser = argparse.ArgumentParser(description="freqtable CLI")
    parser.add_argument("--rules", help=rules_help)

    # --rules is also accepted after the subcommand; SUPPRESS keeps the
    # top-level value when it is only given before it
    rules_parent = argparse.ArgumentParser(add_help=False)
    rules_parent.add_argument("--rules", default=argparse.SUPPRESS, help=rules_help)

    subparsers = parser.add_subparsers(dest="command", required=True)

    # count
    count_parser = subparsers.add_parser(
        "count", parents=[rules_parent], help="Count items of a JSON array"
    )
    count_parser.add_argument("data", nargs="?", help="JSON array (reads stdin if omitted)")
    count_parser.add_argument("--top", type=int, help="Only show the N most common keys")

    # selftest
    subparsers.add_parser(
        "selftest",
        parents=[rules_parent],
        help="Run the built-in cases and print a results table",
    )

    args = parser.parse_args(argv)

    try:
        rules = get_rules(args.rules)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT

    logging.getLogger().setLevel(rules.logging.level)

    if args.command == "count":
        return handle_count(args)
    elif args.command == "selftest":
        return handle_selftest(rules, args)

    parser.print_help()
    return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
