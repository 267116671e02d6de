"""Command-line entry point: build an hourly-rate report from a payroll CSV.

Examples:
    Print the report as a table:
        payroll-rates payroll_march.csv

    Write the JSON report contract to a file:
        payroll-rates payroll_march.csv --format json -o report.json

    Only accept exact or zero-padded pay group codes:
        payroll-rates payroll_march.csv --strict-pay-group
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from payroll_core.api import process_payroll_file
from payroll_core.config import ReportOptions
from payroll_core.exceptions import PayrollInputError
from payroll_core.formatters.console import format_report_for_console, sanitize_for_console

logger = logging.getLogger(__name__)


def _printable(text: str) -> str:
    """Return text unchanged when stdout can encode it, else strip non-ASCII."""
    encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
    try:
        text.encode(encoding)
    except UnicodeEncodeError:
        return sanitize_for_console(text)
    return text


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="payroll-rates",
        description="Compute average labour hourly rates per shop and staff category from a payroll CSV.",
    )
    p.add_argument("input", help="Payroll CSV export.")
    p.add_argument(
        "-o", "--output",
        default=None,
        help="Write the report to this path instead of stdout.",
    )
    p.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: table).",
    )
    p.add_argument(
        "--strict-pay-group",
        action="store_true",
        help="Match pay groups only exactly or with a single leading zero added/removed.",
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Less logging output.",
    )
    p.add_argument(
        "--verbose", "--debug",
        action="store_true",
        dest="verbose",
        help="Verbose/debug logging output.",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    try:
        options = ReportOptions.from_values(strict_pay_group=args.strict_pay_group)
        report = process_payroll_file(args.input, options)
    except PayrollInputError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error("Error: %s", e, exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.format == "json":
        rendered = json.dumps(report.to_dict(), indent=2)
    else:
        rendered = format_report_for_console(report)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + "\n", encoding="utf-8")
        logger.info("Wrote report for %d shop(s) to %s", report.total_shops, output_path)
    else:
        print(_printable(rendered))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
