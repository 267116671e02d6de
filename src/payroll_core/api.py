"""Public API for building hourly-rate reports from payroll CSV exports.

This module provides an in-memory entry point (``process_payroll_csv``) and a
file-based one (``process_payroll_file``). Neither prints; progress is
reported through the logging module.

Example:
    >>> from payroll_core import process_payroll_csv
    >>> report = process_payroll_csv("BILLUNIT,DESIGSHORTDESC,GROSSPAY\\n0915101,SR. TECH,50000\\n")
    >>> report.shops[0].shop_name
    'MILLWRIGHT'
    >>> report.totals["category1"]
    '208.33'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from payroll_core.aggregate import aggregate_shops
from payroll_core.columns import resolve_columns
from payroll_core.config import ReportOptions
from payroll_core.exceptions import InvalidFileTypeError, MissingFileError
from payroll_core.parsing import parse_payroll_text
from payroll_core.report import Report, assemble_report
from payroll_core.totals import calculate_totals

logger = logging.getLogger(__name__)


def process_payroll_csv(
    raw_text: Optional[str],
    options: Optional[ReportOptions] = None,
    *,
    file_name: Optional[str] = None,
    file_size: Optional[int] = None,
    processed_at: Optional[str] = None,
) -> Report:
    """Parse payroll CSV text and build the hourly-rate report.

    Args:
        raw_text: Full CSV content, header line first.
        options: Matching options; defaults to ReportOptions().
        file_name: Source file name recorded in the report metadata.
        file_size: Source size in bytes recorded in the report metadata.
        processed_at: Timestamp to record; defaults to the current UTC time.

    Returns:
        Report with the retained shops, totals and resolved columns.

    Raises:
        MissingFileError: If ``raw_text`` is None.
        EmptyInputError: If the text has fewer than two non-blank lines.
    """
    options = options or ReportOptions()

    table = parse_payroll_text(raw_text)
    columns = resolve_columns(table.headers)
    logger.info(
        "Using columns pay_group=%r designation=%r payment=%r",
        columns.pay_group,
        columns.designation,
        columns.payment,
    )

    shops = aggregate_shops(table.to_frame(), columns, options)
    totals = calculate_totals(shops)

    return assemble_report(
        shops,
        totals,
        columns,
        file_name=file_name,
        file_size=file_size,
        processed_at=processed_at,
    )


def process_payroll_file(
    path: Optional[Union[str, Path]],
    options: Optional[ReportOptions] = None,
) -> Report:
    """Read a payroll CSV file and build the hourly-rate report.

    The file is decoded as UTF-8; a leading byte-order mark is ignored.

    Args:
        path: Path to the payroll export.
        options: Matching options and accepted extensions.

    Returns:
        Report whose metadata carries the file name and size in bytes.

    Raises:
        MissingFileError: If ``path`` is None or does not point to a file.
        InvalidFileTypeError: If the extension is not accepted.
        EmptyInputError: If the file has fewer than two non-blank lines.
    """
    options = options or ReportOptions()

    if path is None:
        raise MissingFileError()
    path = Path(path)
    if not path.is_file():
        raise MissingFileError(f"No file provided: {path} does not exist")
    if not options.accepts(path.name):
        raise InvalidFileTypeError()

    data = path.read_bytes()
    logger.info("Processing %s (%d bytes)", path.name, len(data))
    text = data.decode("utf-8-sig", errors="replace")

    return process_payroll_csv(text, options, file_name=path.name, file_size=len(data))
