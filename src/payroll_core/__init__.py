"""Payroll Core - average labour hourly rates from payroll CSV exports.

This package turns a payroll export into a shop × staff-category report:

- **Parsing**: header + rows from comma-separated text
- **Column detection**: pay group, designation and payment columns
- **Aggregation**: staff count, payment, average pay and hourly rate per cell
- **Totals**: mean hourly rate per category across shops

Module Structure:
    payroll_core.api: process_payroll_csv / process_payroll_file
    payroll_core.catalog: fixed shop and category tables
    payroll_core.aggregate: per-shop, per-category reducers
    payroll_core.totals: cross-shop totals
    payroll_core.report: Report structure and tabular grid
    payroll_core.formatters: console rendering

Quick Start:
    >>> from payroll_core import process_payroll_file
    >>> report = process_payroll_file("payroll_march.csv")
    >>> for shop in report.shops:
    ...     print(shop.shop_name, [c.hrly_rate_display for c in shop.categories])
    >>> report.totals
    {'category1': '208.33', 'category2': '0.00', 'category3': '0.00', 'category4': '0.00'}
"""

__version__ = "0.1.0"

from payroll_core.api import process_payroll_csv, process_payroll_file
from payroll_core.config import ReportOptions
from payroll_core.exceptions import (
    ConfigError,
    EmptyInputError,
    InvalidFileTypeError,
    MissingFileError,
    PayrollAPIError,
    PayrollInputError,
)
from payroll_core.report import Report

__all__ = [
    "ConfigError",
    "EmptyInputError",
    "InvalidFileTypeError",
    "MissingFileError",
    "PayrollAPIError",
    "PayrollInputError",
    "Report",
    "ReportOptions",
    "__version__",
    "process_payroll_csv",
    "process_payroll_file",
]
