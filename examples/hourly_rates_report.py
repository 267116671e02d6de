"""Example: Average labour hourly rates from a payroll export

This example builds the shop × category hourly-rate report for one payroll
CSV, prints it, and shows the grid layout used for tables.

Prerequisites:
- A payroll CSV export with BILLUNIT, DESIGSHORTDESC and GROSSPAY columns
  (or close variants such as "Bill Unit", "Designation", "Basic")
"""

from pathlib import Path

from payroll_core import ReportOptions, process_payroll_file
from payroll_core.formatters import format_report_for_console
from payroll_core.report import report_to_frame

payroll_csv = Path("data/payroll_march.csv")  # MODIFY AS NEEDED

# Default (permissive) pay-group matching
report = process_payroll_file(payroll_csv)
print(format_report_for_console(report))

# Same data laid out as the shop × category grid
grid = report_to_frame(report)
print(grid.to_string(index=False))

# Only exact / zero-padded pay-group codes
strict = process_payroll_file(payroll_csv, ReportOptions(strict_pay_group=True))
print(f"\nShops with staff: {report.total_shops} (permissive) vs {strict.total_shops} (strict)")
