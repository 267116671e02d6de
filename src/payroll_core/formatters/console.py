"""Console output formatting utilities."""

from __future__ import annotations

import re

from payroll_core.catalog import CATEGORIES, category_key
from payroll_core.report import Report

REPORT_TITLE = "Average Labour Hourly Rates"


def sanitize_for_console(text: str) -> str:
    """Remove non-ASCII characters so the text prints on any console encoding.

    Args:
        text: Text that may contain non-ASCII characters

    Returns:
        Sanitized text safe for console output
    """
    return re.sub(r"[^\x00-\x7F]+", "", text)


def format_report_for_console(report: Report) -> str:
    """Build a human-readable string representation of the report.

    Args:
        report: Report to render

    Returns:
        Human-readable text string for console output
    """
    if not report.shops:
        return "No shops matched the payroll data."

    lines = []
    lines.append(REPORT_TITLE)
    lines.append("=" * 60)
    lines.append(f"Number of shops: {report.total_shops}")
    lines.append("")

    for shop in report.shops:
        lines.append(f"{shop.shop_name} (Pay Group {shop.pay_group}):")
        for cell in shop.categories:
            if cell.no_of_staff == 0:
                lines.append(f"  {cell.name} ({cell.code}): no staff")
                continue
            lines.append(
                f"  {cell.name} ({cell.code}): staff {cell.no_of_staff}, "
                f"payment {cell.payment_display}, avg {cell.avg_pay_display}, "
                f"hourly {cell.hrly_rate_display}"
            )
        lines.append("")

    lines.append("Total Hourly rate:")
    lines.append("-" * 60)
    for idx, category in enumerate(CATEGORIES):
        lines.append(f"  {category.name}: {report.totals.get(category_key(idx), '0.00')}")
    lines.append("")

    cols = report.columns_found
    lines.append(
        f"Columns used: pay group={cols.pay_group}, designation={cols.designation}, payment={cols.payment}"
    )

    return "\n".join(lines)
