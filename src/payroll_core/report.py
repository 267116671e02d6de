"""Report assembly: the structure handed to renderers.

A Report bundles the retained shops, the per-category totals, the resolved
column names and the source-file metadata. ``Report.to_dict`` produces the
JSON-ready contract; ``report_to_frame`` lays the same data out as the
shop × category grid used by tabular renderers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

import pandas as pd

from payroll_core.aggregate import ShopResult
from payroll_core.catalog import CATEGORIES, category_key
from payroll_core.columns import ColumnsFound

GRID_CELL_COLUMNS = ("No of staff", "Payment", "Avg pay", "Hrly rate")
TOTAL_ROW_LABEL = "Total Hourly rate"


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ReportMetadata:
    """Where the report came from and when it was built.

    Attributes:
        file_name: Source file name, if known.
        file_size: Source size in bytes, if known.
        processed_at: ISO-8601 UTC timestamp.
    """

    file_name: Optional[str] = None
    file_size: Optional[int] = None
    processed_at: str = field(default_factory=utc_timestamp)


@dataclass(frozen=True)
class Report:
    """Hourly-rate report for one payroll file.

    Metadata does not take part in equality, so two reports built from the
    same input compare equal. Reports are unhashable because ``totals`` is a dict.
    """

    shops: tuple[ShopResult, ...]
    totals: dict[str, str]
    columns_found: ColumnsFound
    metadata: ReportMetadata = field(default_factory=ReportMetadata, compare=False)

    __hash__ = None  # type: ignore[assignment]

    @property
    def total_shops(self) -> int:
        """Number of shops with at least one matching staff member."""
        return len(self.shops)

    def to_dict(self) -> dict[str, Any]:
        """Render the report contract with camelCase keys and display strings."""
        return {
            "shops": [shop.to_dict() for shop in self.shops],
            "totals": dict(self.totals),
            "totalShops": self.total_shops,
            "fileName": self.metadata.file_name,
            "fileSize": self.metadata.file_size,
            "processedAt": self.metadata.processed_at,
            "columnsFound": self.columns_found.to_dict(),
        }


def assemble_report(
    shops: list[ShopResult],
    totals: dict[str, str],
    columns_found: ColumnsFound,
    file_name: Optional[str] = None,
    file_size: Optional[int] = None,
    processed_at: Optional[str] = None,
) -> Report:
    """Package aggregation results and metadata into a Report."""
    metadata = ReportMetadata(
        file_name=file_name,
        file_size=file_size,
        processed_at=processed_at or utc_timestamp(),
    )
    return Report(
        shops=tuple(shops),
        totals=dict(totals),
        columns_found=columns_found,
        metadata=metadata,
    )


def report_to_frame(report: Report) -> pd.DataFrame:
    """Flatten a report into the shop × category display grid.

    Columns are a two-level index: ("SHOP NAME", ""), ("Pay Group", "") and
    then (category name, metric) for each category and each of
    GRID_CELL_COLUMNS. The last row holds the per-category totals in the
    "Hrly rate" columns.

    Args:
        report: Report to flatten.

    Returns:
        DataFrame of display strings (staff counts stay integers).
    """
    category_names = [c.name for c in CATEGORIES]
    columns = [("SHOP NAME", ""), ("Pay Group", "")]
    for name in category_names:
        columns.extend((name, metric) for metric in GRID_CELL_COLUMNS)

    rows: list[list[Any]] = []
    for shop in report.shops:
        row: list[Any] = [shop.shop_name, shop.pay_group]
        for cell in shop.categories:
            row.extend([cell.no_of_staff, cell.payment_display, cell.avg_pay_display, cell.hrly_rate_display])
        rows.append(row)

    totals_row: list[Any] = [TOTAL_ROW_LABEL, ""]
    for idx in range(len(category_names)):
        totals_row.extend(["", "", "", report.totals.get(category_key(idx), "0.00")])
    rows.append(totals_row)

    return pd.DataFrame(rows, columns=pd.MultiIndex.from_tuples(columns))
