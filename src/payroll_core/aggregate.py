"""Aggregate payroll rows into per-shop, per-category cells.

For every shop in the catalog and every staff category this module computes
the COUNTIFS/SUMIFS equivalents over the payroll rows:

- no_of_staff: rows whose pay group matches the shop and whose designation
  matches the category
- payment: sum of the payment column over the same rows
- avg_pay: payment / no_of_staff (0 when there is no staff)
- hrly_rate: avg_pay / HOURS_PER_MONTH

Shops without staff in any category are left out of the result.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import pandas as pd

from payroll_core.amounts import format_amount, format_fixed, parse_amounts
from payroll_core.catalog import CATEGORIES, HOURS_PER_MONTH, SHOPS, CategoryConfig, ShopConfig
from payroll_core.columns import ColumnsFound
from payroll_core.config import ReportOptions
from payroll_core.matching import designation_mask, pay_group_mask

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellResult:
    """Aggregates for one (shop, category) pair.

    Attributes:
        name: Category display name.
        code: Category display code.
        no_of_staff: Number of matching rows.
        payment: Summed payment of the matching rows.
        avg_pay: payment / no_of_staff, or 0.0 when no_of_staff is 0.
        hrly_rate: avg_pay / HOURS_PER_MONTH.
    """

    name: str
    code: str
    no_of_staff: int
    payment: float
    avg_pay: float
    hrly_rate: float

    @classmethod
    def from_totals(cls, category: CategoryConfig, no_of_staff: int, payment: float) -> CellResult:
        """Derive average pay and hourly rate from a count and a payment sum."""
        avg_pay = payment / no_of_staff if no_of_staff > 0 else 0.0
        return cls(
            name=category.name,
            code=category.code,
            no_of_staff=no_of_staff,
            payment=payment,
            avg_pay=avg_pay,
            hrly_rate=avg_pay / HOURS_PER_MONTH,
        )

    @property
    def payment_display(self) -> str:
        """Total payment with thousands separators, e.g. "50,000.00"."""
        return format_amount(self.payment)

    @property
    def avg_pay_display(self) -> str:
        """Average pay, formatted like the payment."""
        return format_amount(self.avg_pay)

    @property
    def hrly_rate_display(self) -> str:
        """Hourly rate as plain two decimals, without grouping."""
        return format_fixed(self.hrly_rate)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the cell with camelCase keys and display strings.

        Returns:
            Dict with ``name``, ``code``, ``noOfStaff``, ``payment``, ``avgPay``
            and ``hrlyRate``.
        """
        return {
            "name": self.name,
            "code": self.code,
            "noOfStaff": self.no_of_staff,
            "payment": self.payment_display,
            "avgPay": self.avg_pay_display,
            "hrlyRate": self.hrly_rate_display,
        }


@dataclass(frozen=True)
class ShopResult:
    """One shop with a cell per category, in catalog order."""

    shop_name: str
    pay_group: str
    categories: tuple[CellResult, ...]

    @property
    def has_staff(self) -> bool:
        """True when any category counted at least one staff member."""
        return any(cell.no_of_staff > 0 for cell in self.categories)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the shop and its cells."""
        return {
            "shopName": self.shop_name,
            "payGroup": self.pay_group,
            "categories": [cell.to_dict() for cell in self.categories],
        }


def _column(frame: pd.DataFrame, name: str) -> pd.Series:
    """Return a column, or an all-missing Series when the column is absent."""
    if name in frame.columns:
        return frame[name]
    return pd.Series([None] * len(frame), index=frame.index, dtype=object)


def aggregate_shop(
    shop: ShopConfig,
    shop_mask: pd.Series,
    category_masks: Sequence[pd.Series],
    amounts: pd.Series,
    categories: Sequence[CategoryConfig] = CATEGORIES,
) -> ShopResult:
    """Build the ShopResult for one shop from precomputed row masks.

    Args:
        shop: Shop being aggregated.
        shop_mask: Rows whose pay group matches the shop.
        category_masks: Rows whose designation matches each category, in
            the same order as ``categories``.
        amounts: Parsed payment per row (non-negative).
        categories: Category catalog.

    Returns:
        ShopResult with one CellResult per category.
    """
    cells = []
    for category, category_mask in zip(categories, category_masks):
        matched = shop_mask & category_mask
        no_of_staff = int(matched.sum())
        payment = float(amounts[matched].sum()) if no_of_staff else 0.0
        cells.append(CellResult.from_totals(category, no_of_staff, payment))
    return ShopResult(shop_name=shop.shop_name, pay_group=shop.pay_group, categories=tuple(cells))


def aggregate_shops(
    frame: pd.DataFrame,
    columns: ColumnsFound,
    options: ReportOptions | None = None,
    shops: Sequence[ShopConfig] = SHOPS,
    categories: Sequence[CategoryConfig] = CATEGORIES,
) -> list[ShopResult]:
    """Aggregate every shop of the catalog and keep those with staff.

    Args:
        frame: Payroll rows as a DataFrame of strings.
        columns: Resolved pay group, designation and payment columns.
        options: Matching options; defaults to ReportOptions().
        shops: Shop catalog, in output order.
        categories: Category catalog, in output order.

    Returns:
        ShopResults in catalog order, excluding shops with no staff at all.
    """
    options = options or ReportOptions()

    pay_groups = _column(frame, columns.pay_group)
    designations = _column(frame, columns.designation)
    amounts = parse_amounts(_column(frame, columns.payment))

    category_masks = [designation_mask(designations, c.designations) for c in categories]

    results: list[ShopResult] = []
    for shop in shops:
        shop_mask = pay_group_mask(pay_groups, shop.pay_group_numeric, strict=options.strict_pay_group)
        shop_result = aggregate_shop(shop, shop_mask, category_masks, amounts, categories)
        if shop_result.has_staff:
            results.append(shop_result)
        else:
            logger.debug("Dropping shop %s: no matching staff", shop.shop_name)

    logger.info("Aggregated %d row(s) into %d shop(s)", len(frame), len(results))
    return results
