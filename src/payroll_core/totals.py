"""Cross-shop hourly-rate totals per category."""

from __future__ import annotations

from collections.abc import Sequence

from payroll_core.aggregate import ShopResult
from payroll_core.amounts import format_fixed, round_cents
from payroll_core.catalog import CATEGORIES, category_key

ZERO_TOTAL = "0.00"


def calculate_totals(shops: Sequence[ShopResult], category_count: int = len(CATEGORIES)) -> dict[str, str]:
    """Average each category's hourly rate across the shops that have one.

    Rates are taken at their displayed two-decimal value; a shop whose rate
    shows as 0.00 does not count. Categories are independent, so a shop
    without category-1 staff still contributes to category 2.

    Args:
        shops: Retained shop results.
        category_count: Number of categories per shop.

    Returns:
        Mapping "category1".."categoryN" to a two-decimal string, "0.00"
        when no shop qualifies.

    Examples:
        >>> calculate_totals([])
        {'category1': '0.00', 'category2': '0.00', 'category3': '0.00', 'category4': '0.00'}
    """
    totals: dict[str, str] = {}
    for idx in range(category_count):
        rates = []
        for shop in shops:
            if idx >= len(shop.categories):
                continue
            rate = round_cents(shop.categories[idx].hrly_rate)
            if rate > 0:
                rates.append(rate)
        totals[category_key(idx)] = format_fixed(sum(rates) / len(rates)) if rates else ZERO_TOTAL
    return totals
