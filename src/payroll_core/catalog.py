"""Fixed shop and staff-category catalogs.

The shop table maps each workshop to the pay-group (bill unit) code used in
payroll exports; the category table groups designations into the four pay
categories reported side by side. Both are read-only module constants.

Examples:
    >>> from payroll_core.catalog import CATEGORIES, SHOPS
    >>> SHOPS[0].pay_group_numeric
    '0915101'
    >>> [c.name for c in CATEGORIES]
    ['CATEGORY I', 'CATEGORY II', 'CATEGORY III', 'CATEGORY IV']
"""

from __future__ import annotations

from dataclasses import dataclass

# Standard monthly working hours used to derive the hourly rate
HOURS_PER_MONTH = 240


@dataclass(frozen=True)
class ShopConfig:
    """A workshop and its pay-group code.

    Attributes:
        shop_name: Display label.
        pay_group: Display pay group; may join several raw codes with "&".
        pay_group_numeric: Canonical zero-padded code used for matching.
    """

    shop_name: str
    pay_group: str
    pay_group_numeric: str


@dataclass(frozen=True)
class CategoryConfig:
    """A staff category and the designations that belong to it."""

    name: str
    code: str
    designations: tuple[str, ...]


SHOPS: tuple[ShopConfig, ...] = (
    ShopConfig("MILLWRIGHT", "915101", "0915101"),
    ShopConfig("MACHINE", "915103", "0915103"),
    ShopConfig("COMPONENT", "915104", "0915104"),
    ShopConfig("SMITHY", "915105", "0915105"),
    ShopConfig("WELDING", "915107", "0915107"),
    ShopConfig("TOOL ROOM", "915108", "0915108"),
    ShopConfig("CARRIAGE", "915109&11", "0915109"),
    ShopConfig("WTS (tinsmith)", "915112", "0915112"),
    ShopConfig("CORROSION", "915113", "0915113"),
    ShopConfig("C&B & UF", "915115&16", "0915115"),
    ShopConfig("Power car", "915117", "0915117"),
    ShopConfig("TRIMMING", "915119", "0915119"),
    ShopConfig("PAINT", "915120&21", "0915120"),
)

# Order is significant: it fixes the output column order and the
# category1..category4 keys of the totals.
CATEGORIES: tuple[CategoryConfig, ...] = (
    CategoryConfig(
        "CATEGORY I",
        "4200",
        (
            "SR. TECH",
            "Sr.TECH(FITTER)",
            "Sr.MACHINE OPTR.",
            "STDMECH",
            "SR.TECH(WELD)",
            "SR.TECH(MECH)",
            "Sr.TINSMITH",
            "Sr.TECH.(POWER)",
            "Sr.TECH(PAINTER)",
        ),
    ),
    CategoryConfig("CATEGORY II", "2800", ("TECH-I", "FITTER-I", "MECHANIC-I")),
    CategoryConfig("CATEGORY III", "2400", ("TECH-II", "FITTER-II")),
    CategoryConfig(
        "CATEGORY IV",
        "2000 & 1900/1800",
        ("TECH-III", "ASST(WS)", "B.PEON", "HELPER", "KHALASI HELPER", "FITTER-III"),
    ),
)


def category_key(index: int) -> str:
    """Return the totals key for a zero-based category position.

    Examples:
        >>> category_key(0)
        'category1'
    """
    return f"category{index + 1}"
