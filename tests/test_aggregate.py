"""Tests for per-shop, per-category aggregation."""

import pandas as pd
import pytest

from payroll_core.aggregate import CellResult, ShopResult, aggregate_shops
from payroll_core.catalog import CATEGORIES, HOURS_PER_MONTH
from payroll_core.columns import ColumnsFound, resolve_columns
from payroll_core.config import ReportOptions
from payroll_core.parsing import parse_payroll_text

STANDARD_COLUMNS = ColumnsFound(pay_group="BILLUNIT", designation="DESIGSHORTDESC", payment="GROSSPAY")


def _frame(text: str) -> pd.DataFrame:
    return parse_payroll_text(text).to_frame()


def _by_name(shops: list[ShopResult]) -> dict[str, ShopResult]:
    return {shop.shop_name: shop for shop in shops}


@pytest.fixture
def payroll_frame() -> pd.DataFrame:
    """Two shops with staff in several categories."""
    return _frame(
        "BILLUNIT,DESIGSHORTDESC,GROSSPAY\n"
        "0915101,SR. TECH,40000\n"
        "0915101,Sr.TINSMITH,50000\n"
        "0915101,MECHANIC-I,30000\n"
        "915103,HELPER,24000\n"
        "0915103,KHALASI HELPER,26000\n"
        "0915103,CLERK,99999\n"
        "0999999,SR. TECH,70000\n"
    )


def test_only_shops_with_staff_are_kept(payroll_frame: pd.DataFrame) -> None:
    """Shops are returned in catalog order and empty shops are dropped."""
    shops = aggregate_shops(payroll_frame, STANDARD_COLUMNS)

    assert [shop.shop_name for shop in shops] == ["MILLWRIGHT", "MACHINE"]


def test_cells_follow_category_order(payroll_frame: pd.DataFrame) -> None:
    """Every shop has one cell per category, in catalog order."""
    for shop in aggregate_shops(payroll_frame, STANDARD_COLUMNS):
        assert [cell.name for cell in shop.categories] == [c.name for c in CATEGORIES]
        assert [cell.code for cell in shop.categories] == [c.code for c in CATEGORIES]


def test_counts_and_derived_metrics(payroll_frame: pd.DataFrame) -> None:
    """Counts, payment sums, averages and hourly rates per cell."""
    shops = _by_name(aggregate_shops(payroll_frame, STANDARD_COLUMNS))

    cat1 = shops["MILLWRIGHT"].categories[0]
    assert cat1.no_of_staff == 2
    assert cat1.payment == 90000.0
    assert cat1.avg_pay == 45000.0
    assert cat1.hrly_rate_display == "187.50"

    cat2 = shops["MILLWRIGHT"].categories[1]
    assert (cat2.no_of_staff, cat2.payment_display, cat2.hrly_rate_display) == (1, "30,000.00", "125.00")

    cat4 = shops["MACHINE"].categories[3]
    assert cat4.no_of_staff == 2
    assert cat4.payment_display == "50,000.00"
    assert cat4.avg_pay_display == "25,000.00"
    assert cat4.hrly_rate_display == "104.17"


def test_empty_cells_have_zero_averages(payroll_frame: pd.DataFrame) -> None:
    """A cell without staff has zero average pay and hourly rate."""
    shops = _by_name(aggregate_shops(payroll_frame, STANDARD_COLUMNS))

    cell = shops["MACHINE"].categories[0]
    assert cell == CellResult("CATEGORY I", "4200", 0, 0.0, 0.0, 0.0)
    assert cell.to_dict() == {
        "name": "CATEGORY I",
        "code": "4200",
        "noOfStaff": 0,
        "payment": "0.00",
        "avgPay": "0.00",
        "hrlyRate": "0.00",
    }


def test_unparseable_payment_counts_staff_but_not_money() -> None:
    """N/A contributes a head but no payment."""
    frame = _frame("BILLUNIT,DESIGSHORTDESC,GROSSPAY\n0915101,SR. TECH,N/A\n0915101,SR. TECH,30000\n")

    cell = aggregate_shops(frame, STANDARD_COLUMNS)[0].categories[0]

    assert cell.no_of_staff == 2
    assert cell.payment == 30000.0
    assert cell.avg_pay == 15000.0


def test_missing_payment_column_counts_staff_with_zero_payment() -> None:
    frame = _frame("BILLUNIT,DESIGSHORTDESC\n0915101,SR. TECH\n")
    columns = resolve_columns(["BILLUNIT", "DESIGSHORTDESC"])

    cell = aggregate_shops(frame, columns)[0].categories[0]

    assert columns.payment == "GROSSPAY"
    assert (cell.no_of_staff, cell.payment, cell.hrly_rate) == (1, 0.0, 0.0)


def test_missing_pay_group_column_yields_no_shops() -> None:
    frame = _frame("EMPNO,DESIGSHORTDESC,GROSSPAY\n1,SR. TECH,50000\n")
    columns = resolve_columns(["EMPNO", "DESIGSHORTDESC", "GROSSPAY"])

    assert aggregate_shops(frame, columns) == []


def test_overlapping_designations_count_in_each_category() -> None:
    """TECH-II contains TECH-I and is contained in TECH-III, so it lands in II, III and IV."""
    frame = _frame("BILLUNIT,DESIGSHORTDESC,GROSSPAY\n0915104,TECH-II,36000\n")

    shop = aggregate_shops(frame, STANDARD_COLUMNS)[0]

    assert shop.shop_name == "COMPONENT"
    assert [cell.no_of_staff for cell in shop.categories] == [0, 1, 1, 1]


def test_strict_pay_group_drops_partial_codes() -> None:
    """Partial codes only match under the permissive default."""
    frame = _frame("BILLUNIT,DESIGSHORTDESC,GROSSPAY\n0915101-A,SR. TECH,50000\n")

    permissive = aggregate_shops(frame, STANDARD_COLUMNS)
    strict = aggregate_shops(frame, STANDARD_COLUMNS, ReportOptions(strict_pay_group=True))

    assert [shop.shop_name for shop in permissive] == ["MILLWRIGHT"]
    assert strict == []


@pytest.mark.parametrize(
    "text",
    [
        "BILLUNIT,DESIGSHORTDESC,GROSSPAY\n0915101,SR. TECH,50000\n",
        "BILLUNIT,DESIGSHORTDESC,GROSSPAY\n0915120,HELPER,-100\n0915120,HELPER,abc\n",
        "BILLUNIT,DESIGSHORTDESC,GROSSPAY\n0915109,TECH-III,12345.678\n0915115,FITTER-II,1\n",
        "BILLUNIT,DESIGSHORTDESC,GROSSPAY\n,SR. TECH,1000\n",
    ],
)
def test_cell_invariants(text: str) -> None:
    """Non-negative totals, zero averages without staff, rate = avg / 240."""
    for shop in aggregate_shops(_frame(text), STANDARD_COLUMNS):
        assert len(shop.categories) == len(CATEGORIES)
        assert shop.has_staff
        for cell in shop.categories:
            assert cell.no_of_staff >= 0
            assert cell.payment >= 0
            if cell.no_of_staff == 0:
                assert cell.avg_pay == 0
                assert cell.hrly_rate == 0
            assert cell.hrly_rate == pytest.approx(cell.avg_pay / HOURS_PER_MONTH)
