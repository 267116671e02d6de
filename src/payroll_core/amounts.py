"""Amount parsing and two-decimal display formatting.

Payment cells are read by their leading numeric prefix, so ``"50000.00 INR"``
is 50000 and ``"1,234"`` is 1 (commas are field separators in the export,
never thousands separators). Only ASCII digits count, so full-width or
Arabic-Indic digits are not a number. Anything without a numeric prefix
counts as 0.

Display values are rounded half-up on the exact binary value of the float,
to two decimals.

Examples:
    >>> parse_number("50000abc")
    50000.0
    >>> parse_number("N/A")
    0.0
    >>> format_fixed(208.333333)
    '208.33'
    >>> format_amount(1234567.891)
    '1,234,567.89'
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

import numpy as np
import pandas as pd

NUMBER_PREFIX_PATTERN = r"^\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
_NUMBER_PREFIX_RE = re.compile(NUMBER_PREFIX_PATTERN)

# Wide enough to quantize any finite float to cents without InvalidOperation
_DECIMAL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)
_CENTS = Decimal("0.01")


def parse_number(value: Any) -> float:
    """Parse the leading number of a cell, returning 0.0 when there is none.

    Negative and non-finite results are treated as 0.0.

    Examples:
        >>> parse_number(" 42.5 ")
        42.5
        >>> parse_number("-10")
        0.0
        >>> parse_number(None)
        0.0
    """
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return 0.0
    match = _NUMBER_PREFIX_RE.match(str(value))
    if match is None:
        return 0.0
    number = float(match.group(1))
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def parse_amounts(values: pd.Series) -> pd.Series:
    """Vectorised :func:`parse_number` for a Series of cell strings."""
    if values.empty:
        return pd.Series(0.0, index=values.index, dtype=float)
    prefixes = values.astype(object).where(values.notna(), "").astype(str)
    extracted = prefixes.str.extract(NUMBER_PREFIX_PATTERN, expand=False)
    amounts = pd.to_numeric(extracted, errors="coerce").astype(float)
    amounts = amounts.replace([np.inf, -np.inf], np.nan).fillna(0.0)
    return amounts.clip(lower=0.0)


def _to_cents(value: float) -> Decimal:
    return Decimal(value).quantize(_CENTS, context=_DECIMAL_CONTEXT)


def format_fixed(value: float) -> str:
    """Format a number with exactly two decimals and no grouping."""
    return f"{_to_cents(value):f}"


def format_amount(value: float) -> str:
    """Format a number with two decimals and comma thousands separators."""
    return f"{_to_cents(value):,f}"


def round_cents(value: float) -> float:
    """Round to the two-decimal value shown in reports."""
    return float(_to_cents(value))
