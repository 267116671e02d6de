"""Row classification rules for pay groups and designations.

Pay-group codes arrive with inconsistent zero padding and sometimes as
partial codes, so the default matcher is permissive: besides exact and
zero-padding equality it accepts a substring in either direction. Short
codes can therefore over-match; ``strict=True`` keeps only the equality
rules.

Examples:
    >>> pay_group_matches("915101", "0915101")
    True
    >>> pay_group_matches("0915101-A", "0915101")
    True
    >>> pay_group_matches("0915101-A", "0915101", strict=True)
    False
    >>> designation_matches("SR. TECH", ("SR. TECH", "STDMECH"))
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

import pandas as pd


def pay_group_matches(value: Optional[str], target: str, strict: bool = False) -> bool:
    """Return True if a row's pay group belongs to ``target``.

    Args:
        value: Trimmed pay group from the row, or None when the column is missing.
        target: Canonical shop code (e.g. "0915101").
        strict: Only accept exact and single-leading-zero matches.

    Returns:
        Whether the row matches. Missing values never match.
    """
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return False
    value = str(value).strip()

    if value == target:
        return True
    if value == (target[1:] if target.startswith("0") else target):
        return True
    if value == "0" + target:
        return True
    if strict:
        return False
    return target in value or value in target


def designation_matches(value: Optional[str], designations: Iterable[str]) -> bool:
    """Return True if ``value`` and any designation contain one another.

    Comparison is case-sensitive. Empty or missing values never match.
    """
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return False
    value = str(value).strip()
    if not value:
        return False
    return any(value in designation or designation in value for designation in designations)


def pay_group_mask(values: pd.Series, target: str, strict: bool = False) -> pd.Series:
    """Vectorised :func:`pay_group_matches` over a Series of row values."""
    return values.map(lambda v: pay_group_matches(v, target, strict=strict)).astype(bool)


def designation_mask(values: pd.Series, designations: Iterable[str]) -> pd.Series:
    """Vectorised :func:`designation_matches` over a Series of row values."""
    designations = tuple(designations)
    return values.map(lambda v: designation_matches(v, designations)).astype(bool)
