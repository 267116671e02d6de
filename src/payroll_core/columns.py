"""Detect which CSV columns hold the pay group, designation and payment.

Each role has an ordered list of rules. The first rule that matches any
header wins, and within a rule the first matching header (in file order)
is chosen. When nothing matches, a fixed default name is returned even if
it is absent from the file; lookups against it then behave as missing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

EXACT = "exact"
CONTAINS = "contains"

PAY_GROUP_RULES: tuple[tuple[str, str], ...] = (
    (EXACT, "billunit"),
    (CONTAINS, "billunit"),
    (CONTAINS, "unit"),
)
DESIGNATION_RULES: tuple[tuple[str, str], ...] = (
    (EXACT, "desigshortdesc"),
    (CONTAINS, "desigshortdesc"),
    (CONTAINS, "desig"),
    (CONTAINS, "designation"),
)
PAYMENT_RULES: tuple[tuple[str, str], ...] = (
    (EXACT, "grosspay"),
    (CONTAINS, "grosspay"),
    (EXACT, "gross"),
    (CONTAINS, "gross"),
    (CONTAINS, "payment"),
    (EXACT, "basic"),
    (CONTAINS, "basic"),
)

DEFAULT_PAY_GROUP_COLUMN = "BILLUNIT"
DEFAULT_DESIGNATION_COLUMN = "DESIGSHORTDESC"
DEFAULT_PAYMENT_COLUMN = "GROSSPAY"


@dataclass(frozen=True)
class ColumnsFound:
    """Resolved header names for the three roles."""

    pay_group: str
    designation: str
    payment: str

    def to_dict(self) -> dict[str, str]:
        """Header names keyed by role, in camelCase."""
        return {
            "payGroup": self.pay_group,
            "designation": self.designation,
            "payment": self.payment,
        }


def _rule_matches(kind: str, token: str, header: str) -> bool:
    name = header.lower()
    if kind == EXACT:
        return name == token
    return token in name


def resolve_column(
    headers: Sequence[str],
    rules: Sequence[tuple[str, str]],
    default: str,
) -> str:
    """Pick the header for one role.

    Args:
        headers: Header names in file order.
        rules: Ordered (kind, token) pairs; kind is "exact" or "contains",
            token is lower-case.
        default: Name returned when no rule matches.

    Returns:
        The winning header name, or ``default``.

    Examples:
        >>> resolve_column(["Emp", "Gross Salary", "GROSSPAY"], PAYMENT_RULES, "GROSSPAY")
        'GROSSPAY'
        >>> resolve_column(["Emp"], PAYMENT_RULES, "GROSSPAY")
        'GROSSPAY'
    """
    for kind, token in rules:
        for header in headers:
            if _rule_matches(kind, token, header):
                logger.debug("Column %r matched rule %s:%s", header, kind, token)
                return header

    if default not in headers:
        logger.warning("No column matched; falling back to %r which is not in the file", default)
    return default


def resolve_columns(headers: Sequence[str]) -> ColumnsFound:
    """Resolve the pay group, designation and payment columns.

    Never raises. See the module docstring for the fallback behaviour.
    """
    return ColumnsFound(
        pay_group=resolve_column(headers, PAY_GROUP_RULES, DEFAULT_PAY_GROUP_COLUMN),
        designation=resolve_column(headers, DESIGNATION_RULES, DEFAULT_DESIGNATION_COLUMN),
        payment=resolve_column(headers, PAYMENT_RULES, DEFAULT_PAYMENT_COLUMN),
    )
