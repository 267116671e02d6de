"""CSV parsing for payroll exports.

Payroll exports are parsed with a deliberately simple grammar: lines are
split on commas with no support for quoted delimiters. A value containing a
literal comma shifts every following field of that line. Surrounding quotes
are stripped one character at a time from each end.

Examples:
    >>> table = parse_payroll_text('"BILLUNIT",DESIGSHORTDESC\\n0915101,SR. TECH\\n')
    >>> table.headers
    ['BILLUNIT', 'DESIGSHORTDESC']
    >>> table.rows
    [{'BILLUNIT': '0915101', 'DESIGSHORTDESC': 'SR. TECH'}]
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

import pandas as pd

from payroll_core.exceptions import EmptyInputError, MissingFileError

logger = logging.getLogger(__name__)

# One quote character at the start and/or one at the end of a field
_EDGE_QUOTE_RE = re.compile(r"^[\"']|[\"']$")


@dataclass
class PayrollTable:
    """Parsed payroll CSV.

    Attributes:
        headers: Header names in file order (duplicates preserved).
        rows: One mapping per data line, keyed by header name.
    """

    headers: list[str]
    rows: list[dict[str, str]] = field(default_factory=list)

    def to_frame(self) -> pd.DataFrame:
        """Return the rows as a DataFrame of strings.

        Columns follow first-seen header order; a duplicated header holds the
        value from its last position, as in ``rows``.
        """
        columns = list(dict.fromkeys(self.headers))
        if not self.rows:
            return pd.DataFrame(columns=columns, dtype=object)
        return pd.DataFrame.from_records(self.rows, columns=columns).astype(object)


def clean_field(value: str) -> str:
    """Trim a raw field and strip one layer of surrounding quotes.

    Examples:
        >>> clean_field('  "GROSSPAY" ')
        'GROSSPAY'
        >>> clean_field("'SR. TECH")
        'SR. TECH'
    """
    return _EDGE_QUOTE_RE.sub("", value.strip())


def split_line(line: str) -> list[str]:
    """Split a CSV line on commas and clean every field."""
    return [clean_field(part) for part in line.split(",")]


def parse_payroll_text(raw_text: str | None) -> PayrollTable:
    """Parse raw payroll CSV text into headers and rows.

    Args:
        raw_text: Full file content. The first non-blank line is the header.

    Returns:
        PayrollTable with one row per non-blank data line. Short lines are
        padded with empty strings; fields beyond the header count are dropped.

    Raises:
        MissingFileError: If ``raw_text`` is None.
        EmptyInputError: If fewer than two non-blank lines are present.
    """
    if raw_text is None:
        raise MissingFileError()

    lines = [line for line in raw_text.split("\n") if line.strip()]
    if len(lines) < 2:
        raise EmptyInputError()

    headers = split_line(lines[0])
    rows: list[dict[str, str]] = []
    for line in lines[1:]:
        values = split_line(line)
        row: dict[str, str] = {}
        for idx, header in enumerate(headers):
            row[header] = values[idx] if idx < len(values) else ""
        rows.append(row)

    logger.debug("Parsed %d header(s) and %d data row(s)", len(headers), len(rows))
    return PayrollTable(headers=headers, rows=rows)
