"""Claim date helpers.

Claim dates have been stored in two shapes over time: ISO ``YYYY-MM-DD``
(older builds) and the Australian display form ``DD/MM/YYYY``. Everything
that sorts or shows a date goes through these helpers.
"""

import re
from typing import Optional

ISO_DATE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})\Z", re.ASCII)
AU_DATE = re.compile(r"^([0-9]{2})/([0-9]{2})/([0-9]{4})\Z", re.ASCII)
NON_DIGITS = re.compile(r"[^0-9]")


def date_key(raw: Optional[str]) -> str:
    """Turn a stored date into a sortable ``YYYYMMDD`` key.

    Unknown formats fall back to their digits only, which is best effort and
    not guaranteed to sort chronologically.
    """
    if not raw:
        return ""
    if match := ISO_DATE.match(raw):
        year, month, day = match.groups()
        return f"{year}{month}{day}"
    if match := AU_DATE.match(raw):
        day, month, year = match.groups()
        return f"{year}{month}{day}"
    return NON_DIGITS.sub("", str(raw))


def display_date(raw: Optional[str]) -> str:
    """Format a stored date for display, converting ISO to ``DD/MM/YYYY``."""
    if not raw:
        return ""
    if match := ISO_DATE.match(raw):
        year, month, day = match.groups()
        return f"{day}/{month}/{year}"
    return raw
