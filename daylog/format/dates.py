from __future__ import annotations

import re
from typing import Literal, Optional, Union

DayPad = Literal[1, 2, 3]

DateFormat = Literal[
    "yyyymmdd",
    "yymmdd",
    "ddmmyyyy",
    "ddmmyy",
    "mmddyyyy",
    "mmddyy",
    "yyyy-mm-dd",
    "yy-mm-dd",
    "dd-mm-yyyy",
    "dd-mm-yy",
    "mm-dd-yyyy",
    "mm-dd-yy",
    "yyyy/mm/dd",
    "yy/mm/dd",
    "dd/mm/yyyy",
    "dd/mm/yy",
    "mm/dd/yyyy",
    "mm/dd/yy",
]

_DATE_TOKENS = re.compile(r"yyyy|yy|mm|dd")
RANGE_SEPARATOR = " - "


def pad_day(day: Union[int, str], pad: Optional[DayPad] = None) -> str:
    return str(day).strip().rjust(pad or 1, "0")


def format_day(day: Union[int, str], pad: Optional[DayPad] = None) -> str:
    """Format a day number, or a ``"first - last"`` range, with zero padding."""
    if isinstance(day, str) and "-" in day:
        start, end = (part.strip() for part in day.split("-", 1))
        if start == end:
            return pad_day(start, pad)
        return f"{pad_day(start, pad)}{RANGE_SEPARATOR}{pad_day(end, pad)}"
    return pad_day(day, pad)


def _format_single_date(date_iso: str, fmt: Optional[DateFormat]) -> str:
    if not fmt:
        return date_iso
    yyyy, mm, dd = date_iso.split("-")[:3]
    values = {"yyyy": yyyy, "yy": yyyy[2:], "mm": mm, "dd": dd}
    return _DATE_TOKENS.sub(lambda match: values[match.group(0)], fmt)


def format_date(date_iso: str, fmt: Optional[DateFormat] = None) -> str:
    """Reformat an ISO ``YYYY-MM-DD`` date (or a date range) using tokens.

    Args:
        date_iso: The ISO date, or ``"first - last"`` for merged logs.
        fmt: A pattern built from ``yyyy``, ``yy``, ``mm`` and ``dd``.

    Returns:
        The formatted date; unchanged when no format is given.
    """
    if RANGE_SEPARATOR in date_iso:
        start, end = (part.strip() for part in date_iso.split(RANGE_SEPARATOR, 1))
        if start == end:
            return _format_single_date(start, fmt)
        return f"{_format_single_date(start, fmt)}{RANGE_SEPARATOR}{_format_single_date(end, fmt)}"
    return _format_single_date(date_iso, fmt)


__all__ = ["DayPad", "DateFormat", "RANGE_SEPARATOR", "pad_day", "format_day", "format_date"]
