"""
Travel date parsing and validation.

Two separate stages, so the assistant can tell the user *why* a date was
rejected:

1. parse_date() - syntactic. Rewrites the accepted shapes into a
   canonical string (DD/MM/YYYY or D MON YYYY). No calendar checks.
2. convert_to_date() - semantic. Turns a canonical string into a
   datetime.date, failing with InvalidCalendarDateError for days that
   do not exist (31/02/2026, 29 FEB 2025).
"""

import re
from datetime import date, datetime
from typing import Optional

MONTHS = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4,
    "MAY": 5, "JUN": 6, "JUL": 7, "AUG": 8,
    "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

_MONTH_ALT = "|".join(MONTHS)

NUMERIC_DMY = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$", re.ASCII)
NUMERIC_ISO = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)
# 16 JAN, 16-JAN-2026, 16/JAN 2026 ...
MONTH_NAME_INPUT = re.compile(
    rf"^(\d{{1,2}})[\s/-]({_MONTH_ALT})(?:[\s/-](\d{{4}}))?$",
    re.ASCII,
)
MONTH_NAME_CANONICAL = re.compile(
    rf"^(\d{{1,2}})\s({_MONTH_ALT})\s(\d{{4}})$", re.ASCII
)


class DateValidationError(ValueError):
    """Base class for rejected travel dates."""
    pass


class InvalidDateFormatError(DateValidationError):
    """The string is not in a recognised date shape."""
    pass


class InvalidCalendarDateError(DateValidationError):
    """The string is well-formed but names a day that does not exist."""
    pass


def parse_date(text: str) -> Optional[str]:
    """Normalize a user-typed date into its canonical string.

    Accepted shapes:
        DD/MM/YYYY   -> DD/MM/YYYY (unchanged)
        YYYY-MM-DD   -> DD/MM/YYYY
        DD MON[ YYYY], DD-MON[-YYYY] -> D MON YYYY

    A missing year in the month-name shapes is filled with the current
    year.

    Args:
        text: Raw user input

    Returns:
        Canonical date string, or None if no shape matches
    """
    normalized = text.strip().upper()

    if NUMERIC_DMY.match(normalized):
        return normalized

    match = NUMERIC_ISO.match(normalized)
    if match:
        year, month, day = match.groups()
        return f"{day}/{month}/{year}"

    match = MONTH_NAME_INPUT.match(normalized)
    if match:
        day, month, year = match.groups()
        year = year or str(datetime.now().year)
        return f"{day} {month} {year}"

    return None


def _components(date_str: str) -> tuple[int, int, int]:
    """Extract (year, month, day) from a canonical date string."""
    match = NUMERIC_DMY.match(date_str)
    if match:
        day, month, year = match.groups()
        return int(year), int(month), int(day)

    match = NUMERIC_ISO.match(date_str)
    if match:
        year, month, day = match.groups()
        return int(year), int(month), int(day)

    match = MONTH_NAME_CANONICAL.match(date_str)
    if match:
        day, month, year = match.groups()
        return int(year), MONTHS[month], int(day)

    raise InvalidDateFormatError(f"Invalid date format: {date_str!r}")


def convert_to_date(date_str: str) -> date:
    """Turn a canonical date string into a calendar date.

    Args:
        date_str: Output of parse_date() (or an ISO date)

    Returns:
        The calendar date

    Raises:
        InvalidDateFormatError: If the string is not a canonical shape
        InvalidCalendarDateError: If the day does not exist in the calendar
    """
    year, month, day = _components(date_str)

    try:
        result = date(year, month, day)
    except ValueError as e:
        raise InvalidCalendarDateError(
            f"Invalid date - {date_str} does not exist in calendar"
        ) from e

    # Constructed date must carry exactly the requested components
    if (result.year, result.month, result.day) != (year, month, day):
        raise InvalidCalendarDateError(
            f"Invalid date - {date_str} does not exist in calendar"
        )

    return result


def is_return_date_valid(departure_date: Optional[str], return_date: Optional[str]) -> bool:
    """Check that a return date is a real day strictly after departure.

    Never raises: any validation failure on either side yields False.
    """
    if not departure_date or not return_date:
        return False
    try:
        return convert_to_date(return_date) > convert_to_date(departure_date)
    except DateValidationError:
        return False
