"""Travel date parsing and validation module."""

from .parser import (
    DateValidationError,
    InvalidDateFormatError,
    InvalidCalendarDateError,
    parse_date,
    convert_to_date,
    is_return_date_valid,
)

__all__ = [
    # Errors
    "DateValidationError",
    "InvalidDateFormatError",
    "InvalidCalendarDateError",
    # Parsing / validation
    "parse_date",
    "convert_to_date",
    "is_return_date_valid",
]
