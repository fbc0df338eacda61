"""
Intelligence Layer Module

Provides keyword classification, travel date parsing and session
management for the booking assistant.

Usage:
    from app.core.intelligence import (
        detect_booking_type,
        parse_date,
        SessionStore,
    )

    # Classify a normalized message
    detect_booking_type("i need a hotel")  # BookingType.HOTEL

    # Parse a travel date
    parse_date("2026-01-16")  # "16/01/2026"

    # Session management
    store = SessionStore()
    session = store.get("default")
"""

# Input Classification
from app.core.intelligence.intent.types import (
    BookingType,
    SourceSystem,
    FlightType,
    Directive,
)
from app.core.intelligence.intent.classifier import (
    normalize_input,
    detect_booking_type,
    detect_source,
    detect_flight_type,
    detect_directive,
    wants_to_start,
)

# Date Parsing
from app.core.intelligence.dates.parser import (
    DateValidationError,
    InvalidDateFormatError,
    InvalidCalendarDateError,
    parse_date,
    convert_to_date,
    is_return_date_valid,
)

# Session Management
from app.core.intelligence.session.state import Phase, can_transition
from app.core.intelligence.session.models import Session
from app.core.intelligence.session.manager import SessionStore

__all__ = [
    # Intent
    "BookingType",
    "SourceSystem",
    "FlightType",
    "Directive",
    "normalize_input",
    "detect_booking_type",
    "detect_source",
    "detect_flight_type",
    "detect_directive",
    "wants_to_start",
    # Dates
    "DateValidationError",
    "InvalidDateFormatError",
    "InvalidCalendarDateError",
    "parse_date",
    "convert_to_date",
    "is_return_date_valid",
    # Session
    "Phase",
    "can_transition",
    "Session",
    "SessionStore",
]
