"""Input classification module."""

from .types import BookingType, SourceSystem, FlightType, Directive
from .classifier import (
    normalize_input,
    match_first,
    detect_booking_type,
    detect_source,
    detect_flight_type,
    detect_directive,
    wants_to_start,
)

__all__ = [
    # Types
    "BookingType",
    "SourceSystem",
    "FlightType",
    "Directive",
    # Classifier
    "normalize_input",
    "match_first",
    "detect_booking_type",
    "detect_source",
    "detect_flight_type",
    "detect_directive",
    "wants_to_start",
]
