"""Intent types for booking conversation classification."""

from enum import Enum


class BookingType(str, Enum):
    """What the user wants to book."""

    FLIGHT = "FLIGHT"
    HOTEL = "HOTEL"
    CAR = "CAR"


class SourceSystem(str, Enum):
    """Backend booking platform the procedure runs against."""

    AMADEUS = "AMADEUS"
    FARELOGIX = "FARELOGIX"


class FlightType(str, Enum):
    """Flight itinerary shape."""

    ONE_WAY = "ONE_WAY"
    ROUND_TRIP = "ROUND_TRIP"


class Directive(str, Enum):
    """Navigation commands understood inside a guided flow."""

    NEXT = "next"          # done / next / complete / finish
    BACK = "back"          # back / previous
    RESTART = "restart"    # restart / start over
