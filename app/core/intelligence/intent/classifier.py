"""
Keyword-based input classification.

Each classifier is an ordered rule list of (token, keywords). The first
rule with a keyword contained in the normalized message wins, so the list
order is the tie-break when several keywords match ("flight and hotel"
resolves to FLIGHT). No scoring, no NLU.
"""

from typing import Optional, Sequence, TypeVar

from .types import BookingType, Directive, FlightType, SourceSystem

T = TypeVar("T")

Rules = Sequence[tuple[T, tuple[str, ...]]]


BOOKING_TYPE_RULES: Rules[BookingType] = (
    (BookingType.FLIGHT, ("flight",)),
    (BookingType.HOTEL, ("hotel",)),
    (BookingType.CAR, ("car", "rental")),
)

SOURCE_RULES: Rules[SourceSystem] = (
    (SourceSystem.AMADEUS, ("amadeus",)),
    (SourceSystem.FARELOGIX, ("farelogix", "flx")),
)

FLIGHT_TYPE_RULES: Rules[FlightType] = (
    (FlightType.ONE_WAY, ("one",)),
    (FlightType.ROUND_TRIP, ("round", "return")),
)

DIRECTIVE_RULES: Rules[Directive] = (
    (Directive.NEXT, ("done", "next", "complete", "finish")),
    (Directive.BACK, ("back", "previous")),
    (Directive.RESTART, ("restart", "start over")),
)

START_KEYWORDS: tuple[str, ...] = ("yes", "book", "start")


def normalize_input(text: str) -> str:
    """Lower-case and trim a raw message."""
    return text.lower().strip()


def match_first(msg: str, rules: Rules[T]) -> Optional[T]:
    """Return the token of the first rule whose keywords occur in msg."""
    for token, keywords in rules:
        if any(keyword in msg for keyword in keywords):
            return token
    return None


def detect_booking_type(msg: str) -> Optional[BookingType]:
    return match_first(msg, BOOKING_TYPE_RULES)


def detect_source(msg: str) -> Optional[SourceSystem]:
    return match_first(msg, SOURCE_RULES)


def detect_flight_type(msg: str) -> Optional[FlightType]:
    return match_first(msg, FLIGHT_TYPE_RULES)


def detect_directive(msg: str) -> Optional[Directive]:
    return match_first(msg, DIRECTIVE_RULES)


def wants_to_start(msg: str) -> bool:
    """Check whether the user agreed to start a booking."""
    return any(keyword in msg for keyword in START_KEYWORDS)
