"""Booking dialogue state machine."""

from enum import Enum
from typing import Set


class Phase(str, Enum):
    """Phases of a booking conversation."""

    # Initial
    GREETING = "GREETING"

    # Choosing what to book
    AWAITING_BOOKING_INTENT = "AWAITING_BOOKING_INTENT"
    AWAITING_BOOKING_TYPE = "AWAITING_BOOKING_TYPE"
    AWAITING_SOURCE = "AWAITING_SOURCE"

    # Flight details
    AWAITING_FLIGHT_TYPE = "AWAITING_FLIGHT_TYPE"
    AWAITING_DEPARTURE_DATE = "AWAITING_DEPARTURE_DATE"
    AWAITING_RETURN_DATE = "AWAITING_RETURN_DATE"

    # Step-by-step procedure
    GUIDED_FLOW = "GUIDED_FLOW"


# Valid phase transitions (staying in place is always allowed)
VALID_TRANSITIONS: dict[Phase, Set[Phase]] = {
    Phase.GREETING: {
        Phase.AWAITING_BOOKING_INTENT,
        Phase.AWAITING_SOURCE,
    },
    Phase.AWAITING_BOOKING_INTENT: {
        Phase.AWAITING_BOOKING_TYPE,
        Phase.AWAITING_SOURCE,
    },
    Phase.AWAITING_BOOKING_TYPE: {
        Phase.AWAITING_SOURCE,
    },
    Phase.AWAITING_SOURCE: {
        Phase.AWAITING_FLIGHT_TYPE,
        Phase.GUIDED_FLOW,
    },
    Phase.AWAITING_FLIGHT_TYPE: {
        Phase.AWAITING_DEPARTURE_DATE,
    },
    Phase.AWAITING_DEPARTURE_DATE: {
        Phase.AWAITING_RETURN_DATE,
        Phase.GUIDED_FLOW,
    },
    Phase.AWAITING_RETURN_DATE: {
        Phase.GUIDED_FLOW,
    },
    Phase.GUIDED_FLOW: {
        Phase.AWAITING_BOOKING_INTENT,  # Booking complete
        Phase.GREETING,  # Restart
    },
}


def can_transition(from_phase: Phase, to_phase: Phase) -> bool:
    """Check if a phase transition is valid."""
    return from_phase == to_phase or to_phase in VALID_TRANSITIONS.get(from_phase, set())

