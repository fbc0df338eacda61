"""
Booking workflow catalog.

Ordered, human-readable procedures per (booking type, source system).
Hotel and car procedures are fixed text; flight procedures embed the
travel date(s) in their search step.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from app.core.intelligence.intent.types import BookingType, SourceSystem

DATE_RANGE_SEPARATOR = " – "


@dataclass(frozen=True)
class FixedWorkflow:
    """Workflow whose steps never change."""

    steps: tuple[str, ...]

    def steps_for(self, date_descriptor: Optional[str] = None) -> list[str]:
        return list(self.steps)


@dataclass(frozen=True)
class DatedWorkflow:
    """Workflow built from a date descriptor ("D" or "D – R")."""

    build: Callable[[str], list[str]]

    def steps_for(self, date_descriptor: Optional[str] = None) -> list[str]:
        if not date_descriptor:
            raise ValueError("Flight workflows need a travel date")
        return self.build(date_descriptor)


Workflow = Union[FixedWorkflow, DatedWorkflow]


def _amadeus_flight(dates: str) -> list[str]:
    return [
        "Step 1: Add 1 ADT traveler (e.g., Amadeus profile).",
        "Step 2: Open the 'Flight search' dialog.",
        "Step 3: Select the 'Round Trip' tab.",
        f"Step 4: Search for flights LON → FRA for {dates}.",
        "Step 5: Select a fare for each segment.",
        "Step 6: Pick the fare to cart.",
        "Step 7: Add necessary data and select INVOICE as FOP.",
        "Step 8: Book the cart.",
    ]


def _farelogix_flight(dates: str) -> list[str]:
    return [
        "Step 1: Add 1 ADT traveler (e.g., Farelogix profile).",
        "Step 2: Open the 'Flight search' dialog.",
        "Step 3: Select the 'Round Trip' tab.",
        f"Step 4: Search for FLX fares LON → FRA for {dates} using FareByTime or FareByPrice.",
        "Step 5: Select a fare for each segment.",
        "Step 6: Select one fare.",
        "Step 7: Pick to cart.",
        "Step 8: Add necessary data and select INVOICE as FOP.",
        "Step 9: Book the cart.",
    ]


WORKFLOWS: dict[BookingType, dict[SourceSystem, Workflow]] = {
    BookingType.FLIGHT: {
        SourceSystem.AMADEUS: DatedWorkflow(_amadeus_flight),
        SourceSystem.FARELOGIX: DatedWorkflow(_farelogix_flight),
    },
    BookingType.HOTEL: {
        SourceSystem.AMADEUS: FixedWorkflow((
            "Step 1: Add traveler (e.g., Nelke).",
            "Step 2: Search for hotel using LHR +100. Source: Amadeus.",
            "Step 3: Pick a hotel room and add it to the cart.",
            "Step 4: Add deposit credit card.",
            "Step 5: Book the hotel.",
        )),
        SourceSystem.FARELOGIX: FixedWorkflow((
            "Step 1: Add traveler profile.",
            "Step 2: Search for hotel using your preferred location.",
            "Step 3: Pick a hotel room and add it to the cart.",
            "Step 4: Add deposit credit card.",
            "Step 5: Book the hotel.",
        )),
    },
    BookingType.CAR: {
        SourceSystem.AMADEUS: FixedWorkflow((
            "Step 1: Add a passenger profile (Amadeus).",
            "Step 2: Open the car search dialog.",
            "Step 3: Search for cars with the following details:\n"
            "   • Location: FRA\n"
            "   • Vendor: 1A\n"
            "   • Pickup: +30 days at 08:00 AM\n"
            "   • Dropoff: 09:00 AM",
            "Step 4: Pick a car and add it to the cart.",
            "Step 5: Add all necessary booking data.",
            "Step 6: Click on 'Book cart' button.",
        )),
        SourceSystem.FARELOGIX: FixedWorkflow((
            "Step 1: Add a passenger profile.",
            "Step 2: Open the car search dialog.",
            "Step 3: Search for cars with your preferred details.",
            "Step 4: Pick a car and add it to the cart.",
            "Step 5: Add all necessary booking data.",
            "Step 6: Click on 'Book cart' button.",
        )),
    },
}


def format_travel_dates(departure_date: str, return_date: Optional[str] = None) -> str:
    """Build the date text shown in flight steps."""
    if return_date:
        return f"{departure_date}{DATE_RANGE_SEPARATOR}{return_date}"
    return departure_date


def get_steps(
    booking_type: BookingType,
    source: SourceSystem,
    date_descriptor: Optional[str] = None,
) -> list[str]:
    """Look up the ordered steps for a booking.

    Args:
        booking_type: Flight, hotel or car
        source: Amadeus or Farelogix
        date_descriptor: Travel date(s), required for flights

    Returns:
        Ordered step texts

    Raises:
        ValueError: If a flight workflow is requested without dates
    """
    return WORKFLOWS[booking_type][source].steps_for(date_descriptor)
