"""Tests for the booking workflow catalog."""

import pytest

from app.core.booking.workflows import (
    WORKFLOWS,
    DatedWorkflow,
    FixedWorkflow,
    format_travel_dates,
    get_steps,
)
from app.core.intelligence.intent.types import BookingType, SourceSystem


class TestCatalog:
    """Test catalog shape."""

    def test_every_combination_present(self):
        for booking_type in BookingType:
            for source in SourceSystem:
                assert source in WORKFLOWS[booking_type]

    def test_flights_are_dated(self):
        for source in SourceSystem:
            assert isinstance(WORKFLOWS[BookingType.FLIGHT][source], DatedWorkflow)

    @pytest.mark.parametrize("booking_type", [BookingType.HOTEL, BookingType.CAR])
    def test_hotels_and_cars_are_fixed(self, booking_type):
        for source in SourceSystem:
            assert isinstance(WORKFLOWS[booking_type][source], FixedWorkflow)

    @pytest.mark.parametrize(
        "booking_type,source,count",
        [
            (BookingType.FLIGHT, SourceSystem.AMADEUS, 8),
            (BookingType.FLIGHT, SourceSystem.FARELOGIX, 9),
            (BookingType.HOTEL, SourceSystem.AMADEUS, 5),
            (BookingType.HOTEL, SourceSystem.FARELOGIX, 5),
            (BookingType.CAR, SourceSystem.AMADEUS, 6),
            (BookingType.CAR, SourceSystem.FARELOGIX, 6),
        ],
    )
    def test_step_counts(self, booking_type, source, count):
        steps = get_steps(booking_type, source, "16/01/2026")
        assert len(steps) == count
        assert steps[0].startswith("Step 1:")
        assert steps[-1].startswith(f"Step {count}:")


class TestGetSteps:
    """Test lookup and date interpolation."""

    def test_flight_dates_substituted(self):
        steps = get_steps(BookingType.FLIGHT, SourceSystem.AMADEUS, "16/01/2026")
        assert steps[3] == "Step 4: Search for flights LON → FRA for 16/01/2026."

    def test_farelogix_flight_dates_substituted(self):
        steps = get_steps(BookingType.FLIGHT, SourceSystem.FARELOGIX, "16 JAN 2026")
        assert "FLX fares LON → FRA for 16 JAN 2026" in steps[3]

    def test_flight_without_dates(self):
        with pytest.raises(ValueError):
            get_steps(BookingType.FLIGHT, SourceSystem.AMADEUS)

    def test_fixed_ignores_dates(self):
        assert get_steps(BookingType.HOTEL, SourceSystem.AMADEUS, "16/01/2026") == get_steps(
            BookingType.HOTEL, SourceSystem.AMADEUS
        )

    def test_returns_copy(self):
        steps = get_steps(BookingType.CAR, SourceSystem.FARELOGIX)
        steps.clear()
        assert len(get_steps(BookingType.CAR, SourceSystem.FARELOGIX)) == 6

    def test_car_amadeus_details(self):
        step = get_steps(BookingType.CAR, SourceSystem.AMADEUS)[2]
        assert "Location: FRA" in step
        assert "Vendor: 1A" in step


class TestFormatTravelDates:
    """Test date descriptor building."""

    def test_one_way(self):
        assert format_travel_dates("16/01/2026") == "16/01/2026"

    def test_round_trip(self):
        assert format_travel_dates("16/01/2026", "20/01/2026") == "16/01/2026 – 20/01/2026"
