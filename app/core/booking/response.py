"""
Response Generator for the Travel Booking Assistant.

Scripted template replies for every dialogue branch, plus an LLM-backed
free-form reply for messages the booking flow does not recognise.
"""

import logging
from typing import Optional

from app.config import settings
from app.infra.claude import get_claude_client, ClaudeClient
from app.core.intelligence.intent.types import BookingType, FlightType, SourceSystem

logger = logging.getLogger(__name__)


FREEFORM_SYSTEM_PROMPT = (
    "You are a helpful multilingual travel booking assistant. You help users "
    "book flights, hotels, and cars through either Amadeus or Farelogix systems. "
    "Be friendly, concise, and professional. If users ask about booking, guide "
    "them to start the booking process."
)

FREEFORM_FALLBACK = (
    "I'm here to help you book travel. Would you like to book a flight, hotel, or car?"
)

STEP_HINT = "(Reply 'done' or 'next' when completed)"

BOOKING_MENU = "• Flight ✈️\n• Hotel 🏨\n• Car 🚗"
SOURCE_MENU = "• Amadeus\n• Farelogix"
FLIGHT_TYPE_MENU = "• One way\n• Round trip"

DATE_FORMATS = (
    "• DD/MM/YYYY (e.g., {day}/01/2026)\n"
    "• DD MON YYYY (e.g., {day} JAN 2026)\n"
    "• YYYY-MM-DD (e.g., 2026-01-{day})"
)


class ResponseGenerator:
    """
    Template replies with an LLM fallback for free-form chat.

    Templates cover every scripted branch of the booking flow; Claude is
    only called through freeform_reply(), which never raises.
    """

    def __init__(self, claude_client: Optional[ClaudeClient] = None):
        """Initialize generator.

        Args:
            claude_client: Claude client (uses singleton if not provided)
        """
        self._claude_client = claude_client

    async def _get_client(self) -> ClaudeClient:
        """Get Claude client."""
        if self._claude_client is None:
            self._claude_client = await get_claude_client()
        return self._claude_client

    async def freeform_reply(self, message: str, history: list[dict]) -> str:
        """Answer a message the booking flow did not recognise.

        Args:
            message: Current user message
            history: Earlier conversation entries ({"role", "content"}),
                oldest first, not including the current message

        Returns:
            Generated reply, or a canned prompt if generation fails
        """
        try:
            client = await self._get_client()
            response = await client.generate(
                messages=self._build_messages(message, history),
                system_prompt=FREEFORM_SYSTEM_PROMPT,
                max_tokens=settings.freeform_max_tokens,
                temperature=settings.freeform_temperature,
            )
            return response.content.strip() or FREEFORM_FALLBACK

        except Exception as e:
            logger.warning(f"Free-form reply generation failed: {e}")
            return FREEFORM_FALLBACK

    def _build_messages(self, message: str, history: list[dict]) -> list[dict]:
        """Recent history plus the current message, opening on a user turn."""
        limit = settings.freeform_history_limit
        recent = [
            {"role": m["role"], "content": m["content"]}
            for m in (history[-limit:] if limit > 0 else [])
        ]
        while recent and recent[0]["role"] != "user":
            recent.pop(0)
        recent.append({"role": "user", "content": message})
        return recent

    # === Greeting ===

    def welcome(self) -> str:
        """First reply of a conversation."""
        return (
            "Hello! 👋 Welcome to the Travel Booking Assistant.\n\n"
            "I can help you book:\n• ✈️ Flights\n• 🏨 Hotels\n• 🚗 Cars\n\n"
            "Would you like to start a booking?"
        )

    def welcome_with_source(self, booking_type: BookingType) -> str:
        """First reply when the opening message already names a booking type."""
        return (
            "Hello! 👋 Welcome to the Travel Booking Assistant.\n\n"
            f"{self.ask_source(booking_type)}"
        )

    def restarted(self) -> str:
        """Reply after the user restarts a guided flow."""
        return (
            "Booking restarted. Hello! 👋 Welcome to the Travel Booking Assistant.\n\n"
            "Would you like to start a new booking?"
        )

    # === Choosing what to book ===

    def ask_booking_type(self) -> str:
        return f"Perfect! What would you like to book?\n{BOOKING_MENU}"

    def booking_type_not_understood(self) -> str:
        return f"I didn't catch that. Please choose one of the following:\n{BOOKING_MENU}"

    def ask_source(self, booking_type: BookingType) -> str:
        return (
            f"Great! Let's book a {booking_type.value.lower()}.\n\n"
            f"Which source system would you like to use?\n{SOURCE_MENU}"
        )

    def source_not_understood(self) -> str:
        return f"Please select a valid source system:\n{SOURCE_MENU}"

    # === Flight details ===

    def ask_flight_type(self) -> str:
        return f"What type of flight would you like to book?\n{FLIGHT_TYPE_MENU}"

    def flight_type_not_understood(self) -> str:
        return f"Please choose a flight type:\n{FLIGHT_TYPE_MENU}"

    def ask_departure_date(self, flight_type: FlightType) -> str:
        if flight_type == FlightType.ROUND_TRIP:
            return (
                "When would you like to depart?\n\n"
                "Please provide the departure date (e.g., 16/01/2026 or 16 JAN 2026)"
            )
        return (
            "When would you like to travel?\n\n"
            "Please provide the travel date (e.g., 16/01/2026 or 16 JAN 2026)"
        )

    def ask_return_date(self) -> str:
        return (
            "Great! When would you like to return?\n\n"
            "Please provide the return date (e.g., 20/01/2026 or 20 JAN 2026)"
        )

    def invalid_date_format(self, example_day: str = "16") -> str:
        """Reply for input that is not a recognised date shape."""
        formats = DATE_FORMATS.format(day=example_day)
        return f"❌ Invalid date format. Please use one of these formats:\n{formats}"

    def invalid_calendar_date(self, example_day: str = "16") -> str:
        """Reply for a well-formed date that does not exist."""
        return (
            "❌ Invalid date! This date does not exist in the calendar. "
            "Please provide a valid date.\n\n"
            f"(e.g., {example_day}/01/2026 or {example_day} JAN 2026)"
        )

    def return_before_departure(self, departure_date: str) -> str:
        """Reply for a return date not strictly after departure."""
        return (
            "❌ Invalid date! The return date must be after the departure date "
            f"({departure_date}).\n\nPlease provide a valid return date."
        )

    # === Guided flow ===

    def flow_started(self, booking_type: BookingType, source: SourceSystem, first_step: str) -> str:
        """Opening reply of a hotel or car procedure."""
        return (
            f"Perfect! I'll guide you through the {booking_type.value.lower()} booking "
            f"process using {source.value}.\n\n{first_step}\n\n{STEP_HINT}"
        )

    def flight_flow_started(
        self,
        flight_type: FlightType,
        source: SourceSystem,
        travel_dates: str,
        first_step: str,
    ) -> str:
        """Opening reply of a flight procedure."""
        trip = "round trip" if flight_type == FlightType.ROUND_TRIP else "one-way"
        return (
            f"Perfect! Let's book a {trip} flight using {source.value} for {travel_dates}.\n\n"
            f"{first_step}\n\n{STEP_HINT}"
        )

    def step(self, text: str) -> str:
        return f"{text}\n\n{STEP_HINT}"

    def step_back(self, text: str) -> str:
        return f"Going back...\n\n{text}\n\n{STEP_HINT}"

    def first_step(self, text: str) -> str:
        return f"You're at the first step.\n\n{text}\n\n{STEP_HINT}"

    def current_step(self, text: str) -> str:
        return (
            f"Current step:\n{text}\n\n"
            "Reply 'done' or 'next' to continue, 'back' to go to the previous step, "
            "or 'restart' to start over."
        )

    def booking_complete(self, booking_type: BookingType) -> str:
        return (
            f"🎉 Congratulations! Your {booking_type.value.lower()} booking is complete!\n\n"
            "Would you like to make another booking?"
        )


# Singleton
_generator: Optional[ResponseGenerator] = None


def get_response_generator() -> ResponseGenerator:
    """Get singleton ResponseGenerator."""
    global _generator
    if _generator is None:
        _generator = ResponseGenerator()
    return _generator
