"""
Booking Dialogue Controller.

Phase-driven state machine that walks a user from "what do you want to
book?" to the last step of a scripted booking procedure. Each phase has
one handler; a handler reads the message, mutates the session and
returns the reply text.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from app.core.intelligence.intent.classifier import (
    normalize_input,
    detect_booking_type,
    detect_source,
    detect_flight_type,
    detect_directive,
    wants_to_start,
)
from app.core.intelligence.intent.types import BookingType, Directive, FlightType
from app.core.intelligence.dates.parser import (
    InvalidCalendarDateError,
    parse_date,
    convert_to_date,
    is_return_date_valid,
)
from app.core.intelligence.session.manager import SessionStore
from app.core.intelligence.session.models import Session
from app.core.intelligence.session.state import Phase, can_transition
from app.core.booking.response import ResponseGenerator, get_response_generator
from app.core.booking.workflows import format_travel_dates, get_steps

logger = logging.getLogger(__name__)


@dataclass
class ChatTurn:
    """Result of processing one user message."""

    reply: str
    session: Session  # Live session after the turn (fresh one after a restart)


@dataclass
class _Turn:
    """Working data for one message while it is being handled."""

    session: Session
    message: str  # Raw user text
    msg: str  # Lower-cased, trimmed
    history: list[dict]  # Conversation before this message


Handler = Callable[["_Turn"], Awaitable[str]]


class DialogueController:
    """
    State machine for booking conversations.

    Phases:
        GREETING -> AWAITING_BOOKING_INTENT -> AWAITING_BOOKING_TYPE
        -> AWAITING_SOURCE -> [AWAITING_FLIGHT_TYPE -> AWAITING_DEPARTURE_DATE
        -> AWAITING_RETURN_DATE] -> GUIDED_FLOW

    Unrecognised input re-prompts in place; only a completed booking or
    an explicit restart clears the booking choices.
    """

    def __init__(
        self,
        store: SessionStore,
        responses: Optional[ResponseGenerator] = None,
    ):
        """Initialize controller.

        Args:
            store: Session store shared by all requests
            responses: Response generator (uses singleton if not provided)
        """
        self._store = store
        self._responses = responses
        self._handlers: dict[Phase, Handler] = {
            Phase.GREETING: self._on_greeting,
            Phase.AWAITING_BOOKING_INTENT: self._on_booking_intent,
            Phase.AWAITING_BOOKING_TYPE: self._on_booking_type,
            Phase.AWAITING_SOURCE: self._on_source,
            Phase.AWAITING_FLIGHT_TYPE: self._on_flight_type,
            Phase.AWAITING_DEPARTURE_DATE: self._on_departure_date,
            Phase.AWAITING_RETURN_DATE: self._on_return_date,
            Phase.GUIDED_FLOW: self._on_guided_flow,
        }

    @property
    def responses(self) -> ResponseGenerator:
        """Get response generator."""
        if self._responses is None:
            self._responses = get_response_generator()
        return self._responses

    async def process(self, session_id: str, message: str) -> ChatTurn:
        """Process one user message.

        Args:
            session_id: Conversation identifier
            message: Raw user message

        Returns:
            ChatTurn with the reply and the session after the turn
        """
        session = self._store.get(session_id)
        turn = _Turn(
            session=session,
            message=message,
            msg=normalize_input(message),
            history=list(session.conversation_history),
        )
        session.add_message("user", message)

        handler = self._handlers.get(session.phase, self._on_unhandled)
        try:
            reply = await handler(turn)
        except Exception:
            # Drop the unanswered user entry so history stays paired
            session.conversation_history.pop()
            raise

        turn.session.add_message("assistant", reply)
        turn.session.message_count += 1

        return ChatTurn(reply=reply, session=turn.session)

    def _move(self, session: Session, phase: Phase) -> None:
        """Set the session phase, logging the transition."""
        if not can_transition(session.phase, phase):
            logger.warning(
                f"Unexpected transition for {session.session_id}: "
                f"{session.phase.value} -> {phase.value}"
            )
        if session.phase != phase:
            logger.debug(f"Session {session.session_id}: {session.phase.value} -> {phase.value}")
        session.phase = phase

    def _steps(self, session: Session) -> list[str]:
        """Steps of the workflow the session is currently following."""
        if session.flow == BookingType.FLIGHT:
            dates = format_travel_dates(session.departure_date, session.return_date)
            return get_steps(session.flow, session.source, dates)
        return get_steps(session.flow, session.source)

    async def _freeform(self, turn: _Turn) -> str:
        return await self.responses.freeform_reply(turn.message, turn.history)

    # === Choosing what to book ===

    async def _on_greeting(self, turn: _Turn) -> str:
        session = turn.session
        booking_type = detect_booking_type(turn.msg)

        if booking_type:
            session.flow = booking_type
            self._move(session, Phase.AWAITING_SOURCE)
            return self.responses.welcome_with_source(booking_type)

        self._move(session, Phase.AWAITING_BOOKING_INTENT)
        return self.responses.welcome()

    async def _on_booking_intent(self, turn: _Turn) -> str:
        session = turn.session
        booking_type = detect_booking_type(turn.msg)

        if booking_type:
            session.flow = booking_type
            self._move(session, Phase.AWAITING_SOURCE)
            return self.responses.ask_source(booking_type)

        if wants_to_start(turn.msg):
            self._move(session, Phase.AWAITING_BOOKING_TYPE)
            return self.responses.ask_booking_type()

        # Declines and small talk go to the LLM
        return await self._freeform(turn)

    async def _on_booking_type(self, turn: _Turn) -> str:
        booking_type = detect_booking_type(turn.msg)
        if not booking_type:
            return self.responses.booking_type_not_understood()

        turn.session.flow = booking_type
        self._move(turn.session, Phase.AWAITING_SOURCE)
        return self.responses.ask_source(booking_type)

    async def _on_source(self, turn: _Turn) -> str:
        session = turn.session
        source = detect_source(turn.msg)
        if not source:
            return self.responses.source_not_understood()

        if session.flow == BookingType.FLIGHT:
            session.source = source
            self._move(session, Phase.AWAITING_FLIGHT_TYPE)
            return self.responses.ask_flight_type()

        steps = get_steps(session.flow, source)
        session.source = source
        session.step = 0
        self._move(session, Phase.GUIDED_FLOW)
        return self.responses.flow_started(session.flow, source, steps[0])

    # === Flight details ===

    async def _on_flight_type(self, turn: _Turn) -> str:
        flight_type = detect_flight_type(turn.msg)
        if not flight_type:
            return self.responses.flight_type_not_understood()

        turn.session.flight_type = flight_type
        self._move(turn.session, Phase.AWAITING_DEPARTURE_DATE)
        return self.responses.ask_departure_date(flight_type)

    async def _on_departure_date(self, turn: _Turn) -> str:
        session = turn.session
        date_str = parse_date(turn.message)
        if date_str is None:
            return self.responses.invalid_date_format("16")

        try:
            convert_to_date(date_str)
        except InvalidCalendarDateError:
            return self.responses.invalid_calendar_date("16")

        session.departure_date = date_str

        if session.flight_type == FlightType.ROUND_TRIP:
            self._move(session, Phase.AWAITING_RETURN_DATE)
            return self.responses.ask_return_date()

        steps = get_steps(BookingType.FLIGHT, session.source, date_str)
        session.step = 0
        self._move(session, Phase.GUIDED_FLOW)
        return self.responses.flight_flow_started(
            FlightType.ONE_WAY, session.source, date_str, steps[0]
        )

    async def _on_return_date(self, turn: _Turn) -> str:
        session = turn.session
        date_str = parse_date(turn.message)
        if date_str is None:
            return self.responses.invalid_date_format("20")

        try:
            convert_to_date(date_str)
        except InvalidCalendarDateError:
            return self.responses.invalid_calendar_date("20")

        if not is_return_date_valid(session.departure_date, date_str):
            return self.responses.return_before_departure(session.departure_date)

        travel_dates = format_travel_dates(session.departure_date, date_str)
        steps = get_steps(BookingType.FLIGHT, session.source, travel_dates)
        session.return_date = date_str
        session.step = 0
        self._move(session, Phase.GUIDED_FLOW)
        return self.responses.flight_flow_started(
            FlightType.ROUND_TRIP, session.source, travel_dates, steps[0]
        )

    # === Guided flow ===

    async def _on_guided_flow(self, turn: _Turn) -> str:
        session = turn.session
        steps = self._steps(session)
        directive = detect_directive(turn.msg)

        if directive == Directive.NEXT:
            if session.step + 1 < len(steps):
                session.step += 1
                return self.responses.step(steps[session.step])

            booking_type = session.flow
            session.clear_booking()
            self._move(session, Phase.AWAITING_BOOKING_INTENT)
            logger.info(f"Session {session.session_id}: {booking_type.value} booking complete")
            return self.responses.booking_complete(booking_type)

        if directive == Directive.BACK:
            if session.step > 0:
                session.step -= 1
                return self.responses.step_back(steps[session.step])
            return self.responses.first_step(steps[session.step])

        if directive == Directive.RESTART:
            fresh = self._store.reset(session.session_id)
            fresh.add_message("user", turn.message)
            turn.session = fresh
            logger.info(f"Session {session.session_id}: booking restarted")
            return self.responses.restarted()

        return self.responses.current_step(steps[session.step])

    async def _on_unhandled(self, turn: _Turn) -> str:
        logger.warning(f"No handler for phase {turn.session.phase!r}, using free-form reply")
        return await self._freeform(turn)
