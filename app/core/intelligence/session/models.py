"""
Session data model for booking conversations.

One Session per conversation, held in memory for the life of the process.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from app.core.intelligence.intent.types import BookingType, FlightType, SourceSystem
from .state import Phase


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


@dataclass
class Session:
    """
    Conversation state for one session id.

    return_date is only ever set for round trips, after it has been
    checked against departure_date. step indexes the active workflow
    while phase is GUIDED_FLOW.
    """

    session_id: str = "default"
    phase: Phase = Phase.GREETING

    # Booking choices
    flow: Optional[BookingType] = None
    source: Optional[SourceSystem] = None
    flight_type: Optional[FlightType] = None

    # Canonical date strings (see app.core.intelligence.dates)
    departure_date: Optional[str] = None
    return_date: Optional[str] = None

    # Position in the guided workflow
    step: int = 0

    # Append-only {"role", "content"} history
    conversation_history: list[dict] = field(default_factory=list)

    message_count: int = 0
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def add_message(self, role: str, content: str) -> None:
        """Append a message to the conversation history."""
        self.conversation_history.append({"role": role, "content": content})
        self.updated_at = _utcnow()

    def recent_history(self, limit: int) -> list[dict]:
        """Get a copy of the last `limit` history entries."""
        if limit <= 0:
            return []
        return [dict(m) for m in self.conversation_history[-limit:]]

    def clear_booking(self) -> None:
        """Forget every booking choice and rewind the workflow."""
        self.flow = None
        self.source = None
        self.flight_type = None
        self.departure_date = None
        self.return_date = None
        self.step = 0

    def to_state(self) -> dict[str, Any]:
        """Public state snapshot returned with every chat reply."""
        return {
            "phase": self.phase.value,
            "flow": self.flow.value if self.flow else None,
            "source": self.source.value if self.source else None,
            "flightType": self.flight_type.value if self.flight_type else None,
            "departureDate": self.departure_date,
            "returnDate": self.return_date,
            "step": self.step,
        }
