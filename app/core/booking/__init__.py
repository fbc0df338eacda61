"""
Booking Module

Provides the workflow catalog, reply templates with the free-form
fallback responder, and the dialogue controller for the booking
assistant.

Usage:
    from app.core.booking import DialogueController
    from app.core.intelligence import SessionStore

    controller = DialogueController(store=SessionStore())
    turn = await controller.process("default", "I want to book a hotel")
    print(turn.reply)  # Bot's response
    print(turn.session.to_state())  # Phase and booking choices
"""

# Workflow Catalog
from app.core.booking.workflows import (
    WORKFLOWS,
    FixedWorkflow,
    DatedWorkflow,
    format_travel_dates,
    get_steps,
)

# Response Generator
from app.core.booking.response import (
    ResponseGenerator,
    get_response_generator,
    FREEFORM_FALLBACK,
)

# Dialogue Controller
from app.core.booking.flow import (
    DialogueController,
    ChatTurn,
)

__all__ = [
    # Workflow Catalog
    "WORKFLOWS",
    "FixedWorkflow",
    "DatedWorkflow",
    "format_travel_dates",
    "get_steps",
    # Response Generator
    "ResponseGenerator",
    "get_response_generator",
    "FREEFORM_FALLBACK",
    # Dialogue Controller
    "DialogueController",
    "ChatTurn",
]
