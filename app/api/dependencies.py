"""
FastAPI dependencies.

The session store and dialogue controller are built once in the app
lifespan and hung off app.state; routes receive them through these
providers so tests can override them.
"""

from fastapi import Request

from app.core.booking.flow import DialogueController
from app.core.booking.response import ResponseGenerator
from app.core.intelligence.session.manager import SessionStore


def build_controller(store: SessionStore) -> DialogueController:
    """Wire a controller around a store."""
    return DialogueController(store=store, responses=ResponseGenerator())


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_dialogue_controller(request: Request) -> DialogueController:
    return request.app.state.dialogue_controller
