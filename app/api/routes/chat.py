"""
Chat API Endpoints.

Conversation turns for the booking assistant, session reset and a
read-only session view.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from app.api.dependencies import get_dialogue_controller, get_session_store
from app.core.booking.flow import DialogueController
from app.core.intelligence.session.manager import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Chat"])

DEFAULT_SESSION_ID = "default"


class ChatRequest(BaseModel):
    """Chat message request."""

    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = Field(
        default=None,
        description="User's message",
        examples=["I want to book a flight"],
    )
    session_id: str = Field(
        default=DEFAULT_SESSION_ID,
        alias="sessionId",
        description="Conversation identifier",
        examples=["default"],
    )


class ResetRequest(BaseModel):
    """Session reset request."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(
        default=DEFAULT_SESSION_ID,
        alias="sessionId",
        description="Conversation identifier",
    )


class SessionState(BaseModel):
    """Public snapshot of a session's dialogue state."""

    phase: str
    flow: Optional[str] = None
    source: Optional[str] = None
    flightType: Optional[str] = None
    departureDate: Optional[str] = None
    returnDate: Optional[str] = None
    step: int = 0


class ChatResponse(BaseModel):
    """Chat response."""

    reply: str = Field(..., description="Assistant's reply")
    state: SessionState = Field(..., description="Session state after the turn")


class ResetResponse(BaseModel):
    """Reset response."""

    message: str


class SessionView(BaseModel):
    """Session detail response."""

    sessionId: str
    state: SessionState
    messageCount: int
    history: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    details: Optional[str] = None


@router.post(
    "/chat",
    response_model=ChatResponse,
    status_code=status.HTTP_200_OK,
    summary="Send a chat message",
    description="Send a message to the booking assistant and get a reply.",
    responses={
        200: {"description": "Successful response"},
        400: {"model": ErrorResponse, "description": "Message is missing"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def chat(
    request: ChatRequest,
    controller: DialogueController = Depends(get_dialogue_controller),
):
    """
    Process a chat message.

    The sessionId should be preserved across requests to maintain
    the conversation; it defaults to "default".
    """
    if not request.message:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Message is required"},
        )

    try:
        turn = await controller.process(request.session_id, request.message)
    except Exception as e:
        logger.exception(f"Error processing chat message: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "An error occurred processing your request",
                "details": str(e),
            },
        )

    return ChatResponse(
        reply=turn.reply,
        state=SessionState(**turn.session.to_state()),
    )


@router.post(
    "/reset",
    response_model=ResetResponse,
    status_code=status.HTTP_200_OK,
    summary="Reset a session",
    description="Discard a conversation and start it again from the greeting.",
)
async def reset_session(
    request: Optional[ResetRequest] = Body(default=None),
    store: SessionStore = Depends(get_session_store),
) -> ResetResponse:
    """Reset session to initial state."""
    session_id = request.session_id if request else DEFAULT_SESSION_ID
    store.reset(session_id)
    logger.info(f"Session reset: {session_id}")
    return ResetResponse(message="Session reset successfully")


@router.get(
    "/session/{session_id}",
    response_model=SessionView,
    summary="Get session data",
    description="Retrieve the current state and history of a conversation.",
    responses={
        200: {"description": "Session data"},
        404: {"model": ErrorResponse, "description": "Session not found"},
    },
)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionView:
    """Get session information."""
    session = store.peek(session_id)

    if session is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Session not found"},
        )

    return SessionView(
        sessionId=session.session_id,
        state=SessionState(**session.to_state()),
        messageCount=session.message_count,
        history=session.recent_history(len(session.conversation_history)),
    )
