"""
Session management module.

Sessions live in process memory only; a SessionStore is created at
application start and passed to the dialogue controller.
"""

from .state import Phase, can_transition
from .models import Session
from .manager import SessionStore

__all__ = [
    # State
    "Phase",
    "can_transition",
    # Models
    "Session",
    # Store
    "SessionStore",
]
