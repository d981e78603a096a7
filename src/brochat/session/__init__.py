"""Chat session module for brochat.

Owns the transcript, the request lifecycle and the API key lifecycle.
"""

from .config import (
    API_KEY_STORAGE_KEY,
    DEFAULT_MODEL,
    DEFAULT_STARTER,
    MISSING_KEY_ERROR,
    MISSING_MODEL_ERROR,
    NO_CONTENT_PLACEHOLDER,
    WELCOME_TEXT,
)
from .models import Message, RequestState, SessionConfig
from .session import ChatSession

__all__ = [
    "API_KEY_STORAGE_KEY",
    "ChatSession",
    "DEFAULT_MODEL",
    "DEFAULT_STARTER",
    "MISSING_KEY_ERROR",
    "MISSING_MODEL_ERROR",
    "Message",
    "NO_CONTENT_PLACEHOLDER",
    "RequestState",
    "SessionConfig",
    "WELCOME_TEXT",
]
