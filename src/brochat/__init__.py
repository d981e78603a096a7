"""
brochat: a terminal chat widget for Google Gemini.

Each subpackage hides a specific design decision: the completion vendor
(llm), where the API key lives (credentials), the conversation state machine
(session) and its presentation (ui, cli).
"""

__version__ = "0.1.0"

from .credentials import CredentialStore, create_credential_store
from .llm import CompletionService, create_completion_service
from .session import ChatSession, Message, RequestState, SessionConfig

__all__ = [
    "ChatSession",
    "CompletionService",
    "CredentialStore",
    "Message",
    "RequestState",
    "SessionConfig",
    "create_completion_service",
    "create_credential_store",
]
