"""Data models for the chat session.

Hides the internal representation of transcript messages and session settings.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..llm.models import Content, Part, Role
from .config import DEFAULT_MODEL


class Message(BaseModel):
    """A transcript message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Author of the message: 'user' or 'model'")
    text: str = Field(description="Message text")

    def to_content(self) -> Content:
        """Project into the shape completion services expect."""
        return Content(role=self.role, parts=[Part(text=self.text)])


class SessionConfig(BaseModel):
    """User-editable session settings."""

    model_id: str = Field(default=DEFAULT_MODEL, description="Model identifier sent with each request")
    api_key: str = Field(default="", description="Secret API key, empty when not set")
    remember_key: bool = Field(default=True, description="Mirror the API key into the credential store")


class RequestState(str, Enum):
    """Whether a completion request is outstanding."""

    IDLE = "idle"
    PENDING = "pending"
