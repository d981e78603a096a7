from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a transcript entry."""

    USER = "user"
    MODEL = "model"


class Part(BaseModel):
    """A single text part of a content entry."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Text of the part")


class Content(BaseModel):
    """One transcript entry in the shape completion services expect."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Author of the entry: 'user' or 'model'")
    parts: list[Part] = Field(default_factory=list, description="Ordered text parts")

    @property
    def text(self) -> str:
        """Text of all parts joined by newlines."""
        return "\n".join(part.text for part in self.parts)


class CompletionResult(BaseModel):
    """Reply returned by a completion service."""

    model_config = ConfigDict(frozen=True)

    text: str | None = Field(default=None, description="Generated text, None when the service returned none")
    model: str = Field(description="Model that generated the reply")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
