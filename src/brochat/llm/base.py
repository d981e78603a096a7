from abc import ABC, abstractmethod
from typing import Any

from .models import CompletionResult, Content


class CompletionService(ABC):
    """Abstract base class for completion services.

    This module hides the design decision of which generative-language
    vendor answers the conversation. Implementations must handle:
    - API client setup and authentication
    - Conversion from the transcript shape to the vendor format
    - Extraction of the reply text

    The caller supplies the full history on every call; implementations keep
    no conversation state between calls.

    Supports async context manager protocol for proper resource cleanup:
        async with service:
            result = await service.generate("gemini-2.5-flash", transcript)
    """

    @abstractmethod
    async def generate(self, model_id: str, transcript: list[Content]) -> CompletionResult:
        """Generate a reply to a conversation.

        Args:
            model_id: Identifier of the model to use
            transcript: Whole conversation in order, last entry is the newest

        Returns:
            CompletionResult whose text is None when the service produced none

        Raises:
            Exception: Vendor-specific errors during generation
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "CompletionService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            # Suppress harmless cleanup errors from httpx/anyio
            if "Event loop is closed" not in str(e):
                raise
