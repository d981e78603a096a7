"""Google Gemini completion service.

Uses the official Google GenAI SDK for async generation.
Reference: https://github.com/googleapis/python-genai

Note: Gemini can return empty responses due to safety filtering or service
issues. Those surface as a result without text; the caller decides how to
present them. Each call is a single attempt.
"""

from typing import Any

from google import genai
from google.genai import types

from ..base import CompletionService
from ..models import CompletionResult, Content


class GeminiProvider(CompletionService):
    """Google Gemini completion service.

    Hidden design decisions:
    - Google GenAI client initialization
    - Transcript conversion to ``types.Content``
    - Reply text extraction from candidates
    """

    def __init__(self, api_key: str, **client_kwargs: Any):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            **client_kwargs: Additional kwargs for Client
        """
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    def _convert_transcript(self, transcript: list[Content]) -> list[types.Content]:
        """Convert transcript entries to Gemini format."""
        return [
            types.Content(
                role=entry.role.value,
                parts=[types.Part(text=part.text) for part in entry.parts]
            )
            for entry in transcript
        ]

    def _extract_content(self, response) -> str | None:
        """Extract text content from a Gemini response.

        Args:
            response: Gemini GenerateContentResponse

        Returns:
            Joined text of the first candidate, or None when there is none
        """
        if response.candidates:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                texts = [part.text for part in candidate.content.parts if getattr(part, "text", None)]
                if texts:
                    return "".join(texts)

        # Fallback to response.text (may raise or return None)
        try:
            return response.text or None
        except (ValueError, AttributeError):
            return None

    async def generate(self, model_id: str, transcript: list[Content]) -> CompletionResult:
        """Generate a reply using Google Gemini.

        Args:
            model_id: Gemini model identifier, e.g. gemini-2.5-flash
            transcript: Whole conversation, newest entry last

        Returns:
            CompletionResult with the reply text and token usage
        """
        response = await self._client.aio.models.generate_content(
            model=model_id,
            contents=self._convert_transcript(transcript),
        )

        usage = None
        if response.usage_metadata:
            usage = {
                "prompt_tokens": response.usage_metadata.prompt_token_count or 0,
                "completion_tokens": response.usage_metadata.candidates_token_count or 0,
                "total_tokens": response.usage_metadata.total_token_count or 0
            }

        return CompletionResult(
            text=self._extract_content(response),
            model=model_id,
            usage=usage
        )

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
