from typing import Any

from .base import CompletionService
from .providers import GeminiProvider


def create_completion_service(provider: str, **config: Any) -> CompletionService:
    """Create a completion service instance.

    This factory function hides the instantiation logic for different vendors.

    Args:
        provider: Provider type (currently only 'gemini')
        **config: Provider-specific configuration
            For Gemini:
                - api_key: str (required, non-empty)

    Returns:
        Initialized completion service

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> service = create_completion_service("gemini", api_key="...")
    """
    provider_lower = provider.lower()

    if provider_lower == "gemini":
        if not config.get("api_key"):
            raise TypeError("Gemini provider requires 'api_key' in config")
        return GeminiProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'gemini'"
    )
