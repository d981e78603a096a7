from .gemini import GeminiProvider

__all__ = ["GeminiProvider"]
