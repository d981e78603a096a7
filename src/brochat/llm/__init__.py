from .base import CompletionService
from .factory import create_completion_service
from .models import CompletionResult, Content, Part, Role
from .providers import GeminiProvider

__all__ = [
    "CompletionService",
    "create_completion_service",
    "CompletionResult",
    "Content",
    "Part",
    "Role",
    "GeminiProvider",
]
