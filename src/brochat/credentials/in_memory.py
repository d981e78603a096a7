"""In-memory credential store.

Simple dict-based storage. Data is lost when the application exits.
"""

from .base import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    """In-memory credential store (session-only).

    Suitable for ephemeral use or testing.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    @property
    def backend_type(self) -> str:
        return "memory"
