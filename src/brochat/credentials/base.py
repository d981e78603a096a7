"""Abstract base class for credential stores.

This module defines the interface for device-local secret storage.
The abstraction hides:
- Storage format (JSON file, in-memory dict)
- Persistence location and file permissions
"""

from abc import ABC, abstractmethod


class CredentialStore(ABC):
    """Abstract device-local key-value store for secrets.

    Keys are fixed identifiers owned by the caller. Values are plain strings.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete a value. Removing a missing key is a no-op."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
