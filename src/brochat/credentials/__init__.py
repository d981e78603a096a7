"""Credential storage module for brochat.

Provides device-local persistence for the API key.
"""

from .base import CredentialStore
from .factory import create_credential_store
from .file import DEFAULT_CREDENTIALS_PATH, FileCredentialStore
from .in_memory import InMemoryCredentialStore

__all__ = [
    "CredentialStore",
    "DEFAULT_CREDENTIALS_PATH",
    "FileCredentialStore",
    "InMemoryCredentialStore",
    "create_credential_store",
]
