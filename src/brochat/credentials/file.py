"""JSON file credential store.

Stores all values as one JSON object in a per-user file, the terminal
counterpart of a browser's localStorage. The file is rewritten on every
change and is readable by the owner only.
"""

import json
import os
from pathlib import Path

from .base import CredentialStore

DEFAULT_CREDENTIALS_PATH = Path.home() / ".config" / "brochat" / "credentials.json"


class FileCredentialStore(CredentialStore):
    """File-backed credential store.

    Values persist across sessions on the same device and user account.
    A missing or unreadable file behaves as an empty store.
    """

    def __init__(self, path: str | Path = DEFAULT_CREDENTIALS_PATH):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (FileNotFoundError, json.JSONDecodeError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, values: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(values, f, indent=2)

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._load()
        values[key] = value
        self._save(values)

    def remove(self, key: str) -> None:
        values = self._load()
        if key not in values:
            return
        del values[key]
        self._save(values)

    @property
    def backend_type(self) -> str:
        return "file"
