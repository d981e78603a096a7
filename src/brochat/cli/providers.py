"""Provider factory functions for CLI.

Centralizes creation of the credential store and chat session from
environment variables and command options.
Hides configuration details from command implementations.
"""

import os
from pathlib import Path

import typer
from rich.console import Console

from ..credentials import DEFAULT_CREDENTIALS_PATH, CredentialStore, create_credential_store
from ..session import DEFAULT_MODEL, DEFAULT_STARTER, ChatSession

# Default console for output
_console = Console()


def default_model() -> str:
    """Model id from GEMINI_MODEL, falling back to the built-in default."""
    return os.getenv("GEMINI_MODEL", DEFAULT_MODEL)


def get_credential_store(
    backend: str | None = None,
    path: Path | None = None,
    console: Console | None = None,
) -> CredentialStore:
    """Create the credential store.

    Args:
        backend: 'file' or 'memory'; None reads BROCHAT_CREDENTIALS
        path: File location for the 'file' backend; None reads
            BROCHAT_CREDENTIALS_PATH
        console: Optional Rich console for output

    Returns:
        Credential store instance

    Raises:
        SystemExit: If the backend is unknown

    Environment variables:
        BROCHAT_CREDENTIALS: Store backend (default: file)
        BROCHAT_CREDENTIALS_PATH: JSON file location
            (default: ~/.config/brochat/credentials.json)
    """
    con = console or _console
    backend = (backend or os.getenv("BROCHAT_CREDENTIALS", "file")).lower()

    config = {}
    if backend == "file":
        config["path"] = path or Path(os.getenv("BROCHAT_CREDENTIALS_PATH", str(DEFAULT_CREDENTIALS_PATH)))

    try:
        return create_credential_store(backend, **config)
    except ValueError as e:
        con.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def build_session(
    store: CredentialStore,
    model: str | None = None,
    starter: str | None = DEFAULT_STARTER,
) -> ChatSession:
    """Create a chat session bound to the given store."""
    return ChatSession(
        credential_store=store,
        default_model=model or default_model(),
        starter=starter,
    )
