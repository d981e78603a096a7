"""Main CLI application using Typer."""
import asyncio
import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.text import Text

from ..llm import Role
from ..session import API_KEY_STORAGE_KEY, DEFAULT_STARTER
from ..ui.config import MODEL_LABEL, SUGGESTIONS, USER_LABEL
from ..ui.formatting import MessageLines, render_line
from .providers import build_session, get_credential_store

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="brochat",
    help="Terminal chat widget for Google Gemini",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _print_message(label: str, style: str, text: str) -> None:
    console.print(Text(f"{label}:", style=style))
    for line in MessageLines(text):
        console.print(render_line(line))
    console.print()


@app.command(name="tui")
def tui_command(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model id (default: $GEMINI_MODEL or gemini-2.5-flash)"
    ),
    starter: str = typer.Option(
        DEFAULT_STARTER,
        "--starter",
        help="Text prefilled in the message box"
    ),
    store: str | None = typer.Option(
        None,
        "--store",
        help="Where to remember the API key: 'file' or 'memory' (default: $BROCHAT_CREDENTIALS or file)"
    ),
    store_path: Path | None = typer.Option(
        None,
        "--store-path",
        help="Credential file path (only with --store file)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive chat widget."""
    from ..ui import run_textual_tui

    credential_store = get_credential_store(store, store_path, console)
    session = build_session(credential_store, model=model, starter=starter)

    try:
        asyncio.run(run_textual_tui(session, log_level=log_level))
    except KeyboardInterrupt:
        pass
    console.print("\n[dim]Goodbye![/dim]")


@app.command()
def chat(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model id (default: $GEMINI_MODEL or gemini-2.5-flash)"
    ),
    api_key: str | None = typer.Option(
        None,
        "--api-key",
        help=(
            "Gemini API key, remembered unless --no-remember "
            "(default: $GEMINI_API_KEY for this run only, else the remembered key, else prompt)"
        )
    ),
    remember: bool = typer.Option(
        True,
        "--remember/--no-remember",
        help="Keep the API key in the credential store"
    ),
    store: str | None = typer.Option(
        None,
        "--store",
        help="Where to remember the API key: 'file' or 'memory'"
    ),
    store_path: Path | None = typer.Option(
        None,
        "--store-path",
        help="Credential file path (only with --store file)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show session trace messages"
    ),
):
    """Plain console chat using the same session as the widget."""
    credential_store = get_credential_store(store, store_path, console)
    session = build_session(credential_store, model=model, starter=None)

    if verbose:
        def debug_callback(level: str, component: str, message: str) -> None:
            console.print(Text(f"[{level}] {component}: {message}", style="dim"))
        session.set_debug_callback(debug_callback)

    if not remember:
        session.set_remember_key(False)
    env_key = os.getenv("GEMINI_API_KEY")
    if api_key:
        session.set_api_key(api_key)
    elif env_key:
        # Keys from the environment are never written to the store
        session.set_api_key(env_key, persist=False)
    if not session.api_key:
        session.set_api_key(typer.prompt("Gemini API key", hide_input=True))

    async def _chat():
        try:
            console.print(f"[bold cyan]brochat[/bold cyan] [dim]({session.model_id})[/dim]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]")
            for i, text in enumerate(SUGGESTIONS, 1):
                console.print(f"[dim]/{i}[/dim] {text}")
            console.print()
            _print_message(MODEL_LABEL, "bold green", session.transcript[0].text)

            while True:
                try:
                    user_input = console.input(f"[bold yellow]{USER_LABEL}:[/bold yellow] ").strip()
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if not user_input:
                    continue

                if user_input.lower() in ('exit', 'quit', 'q'):
                    console.print("[dim]Goodbye![/dim]")
                    break

                message = user_input
                if user_input.startswith("/") and user_input[1:].isdigit():
                    index = int(user_input[1:]) - 1
                    if 0 <= index < len(SUGGESTIONS):
                        message = SUGGESTIONS[index]
                        console.print(Text(message, style="yellow"))

                await session.send_message(message)

                if session.error:
                    console.print(Text(f"⚠ {session.error}", style="bold red"))
                    console.print()
                elif session.transcript[-1].role is Role.MODEL:
                    _print_message(MODEL_LABEL, "bold green", session.transcript[-1].text)
        finally:
            await session.close()

    asyncio.run(_chat())


@app.command()
def forget(
    store: str | None = typer.Option(
        None,
        "--store",
        help="Credential backend: 'file' or 'memory'"
    ),
    store_path: Path | None = typer.Option(
        None,
        "--store-path",
        help="Credential file path (only with --store file)"
    ),
):
    """Delete the remembered API key."""
    credential_store = get_credential_store(store, store_path, console)
    if credential_store.get(API_KEY_STORAGE_KEY) is None:
        console.print("[dim]No API key stored.[/dim]")
        return
    credential_store.remove(API_KEY_STORAGE_KEY)
    console.print("[green]Stored API key removed.[/green]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
