"""Main Textual TUI application.

Forwards user events to a ChatSession and re-renders whenever the session
reports a change.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Checkbox, Footer, Header, Input, Static

from ..llm import Role
from ..session import ChatSession
from .config import (
    API_KEY_PLACEHOLDER,
    APP_SUBTITLE,
    APP_TITLE,
    COMPOSER_PLACEHOLDER,
    MODEL_HINT,
    MODEL_PLACEHOLDER,
    REMEMBER_LABEL,
    SEND_LABEL,
    SUGGESTIONS,
    LogLevel,
)
from .styles import APP_CSS
from .themes import WHITE_MYSTIC
from .widgets import DebugPanel, TranscriptView


class BroChatApp(App):
    """Textual chat widget backed by a ChatSession."""

    CSS = APP_CSS
    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+r", "copy_last_reply", "Copy Reply"),
        Binding("f2", "toggle_debug", "Debug"),
    ]

    def __init__(self, session: ChatSession, log_level: str | None = None) -> None:
        super().__init__()
        self._session = session
        self._log_level = log_level

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        session = self._session
        yield Header()

        with Horizontal(id="controls"):
            with Vertical(classes="control"):
                yield Static("Model", classes="control-label")
                yield Input(
                    value=session.model_id,
                    placeholder=MODEL_PLACEHOLDER,
                    id="model-input",
                )
                yield Static(MODEL_HINT, classes="control-hint")
            with Vertical(classes="control"):
                yield Static("Gemini API Key", classes="control-label")
                yield Input(
                    value=session.api_key,
                    placeholder=API_KEY_PLACEHOLDER,
                    password=True,
                    id="key-input",
                )
                yield Checkbox(REMEMBER_LABEL, value=session.remember_key, id="remember-key")

        yield TranscriptView(id="transcript")
        yield Static("", id="error-banner", markup=False)

        with Horizontal(id="composer"):
            yield Input(value=session.input, placeholder=COMPOSER_PLACEHOLDER, id="composer-input")
            yield Button(SEND_LABEL, id="send-btn", variant="warning")

        with Horizontal(id="suggestions"):
            for i, text in enumerate(SUGGESTIONS):
                yield Button(text, id=f"suggestion-{i}")

        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(WHITE_MYSTIC)
        self.theme = "white-mystic"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.parse(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {log_panel.log_level.name}")

        def debug_callback(level: str, component: str, message: str) -> None:
            """Route session messages to the log panel."""
            log_panel.log_entry(LogLevel.parse(level), component, message)

        self._session.set_debug_callback(debug_callback)
        self._session.set_change_callback(self._refresh_view)
        self._refresh_view()
        self.query_one("#composer-input", Input).focus()

    def on_unmount(self) -> None:
        self._session.set_change_callback(None)
        self._session.set_debug_callback(None)

    def _refresh_view(self) -> None:
        """Bring every widget in line with the session state."""
        session = self._session

        for widget_id, value in (
            ("#model-input", session.model_id),
            ("#key-input", session.api_key),
            ("#composer-input", session.input),
        ):
            field = self.query_one(widget_id, Input)
            if field.value != value:
                field.value = value

        remember = self.query_one("#remember-key", Checkbox)
        if remember.value != session.remember_key:
            remember.value = session.remember_key

        self.query_one("#transcript", TranscriptView).sync(session.transcript, session.is_pending)

        banner = self.query_one("#error-banner", Static)
        banner.update(f"⚠ {session.error}" if session.error else "")
        banner.display = bool(session.error)

        self.query_one("#send-btn", Button).disabled = not session.can_submit

    def on_input_changed(self, event: Input.Changed) -> None:
        """Forward edits of the text fields to the session."""
        input_id = event.input.id
        if input_id == "model-input":
            if event.value != self._session.model_id:
                self._session.set_model_id(event.value)
        elif input_id == "key-input":
            if event.value != self._session.api_key:
                self._session.set_api_key(event.value)
        elif input_id == "composer-input":
            if event.value != self._session.input:
                self._session.set_input(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "composer-input":
            self._send()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if event.checkbox.id == "remember-key" and event.value != self._session.remember_key:
            self._session.set_remember_key(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "send-btn":
            self._send()
        elif button_id.startswith("suggestion-"):
            self._send(SUGGESTIONS[int(button_id.removeprefix("suggestion-"))])

    @work(group="send")
    async def _send(self, message: str | None = None) -> None:
        """Send on a worker; the session drops the attempt if one is pending."""
        previous_error = self._session.error
        dispatched = await self._session.send_message(message)
        error = self._session.error
        if error and (dispatched or error != previous_error):
            self.notify(f"Error: {error[:50]}", severity="error", timeout=5)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_reply(self) -> None:
        """Copy the last model reply to clipboard."""
        for message in reversed(self._session.transcript):
            if message.role is Role.MODEL:
                self.copy_to_clipboard(message.text)
                self.notify("Reply copied")
                return
        self.notify("No reply to copy", severity="warning")


async def run_textual_tui(session: ChatSession, log_level: str | None = None) -> None:
    """Run the Textual TUI.

    Args:
        session: Chat session to drive
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = BroChatApp(session=session, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await session.close()
