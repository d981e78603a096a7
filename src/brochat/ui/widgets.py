"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Transcript rendering and scrolling
- Pending-reply placeholder
- Log rendering with level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Vertical, VerticalScroll
from textual.events import Click
from textual.widgets import RichLog, Static

from ..llm import Role
from ..session import Message
from .config import MODEL_LABEL, THINKING_TEXT, USER_LABEL, LogLevel
from .formatting import MessageLines, render_line


class MessageBlock(Vertical):
    """One transcript message: a speaker header and one block per line.

    Clicking the message copies its raw text to the clipboard.
    """

    def __init__(self, message: Message, *args, **kwargs) -> None:
        role_class = "user-message" if message.role is Role.USER else "model-message"
        super().__init__(*args, classes=f"chat-message {role_class}", **kwargs)
        self.message = message

    def compose(self):
        label = USER_LABEL if self.message.role is Role.USER else MODEL_LABEL
        yield Static(label, classes="message-header", markup=False)
        for line in MessageLines(self.message.text):
            yield Static(render_line(line), classes="message-line")

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self.message.text)
        self.app.notify("Copied (terminal)", timeout=2)


class TranscriptView(VerticalScroll):
    """Scrollable transcript that follows the session's message list."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0
        self._thinking: Static | None = None

    @property
    def rendered_count(self) -> int:
        """Number of messages mounted so far."""
        return self._rendered

    def sync(self, messages: tuple[Message, ...], pending: bool) -> None:
        """Mount messages not shown yet and toggle the thinking placeholder.

        Messages are append-only, so only the tail beyond what is already
        rendered gets mounted.
        """
        changed = False

        if self._thinking is not None and (not pending or len(messages) > self._rendered):
            self._thinking.remove()
            self._thinking = None
            changed = True

        for message in messages[self._rendered:]:
            self.mount(MessageBlock(message))
            changed = True
        self._rendered = len(messages)

        if pending and self._thinking is None:
            self._thinking = Static(
                f"{MODEL_LABEL}\n{THINKING_TEXT}",
                classes="chat-message model-message thinking",
                markup=False,
            )
            self.mount(self._thinking)
            changed = True

        if changed:
            self.border_subtitle = f"{self._rendered} messages"
            self.call_after_refresh(self.scroll_end, animate=False)


class DebugPanel(RichLog):
    """Log panel for real-time session tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with F2.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Session": "green",
        "LLM": "magenta",
        "Store": "blue",
    }

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level
        self.display = False

    @property
    def log_level(self) -> LogLevel:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {self._log_level.name}"
        else:
            self.border_subtitle = "Hidden"

    def log_entry(self, level: LogLevel, component: str, message: str) -> None:
        """Add a log entry if it meets the current level threshold."""
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level.name:<7}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def info(self, component: str, message: str) -> None:
        self.log_entry(LogLevel.INFO, component, message)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
