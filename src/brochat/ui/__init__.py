"""Terminal UI module for brochat.

Provides a Textual-based chat widget driven by a ChatSession.

Module structure (each module hides a design decision):
- config.py: Labels, literal texts and log levels
- formatting.py: How message text is cut into display lines
- widgets.py: Transcript rendering and the log panel
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- app.py: Application orchestration (user interaction flow)
"""

from .app import BroChatApp, run_textual_tui
from .config import SUGGESTIONS, LogLevel
from .formatting import MessageLines, render_line
from .widgets import DebugPanel, MessageBlock, TranscriptView

__all__ = [
    "BroChatApp",
    "DebugPanel",
    "LogLevel",
    "MessageBlock",
    "MessageLines",
    "SUGGESTIONS",
    "TranscriptView",
    "render_line",
    "run_textual_tui",
]
