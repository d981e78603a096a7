"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Light palette: white surfaces, slate text, amber-to-orange accents
WHITE_MYSTIC = Theme(
    name="white-mystic",
    primary="#f97316",      # Orange - send button, focus
    secondary="#6366f1",    # Indigo - user messages
    accent="#f59e0b",       # Amber - highlights
    foreground="#0f172a",   # Slate 900 - text
    background="#fbfdff",   # Near white
    success="#16a34a",
    warning="#d97706",
    error="#b91c1c",        # Error banner
    surface="#ffffff",
    panel="#f8fafc",
    dark=False,
    variables={
        "border": "#e2e8f0",
        "border-blurred": "#e6e8f0",

        "input-cursor-background": "#0f172a",
        "input-cursor-foreground": "#ffffff",
        "input-selection-background": "#f97316 25%",

        "scrollbar": "#e2e8f0",
        "scrollbar-hover": "#cbd5e1",
        "scrollbar-active": "#f97316",
        "scrollbar-background": "#f8fafc",

        "footer-foreground": "#334155",
        "footer-background": "#ffffff",
        "footer-key-foreground": "#f97316",

        "text-muted": "#64748b",
        "text-error": "#b91c1c",
    },
)
