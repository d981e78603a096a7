"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Settings row: model id, API key, remember
   ============================================ */
#controls {
    height: auto;
    padding: 0 1;
}

.control {
    width: 1fr;
    height: auto;
    padding: 0 1;
}

.control-label {
    text-style: bold;
    color: $foreground;
}

.control-hint {
    color: $text-muted;
}

#remember-key {
    border: none;
    padding: 0;
    background: transparent;
}

/* ============================================
   Transcript
   ============================================ */
#transcript {
    height: 1fr;
    margin: 0 1;
    padding: 0 1;
    background: $panel;
    border: round $border;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    scrollbar-gutter: stable;
}

.chat-message {
    height: auto;
    margin: 1 0 0 0;
    padding: 0 1;
    border: round $border;

    &.user-message {
        background: $secondary 8%;
        border: round $secondary 40%;
    }

    &.model-message {
        background: $surface;
    }

    &.thinking {
        color: $text-muted;
    }
}

.message-header {
    text-style: bold;
    color: $foreground 85%;
}

.message-line {
    height: auto;
    min-height: 1;
}

/* ============================================
   Error banner
   ============================================ */
#error-banner {
    height: auto;
    padding: 0 2;
    color: $error;
}

/* ============================================
   Composer and quick replies
   ============================================ */
#composer {
    height: auto;
    padding: 0 1;
}

#composer-input {
    width: 1fr;
}

#send-btn {
    min-width: 8;
}

#suggestions {
    height: auto;
    padding: 0 1;

    Button {
        margin: 0 1 0 0;
        min-width: 6;
    }
}

/* ============================================
   Debug log panel, hidden by default
   ============================================ */
#debug-panel {
    height: 10;
    margin: 0 1;
    border: round $border;
    border-title-color: $accent;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
}
"""
