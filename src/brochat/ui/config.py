"""UI configuration constants.

Centralizes labels and literal texts of the chat widget.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel thresholds; entries below the panel's level are skipped."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Level named by ``value`` in any case. Unknown names mean DEBUG."""
        return cls.__members__.get(value.upper(), cls.DEBUG)


APP_TITLE = "ur best bro"
APP_SUBTITLE = "直連 SDK，白色玄幻風"

# Speaker labels in the transcript
USER_LABEL = "You"
MODEL_LABEL = "你的好brother"

# Shown in place of the reply while a request is pending
THINKING_TEXT = "思考中…"

# Quick replies, each sent as-is when pressed
SUGGESTIONS = ("介紹喝酒的地方", "介紹打撞球的地方", "今晚去哪裏玩？")

MODEL_PLACEHOLDER = "例如 gemini-2.5-flash、gemini-2.5-pro"
MODEL_HINT = "模型名稱會隨時間更新，若錯誤請改成官方清單中的有效 ID。"
API_KEY_PLACEHOLDER = "貼上你的 API Key（只在本機儲存）"
REMEMBER_LABEL = "記住在本機"
COMPOSER_PLACEHOLDER = "輸入訊息，按 Enter 送出"
SEND_LABEL = "送出"
