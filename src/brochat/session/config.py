"""Session configuration constants.

Centralizes the literal texts and identifiers the chat session relies on.
"""

# Fixed identifier of the API key inside the credential store
API_KEY_STORAGE_KEY = "gemini_api_key"

DEFAULT_MODEL = "gemini-2.5-flash"

# Prefilled composer text for a fresh session
DEFAULT_STARTER = "嗨！幫我測試一下台北旅遊的一日行程～"

# Model-authored message every transcript starts with
WELCOME_TEXT = "what's good bro? what u up to right now?"

# Reply text used when the service answers without any text
NO_CONTENT_PLACEHOLDER = "[No content]"

# Surfaced when no usable completion service can be built
MISSING_KEY_ERROR = "請先輸入有效的 Gemini API Key"

# Surfaced when the model identifier is blank
MISSING_MODEL_ERROR = "請先輸入模型名稱"
