"""Chat session state machine.

Hides how the transcript, the single outstanding request and the API key
lifecycle interact. Front ends (Textual app, console loop) only forward
user events to a ChatSession and re-render when it reports a change.
"""

from collections.abc import Callable

from ..credentials import CredentialStore
from ..llm import CompletionService, Role, create_completion_service
from .config import (
    API_KEY_STORAGE_KEY,
    DEFAULT_MODEL,
    DEFAULT_STARTER,
    MISSING_KEY_ERROR,
    MISSING_MODEL_ERROR,
    NO_CONTENT_PLACEHOLDER,
    WELCOME_TEXT,
)
from .models import Message, RequestState, SessionConfig

ServiceFactory = Callable[[str], CompletionService]


def _default_service_factory(api_key: str) -> CompletionService:
    return create_completion_service("gemini", api_key=api_key)


def describe_error(error: BaseException) -> str:
    """Human-readable description of a failed request.

    Prefers the ``message`` attribute SDK errors carry, then the string form,
    then the exception class name.
    """
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error) or type(error).__name__


class ChatSession:
    """A single conversation with a completion service.

    State transitions: IDLE -> PENDING -> IDLE. At most one request is in
    flight; a send attempted while PENDING is dropped, not queued.

    Example:
        session = ChatSession(InMemoryCredentialStore())
        session.set_api_key("...")
        await session.send_message("hi")
        print(session.transcript[-1].text)
    """

    def __init__(
        self,
        credential_store: CredentialStore,
        service_factory: ServiceFactory | None = None,
        default_model: str = DEFAULT_MODEL,
        starter: str | None = DEFAULT_STARTER,
    ) -> None:
        self._store = credential_store
        self._service_factory = service_factory or _default_service_factory
        self._config = SessionConfig(model_id=default_model)
        self._transcript: list[Message] = [Message(role=Role.MODEL, text=WELCOME_TEXT)]
        self._input = starter or ""
        self._state = RequestState.IDLE
        self._error = ""
        self._service: CompletionService | None = None
        self._service_key: str | None = None
        self._retired_services: list[CompletionService] = []
        self._change_callback: Callable[[], None] | None = None
        self._debug_callback: Callable[[str, str, str], None] | None = None

        saved = self._store.get(API_KEY_STORAGE_KEY)
        if saved:
            self._config.api_key = saved

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------

    def set_change_callback(self, callback: Callable[[], None] | None) -> None:
        """Set the callback invoked after every state change."""
        self._change_callback = callback

    def set_debug_callback(self, callback: Callable[[str, str, str], None] | None) -> None:
        """Set the debug callback for execution logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Session", message)

    def _notify(self) -> None:
        if self._change_callback:
            self._change_callback()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def transcript(self) -> tuple[Message, ...]:
        """The conversation so far, oldest first."""
        return tuple(self._transcript)

    @property
    def config(self) -> SessionConfig:
        """A copy of the current settings."""
        return self._config.model_copy()

    @property
    def model_id(self) -> str:
        return self._config.model_id

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def remember_key(self) -> bool:
        return self._config.remember_key

    @property
    def input(self) -> str:
        """Current composer buffer."""
        return self._input

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_pending(self) -> bool:
        return self._state is RequestState.PENDING

    @property
    def error(self) -> str:
        """Last error message, empty when there is none."""
        return self._error

    @property
    def can_submit(self) -> bool:
        """Whether the composer's submit control should be enabled."""
        return not self.is_pending and bool(self._input.strip()) and bool(self._config.api_key)

    # ------------------------------------------------------------------
    # User edits
    # ------------------------------------------------------------------

    def set_input(self, text: str) -> None:
        """Replace the composer buffer."""
        self._input = text
        self._notify()

    def set_model_id(self, model_id: str) -> None:
        """Change the model used for subsequent requests."""
        self._config.model_id = model_id
        self._notify()

    def set_api_key(self, value: str, persist: bool = True) -> None:
        """Change the API key, mirroring it to the store when remembered.

        Args:
            value: New API key, empty to clear it
            persist: False to keep the key in memory only, whatever remember_key says
        """
        self._config.api_key = value
        if persist and self._config.remember_key:
            self._store.set(API_KEY_STORAGE_KEY, value)
        self._notify()

    def set_remember_key(self, remember: bool) -> None:
        """Toggle persistence of the API key.

        Turning it off deletes the stored key but keeps the in-memory one.
        Turning it on writes a non-empty in-memory key back to the store.
        """
        self._config.remember_key = remember
        if not remember:
            self._store.remove(API_KEY_STORAGE_KEY)
            self._debug("info", "Stored API key removed")
        elif self._config.api_key:
            self._store.set(API_KEY_STORAGE_KEY, self._config.api_key)
            self._debug("info", "API key stored")
        self._notify()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def _get_service(self) -> CompletionService | None:
        """Return the service for the current key, building it on first use."""
        key = self._config.api_key
        if not key:
            return None
        if self._service_key == key:
            return self._service

        if self._service is not None:
            self._retired_services.append(self._service)
        self._service_key = key
        try:
            self._service = self._service_factory(key)
        except Exception as e:
            self._service = None
            self._debug("warning", f"Completion service unavailable: {describe_error(e)}")
        return self._service

    async def send_message(self, message: str | None = None) -> bool:
        """Send a message and append the reply to the transcript.

        Args:
            message: Text to send; the composer buffer is used when None

        Returns:
            True if a request was dispatched, False if the attempt was
            ignored or rejected for a missing API key or model id
        """
        content = (message if message is not None else self._input).strip()
        if not content or self.is_pending:
            return False

        service = self._get_service()
        if service is None:
            self._error = MISSING_KEY_ERROR
            self._debug("warning", "Send rejected: no usable API key")
            self._notify()
            return False

        if not self._config.model_id.strip():
            self._error = MISSING_MODEL_ERROR
            self._debug("warning", "Send rejected: no model id")
            self._notify()
            return False

        self._error = ""
        self._state = RequestState.PENDING
        self._transcript.append(Message(role=Role.USER, text=content))
        self._input = ""
        self._notify()

        history = [m.to_content() for m in self._transcript]
        model_id = self._config.model_id
        self._debug("info", f"Requesting {model_id} with {len(history)} message(s)")

        try:
            result = await service.generate(model_id, history)
            reply = result.text or NO_CONTENT_PLACEHOLDER
            self._transcript.append(Message(role=Role.MODEL, text=reply))
            self._debug("info", f"Reply received ({len(reply)} chars)")
        except Exception as e:
            self._error = describe_error(e)
            self._debug("error", f"Request failed: {self._error}")
        finally:
            self._state = RequestState.IDLE
            self._notify()

        return True

    async def close(self) -> None:
        """Close every completion service this session has built."""
        services: list[CompletionService] = [*self._retired_services]
        if self._service is not None:
            services.append(self._service)
        self._retired_services = []
        self._service = None
        self._service_key = None
        for service in services:
            await service.close()
