"""Pytest configuration and shared fixtures."""
import asyncio
import os

import pytest

from brochat.credentials import InMemoryCredentialStore
from brochat.llm import CompletionResult, CompletionService, Content
from brochat.session import ChatSession


class FakeCompletionService(CompletionService):
    """Completion service stub that records calls.

    Replies with ``reply`` or raises ``error``. When ``gate`` is set, each
    call waits on it before answering.
    """

    def __init__(
        self,
        reply: str | None = "hello",
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ):
        self.reply = reply
        self.error = error
        self.gate = gate
        self.calls: list[tuple[str, list[Content]]] = []
        self.closed = False

    async def generate(self, model_id: str, transcript: list[Content]) -> CompletionResult:
        self.calls.append((model_id, list(transcript)))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return CompletionResult(text=self.reply, model=model_id)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {"gemini": os.getenv("GEMINI_API_KEY")}


@pytest.fixture
def store():
    """Empty in-memory credential store."""
    return InMemoryCredentialStore()


@pytest.fixture
def fake_service():
    return FakeCompletionService()


@pytest.fixture
def session(store, fake_service):
    """Session with an API key whose factory always returns ``fake_service``."""
    chat = ChatSession(store, service_factory=lambda key: fake_service)
    chat.set_api_key("test-key")
    return chat


@pytest.fixture
def make_service():
    """Factory for completion service stubs with custom behavior."""
    return FakeCompletionService
