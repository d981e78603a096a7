"""Unit tests for the llm module."""
from types import SimpleNamespace

import pytest
from google.genai import types

from brochat.llm import (
    CompletionService,
    Content,
    GeminiProvider,
    Part,
    Role,
    create_completion_service,
)

TRANSCRIPT = [
    Content(role=Role.MODEL, parts=[Part(text="what's good?")]),
    Content(role=Role.USER, parts=[Part(text="hi")]),
]


def _response(*texts: str, usage: bool = True) -> types.GenerateContentResponse:
    candidates = []
    if texts:
        candidates = [types.Candidate(
            content=types.Content(role="model", parts=[types.Part(text=t) for t in texts])
        )]
    usage_metadata = None
    if usage:
        usage_metadata = types.GenerateContentResponseUsageMetadata(
            prompt_token_count=7,
            candidates_token_count=3,
            total_token_count=10,
        )
    return types.GenerateContentResponse(candidates=candidates, usage_metadata=usage_metadata)


def _stub_client(provider: GeminiProvider, response=None, error=None) -> list[dict]:
    """Replace the SDK client with a stub, returning the recorded calls."""
    calls = []

    async def generate_content(**kwargs):
        calls.append(kwargs)
        if error is not None:
            raise error
        return response

    provider._client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(
        generate_content=generate_content
    )))
    return calls


class TestCompletionServiceInterface:

    def test_service_is_abstract(self):
        """Test that CompletionService cannot be instantiated directly."""
        with pytest.raises(TypeError):
            CompletionService()  # type: ignore


class TestContent:

    def test_text_joins_parts(self):
        content = Content(role=Role.USER, parts=[Part(text="a"), Part(text="b")])
        assert content.text == "a\nb"

    def test_role_serializes_as_plain_string(self):
        dumped = TRANSCRIPT[1].model_dump(mode="json")
        assert dumped == {"role": "user", "parts": [{"text": "hi"}]}


class TestGeminiProvider:

    @pytest.mark.asyncio
    async def test_sends_whole_transcript(self):
        provider = GeminiProvider(api_key="fake-key")
        calls = _stub_client(provider, _response("hello"))

        result = await provider.generate("gemini-2.5-pro", TRANSCRIPT)

        assert result.text == "hello"
        assert result.model == "gemini-2.5-pro"
        assert result.usage == {"prompt_tokens": 7, "completion_tokens": 3, "total_tokens": 10}

        (call,) = calls
        assert call["model"] == "gemini-2.5-pro"
        assert [(c.role, [p.text for p in c.parts]) for c in call["contents"]] == [
            ("model", ["what's good?"]),
            ("user", ["hi"]),
        ]

    @pytest.mark.asyncio
    async def test_joins_text_parts(self):
        provider = GeminiProvider(api_key="fake-key")
        _stub_client(provider, _response("hel", "lo"))

        result = await provider.generate("gemini-2.5-flash", TRANSCRIPT)

        assert result.text == "hello"

    @pytest.mark.asyncio
    async def test_empty_response_has_no_text(self):
        provider = GeminiProvider(api_key="fake-key")
        calls = _stub_client(provider, _response(usage=False))

        result = await provider.generate("gemini-2.5-flash", TRANSCRIPT)

        assert result.text is None
        assert result.usage is None
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        provider = GeminiProvider(api_key="fake-key")
        _stub_client(provider, error=RuntimeError("quota exceeded"))

        with pytest.raises(RuntimeError, match="quota exceeded"):
            await provider.generate("gemini-2.5-flash", TRANSCRIPT)

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        async with GeminiProvider(api_key="fake-key") as provider:
            assert isinstance(provider, GeminiProvider)

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_generate_real_api(self, api_keys):
        """Integration test: Generate a reply with the real API."""
        if not api_keys["gemini"]:
            pytest.skip("GEMINI_API_KEY not set")

        async with GeminiProvider(api_key=api_keys["gemini"]) as provider:
            result = await provider.generate(
                "gemini-2.5-flash",
                [Content(role=Role.USER, parts=[Part(text="Reply with the single word: pong")])],
            )

        assert result.text
        assert "pong" in result.text.lower()


class TestCompletionFactory:

    def test_create_gemini(self):
        service = create_completion_service("Gemini", api_key="fake-key")
        assert isinstance(service, GeminiProvider)

    @pytest.mark.parametrize("config", [{}, {"api_key": ""}])
    def test_missing_key_raises_type_error(self, config):
        with pytest.raises(TypeError, match="requires 'api_key'"):
            create_completion_service("gemini", **config)

    def test_unknown_provider_raises_error(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_completion_service("openai", api_key="fake-key")
