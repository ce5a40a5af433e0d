"""
Tests for generation providers and provider selection, using fake SDK clients.
"""
from types import SimpleNamespace

import pytest

from app.core.errors import GenerationError
from app.llm import router
from app.llm.gemini_provider import GeminiProvider
from app.llm.openai_provider import OpenAIProvider
from app.llm.provider import generate_text


class FakeOpenAIClient:
    def __init__(self, content):
        self.calls = []
        message = SimpleNamespace(content=content)
        self._response = SimpleNamespace(choices=[SimpleNamespace(message=message)])
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        return self._response


class FakeGeminiClient:
    def __init__(self, text):
        self.calls = []
        self._response = SimpleNamespace(text=text)
        self.models = SimpleNamespace(generate_content=self._generate_content)

    def _generate_content(self, **kwargs):
        self.calls.append(kwargs)
        return self._response


def test_openai_provider_sends_single_user_message():
    fake = FakeOpenAIClient("python, sql")
    provider = OpenAIProvider(api_key="sk-test", model="gpt-4o-mini", client=fake)

    assert provider.generate("extract keywords") == "python, sql"
    assert fake.calls[0]["model"] == "gpt-4o-mini"
    assert fake.calls[0]["messages"] == [{"role": "user", "content": "extract keywords"}]


def test_openai_provider_empty_content():
    provider = OpenAIProvider(api_key="sk-test", client=FakeOpenAIClient(None))
    with pytest.raises(GenerationError):
        provider.generate("prompt")


def test_openai_provider_requires_key(monkeypatch):
    monkeypatch.setattr("app.llm.openai_provider.OPENAI_API_KEY", None)
    with pytest.raises(GenerationError, match="OPENAI_API_KEY"):
        OpenAIProvider()


def test_gemini_provider_generate():
    fake = FakeGeminiClient("leadership")
    provider = GeminiProvider(api_key="g-test", model="gemini-1.5-flash", client=fake)

    assert provider.generate("prompt") == "leadership"
    assert fake.calls[0] == {"model": "gemini-1.5-flash", "contents": "prompt"}


def test_gemini_provider_requires_key(monkeypatch):
    monkeypatch.setattr("app.llm.gemini_provider.GEMINI_API_KEY", None)
    with pytest.raises(GenerationError, match="GEMINI_API_KEY"):
        GeminiProvider()


def test_build_text_generator_unknown_provider():
    with pytest.raises(GenerationError, match="Unknown LLM_PROVIDER"):
        router.build_text_generator("llama")


def test_configured_generator_surfaces_missing_key(monkeypatch):
    monkeypatch.setattr("app.llm.openai_provider.OPENAI_API_KEY", None)
    monkeypatch.setattr(router, "LLM_PROVIDER", "openai")
    router.get_text_generator.cache_clear()
    try:
        with pytest.raises(GenerationError):
            router.ConfiguredGenerator().generate("prompt")
    finally:
        router.get_text_generator.cache_clear()


def test_generate_text_wraps_unexpected_errors():
    class Broken:
        def generate(self, prompt):
            raise ConnectionError("reset by peer")

    with pytest.raises(GenerationError, match="reset by peer"):
        generate_text(Broken(), "prompt")
