"""
Provider selection for the generation service.
"""
import logging
from functools import lru_cache

from app.core.config import LLM_PROVIDER
from app.core.errors import GenerationError
from app.llm.provider import TextGenerator

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("openai", "gemini")


def build_text_generator(provider: str = LLM_PROVIDER) -> TextGenerator:
    """
    Construct the generator for a provider name.

    Raises:
        GenerationError: unknown provider or missing API key
    """
    if provider == "openai":
        from app.llm.openai_provider import OpenAIProvider
        return OpenAIProvider()
    if provider == "gemini":
        from app.llm.gemini_provider import GeminiProvider
        return GeminiProvider()

    raise GenerationError(
        f"Unknown LLM_PROVIDER '{provider}'. Expected one of: {', '.join(SUPPORTED_PROVIDERS)}"
    )


@lru_cache(maxsize=1)
def get_text_generator() -> TextGenerator:
    """Process-wide generator for the configured provider."""
    generator = build_text_generator(LLM_PROVIDER)
    logger.info(f"Using generation provider: {generator.name}")
    return generator


class ConfiguredGenerator(TextGenerator):
    """Resolves the configured provider on first use, so a missing key fails the call, not the request."""

    name = "configured"

    def generate(self, prompt: str) -> str:
        return get_text_generator().generate(prompt)
