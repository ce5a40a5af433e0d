"""
OpenAI provider implementation.
"""
import logging
from typing import Optional
from openai import OpenAI, APIError

from app.core.config import OPENAI_API_KEY, OPENAI_MODEL
from app.core.errors import GenerationError
from app.llm.provider import TextGenerator

logger = logging.getLogger(__name__)


class OpenAIProvider(TextGenerator):
    """OpenAI provider using official OpenAI SDK."""

    name = "openai"

    def __init__(self, api_key: Optional[str] = None, model: str = OPENAI_MODEL, client=None):
        self.api_key = api_key or OPENAI_API_KEY
        if client is None and not self.api_key:
            raise GenerationError("OPENAI_API_KEY not configured")
        self.model = model
        self.client = client or OpenAI(api_key=self.api_key)
        logger.info(f"OpenAI provider initialized (model={self.model})")

    def generate(self, prompt: str) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=2000,
            )
        except APIError as e:
            logger.error(f"OpenAI API error: {e}", exc_info=True)
            raise GenerationError(f"OpenAI API error: {e}") from e

        content = response.choices[0].message.content
        if not isinstance(content, str):
            raise GenerationError("OpenAI returned no text content")
        return content
