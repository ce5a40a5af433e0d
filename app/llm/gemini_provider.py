"""
Google Gemini provider implementation.
"""
import logging
from typing import Optional
from google import genai
from google.genai import errors

from app.core.config import GEMINI_API_KEY, GEMINI_MODEL
from app.core.errors import GenerationError
from app.llm.provider import TextGenerator

logger = logging.getLogger(__name__)


class GeminiProvider(TextGenerator):
    """Gemini provider using the google-genai SDK."""

    name = "gemini"

    def __init__(self, api_key: Optional[str] = None, model: str = GEMINI_MODEL, client=None):
        self.api_key = api_key or GEMINI_API_KEY
        if client is None and not self.api_key:
            raise GenerationError("GEMINI_API_KEY not configured")
        self.model = model
        self.client = client or genai.Client(api_key=self.api_key)
        logger.info(f"Gemini provider initialized (model={self.model})")

    def generate(self, prompt: str) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except errors.APIError as e:
            logger.error(f"Gemini API error: {e}", exc_info=True)
            raise GenerationError(f"Gemini API error: {e}") from e

        text = response.text
        if not isinstance(text, str):
            raise GenerationError("Gemini returned no text content")
        return text
