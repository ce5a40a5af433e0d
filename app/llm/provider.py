"""
Text generation interface for abstracting LLM implementations.
"""
from abc import ABC, abstractmethod

from app.core.errors import GenerationError


class TextGenerator(ABC):
    """Opaque text-in/text-out generation capability."""

    name: str = "base"

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Generate a completion for a single prompt.

        Args:
            prompt: Full instruction text sent to the model

        Returns:
            The generated text

        Raises:
            GenerationError: if the service call fails or returns no text
        """
        pass


def generate_text(generator: TextGenerator, prompt: str) -> str:
    """
    Call a generator, normalizing every failure to GenerationError.

    Raises:
        GenerationError: the call raised, or returned something other than text
    """
    try:
        text = generator.generate(prompt)
    except GenerationError:
        raise
    except Exception as e:
        raise GenerationError(f"Generation failed: {e}") from e

    if not isinstance(text, str):
        raise GenerationError("Generation service returned no text")
    return text
