from app.llm.provider import TextGenerator
from app.llm.router import ConfiguredGenerator


def get_generator() -> TextGenerator:
    """Generation service dependency; tests override it with a stub."""
    return ConfiguredGenerator()
