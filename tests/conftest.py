"""
Shared fixtures: a stub generator and in-memory PDFs.
"""
import os
import tempfile

# Keep test runs from writing into the working tree or reading a real key
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="resume-assist-logs-"))
os.environ["LLM_PROVIDER"] = "openai"
os.environ["TRUST_PROXY_HEADERS"] = "false"

import fitz  # pymupdf
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_generator
from app.core.rate_limit import reset_rate_limits
from app.llm.provider import TextGenerator
from app.main import app


class StubGenerator(TextGenerator):
    """Returns a fixed response and records every prompt."""

    name = "stub"

    def __init__(self, response="", error=None):
        self.response = response
        self.error = error
        self.prompts = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF containing the given text."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def stub():
    return StubGenerator()


@pytest.fixture
def client(stub):
    reset_rate_limits()
    app.dependency_overrides[get_generator] = lambda: stub
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        reset_rate_limits()
