import logging

import fitz  # pymupdf

from app.core.errors import ExtractionError

logger = logging.getLogger(__name__)


def extract_text(content: bytes) -> str:
    """Read the plain text of every page of an in-memory PDF."""
    try:
        doc = fitz.open(stream=content, filetype="pdf")
    except Exception as e:
        raise ExtractionError(f"Could not open resume document: {e}") from e

    text = ""
    try:
        for page in doc:
            text += page.get_text()
    except Exception as e:
        raise ExtractionError(f"Could not read resume text: {e}") from e
    finally:
        doc.close()

    logger.debug(f"Extracted {len(text)} characters from resume")
    return text
