"""
ATS keyword-match scorer.

Asks the generation service for the key requirements of a job description,
then checks which of them appear literally in the resume text.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from app.core.errors import ValidationError
from app.llm.provider import TextGenerator, generate_text
from app.services.prompts import keywords_prompt
from app.services.resume_parser import extract_text

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Resume file and job description are required."


@dataclass
class ATSResult:
    score: int
    keywords: List[str] = field(default_factory=list)
    matched: List[str] = field(default_factory=list)


def parse_keywords(text: str) -> List[str]:
    """Split a comma-separated response into trimmed, lower-cased keywords."""
    keywords = [kw.strip().lower() for kw in text.split(",")]
    # an empty keyword would match every resume
    return [kw for kw in keywords if kw]


def count_matches(resume_text: str, keywords: List[str]) -> List[str]:
    """Keywords found as literal substrings of the resume (case-insensitive)."""
    resume_lower = resume_text.lower()
    return [kw for kw in keywords if kw in resume_lower]


def compute_score(match_count: int, keyword_count: int) -> int:
    """Percentage of matched keywords, rounded half-up. Zero keywords score 0."""
    if keyword_count <= 0:
        return 0
    return int(math.floor(100 * match_count / keyword_count + 0.5))


def score_resume_text(resume_text: str, keywords: List[str]) -> ATSResult:
    matched = count_matches(resume_text, keywords)
    if not keywords:
        logger.warning("No usable keywords extracted from job description; scoring 0")
    return ATSResult(
        score=compute_score(len(matched), len(keywords)),
        keywords=list(keywords),
        matched=matched,
    )


class ATSScorer:
    """Scores a resume document against a job description."""

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    def extract_keywords(self, job_description: str) -> List[str]:
        return parse_keywords(generate_text(self.generator, keywords_prompt(job_description)))

    def calculate(self, job_description: Optional[str], resume_document: Optional[bytes]) -> ATSResult:
        """
        Score a resume against a job description.

        Raises:
            ValidationError: either input is missing
            ExtractionError: the document could not be parsed
            GenerationError: keyword extraction failed
        """
        if not resume_document or not job_description or not job_description.strip():
            raise ValidationError(MISSING_INPUT_MESSAGE)

        resume_text = extract_text(resume_document)
        keywords = self.extract_keywords(job_description)
        result = score_resume_text(resume_text, keywords)

        logger.info(
            f"ATS score {result.score} ({len(result.matched)}/{len(result.keywords)} keywords matched)"
        )
        return result
