"""
Domain exceptions for Resume Assist API.

Services raise these; routes translate them into HTTP responses.
"""


class ResumeAssistError(Exception):
    """Base class for all domain errors."""


class ValidationError(ResumeAssistError):
    """A required input is missing."""


class ExtractionError(ResumeAssistError):
    """The uploaded document could not be converted to text."""


class GenerationError(ResumeAssistError):
    """The generation service failed or returned unusable output."""
