"""
Prompt templates sent to the generation service.
"""
import json
from typing import Any

KEYWORD_COUNT = 15


def _render(value: Any) -> str:
    """Inline a JSON value the way a template string would: lists join on commas."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(_render(item) for item in value)
    return str(value)


# ✅ PROFESSIONAL SUMMARY
def summary_prompt(experience: Any, skills: Any) -> str:
    return f"""
Based on the following work experience and skills, generate a compelling and professional resume summary.
The summary should be a single paragraph, 3-4 sentences long.
Highlight the key qualifications and align them with a professional tone.

Work Experience: {json.dumps(experience)}
Skills: {_render(skills)}
"""


# ✅ EXPERIENCE BULLETS
def experience_prompt(role: str, company: str) -> str:
    return (
        f'Generate 3 concise, action-oriented bullet points for a resume describing the role of "{role}" '
        f'at "{company}". Start each bullet point on a new line and begin with \'• \'. '
        f"Do not use any other formatting."
    )


# ✅ PROJECT BULLETS
def project_prompt(name: str) -> str:
    return (
        f'Generate 2-3 concise, results-oriented bullet points for a resume project named "{name}". '
        f"Start each bullet point on a new line and begin with '• '. Do not use any other formatting."
    )


# ✅ JD KEYWORD EXTRACTION
def keywords_prompt(job_description: str) -> str:
    return f"""
From the following job description, extract the top {KEYWORD_COUNT} most important technical skills,
soft skills, and qualifications. Return them as a simple comma-separated list.
Do not add any extra explanation or formatting.

Job Description: "{job_description}"
"""
