from typing import Any

from app.llm.provider import TextGenerator, generate_text
from app.services.prompts import experience_prompt, project_prompt, summary_prompt


# ✅ PROFESSIONAL SUMMARY
def generate_summary(generator: TextGenerator, experience: Any, skills: Any) -> str:
    return generate_text(generator, summary_prompt(experience, skills))


# ✅ EXPERIENCE DESCRIPTION
def generate_experience_description(generator: TextGenerator, role: str, company: str) -> str:
    return generate_text(generator, experience_prompt(role, company))


# ✅ PROJECT DESCRIPTION
def generate_project_description(generator: TextGenerator, name: str) -> str:
    return generate_text(generator, project_prompt(name))
