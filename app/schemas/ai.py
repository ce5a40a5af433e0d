"""
Pydantic schemas for generation endpoints.
"""
from typing import Any
from pydantic import BaseModel, Field


class SummaryRequest(BaseModel):
    """Request model for professional summary generation."""
    experience: Any = Field(None, description="Work experience entries, any JSON shape")
    skills: Any = Field(None, description="Skills as free text or a list of skill names")

    class Config:
        json_schema_extra = {
            "example": {
                "experience": [{"role": "Backend Engineer", "company": "Tech Corp", "years": 3}],
                "skills": "Python, FastAPI, PostgreSQL"
            }
        }


class SummaryResponse(BaseModel):
    summary: str


class ExperienceRequest(BaseModel):
    """Request model for experience bullet generation."""
    role: str = Field(..., description="Job title")
    company: str = Field(..., description="Company name")


class ProjectRequest(BaseModel):
    """Request model for project bullet generation."""
    name: str = Field(..., description="Project name")


class DescriptionResponse(BaseModel):
    description: str
