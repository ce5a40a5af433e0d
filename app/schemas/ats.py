from pydantic import BaseModel, Field


class ATSScoreResponse(BaseModel):
    """Response model for the ATS keyword-match score."""
    score: int = Field(..., ge=0, le=100, description="Percentage of job keywords found in the resume")
