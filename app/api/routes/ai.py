"""
Generation endpoints: resume summary, experience and project bullets.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_generator
from app.core.errors import GenerationError
from app.core.rate_limit import generation_rate_limit
from app.llm.provider import TextGenerator
from app.schemas.ai import (
    SummaryRequest,
    SummaryResponse,
    ExperienceRequest,
    ProjectRequest,
    DescriptionResponse,
)
from app.services.ai_engine import (
    generate_summary,
    generate_experience_description,
    generate_project_description,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["AI"], dependencies=[Depends(generation_rate_limit)])


@router.post("/generate-summary", response_model=SummaryResponse)
def summary(body: SummaryRequest, generator: TextGenerator = Depends(get_generator)):
    try:
        text = generate_summary(generator, body.experience, body.skills)
    except GenerationError as e:
        logger.error(f"Error generating summary: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while generating the summary."
        )
    return {"summary": text}


@router.post("/generate-experience", response_model=DescriptionResponse)
def experience(body: ExperienceRequest, generator: TextGenerator = Depends(get_generator)):
    try:
        text = generate_experience_description(generator, body.role, body.company)
    except GenerationError as e:
        logger.error(f"Error generating experience description: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while generating the experience description."
        )
    return {"description": text}


@router.post("/generate-project", response_model=DescriptionResponse)
def project(body: ProjectRequest, generator: TextGenerator = Depends(get_generator)):
    try:
        text = generate_project_description(generator, body.name)
    except GenerationError as e:
        logger.error(f"Error generating project description: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while generating the project description."
        )
    return {"description": text}
