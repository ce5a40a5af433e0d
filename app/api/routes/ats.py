import logging
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from app.api.deps import get_generator
from app.core.errors import ExtractionError, GenerationError, ValidationError
from app.llm.provider import TextGenerator
from app.schemas.ats import ATSScoreResponse
from app.services.ats_engine import ATSScorer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ATS"])


@router.post("/calculate-ats", response_model=ATSScoreResponse)
def calculate_ats(
    resume: Optional[UploadFile] = File(None),
    job_description: Optional[str] = Form(None, alias="jobDescription"),
    generator: TextGenerator = Depends(get_generator),
):
    resume_bytes = resume.file.read() if resume is not None else None

    try:
        result = ATSScorer(generator).calculate(job_description, resume_bytes)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except (ExtractionError, GenerationError) as e:
        logger.error(f"Error calculating ATS score: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while calculating the ATS score."
        )

    return {"score": result.score}
