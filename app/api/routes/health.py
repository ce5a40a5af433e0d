"""
Health check endpoint for deployment monitoring.
"""
from fastapi import APIRouter
from datetime import datetime, timezone

from app.core.config import LLM_PROVIDER, GEMINI_API_KEY, OPENAI_API_KEY

router = APIRouter(prefix="/health", tags=["Health"])

API_VERSION = "1.0.0"


@router.get("")
def health_check():
    """
    Report liveness and whether the generation provider has credentials.

    Always 200; "degraded" means generation calls will fail.
    """
    key = {"openai": OPENAI_API_KEY, "gemini": GEMINI_API_KEY}.get(LLM_PROVIDER)

    return {
        "status": "healthy" if key else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "llm_provider": LLM_PROVIDER,
        "llm_configured": bool(key),
        "version": API_VERSION,
    }
