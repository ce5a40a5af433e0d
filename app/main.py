import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# ✅ Import All API Routes
from app.api.routes import ai, ats, health
from app.core.config import CORS_ORIGINS, LOG_LEVEL, PORT, settings_snapshot
from app.core.logging_config import sanitize_log_data, setup_logging

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.info(f"Starting with settings: {sanitize_log_data(settings_snapshot())}")


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Resume Assist API")

# ✅ CORS — ONLY ALLOW THE RESUME BUILDER FRONTEND
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(ai.router)
app.include_router(ats.router)
app.include_router(health.router)


# ============================================
# ✅ ROOT ENDPOINT
# ============================================

@app.get("/")
def root():
    return {"status": "Resume Assist API running"}


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    logger.info(f"Backend server starting on http://localhost:{PORT}")
    uvicorn.run("app.main:app", host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
