import os

from dotenv import load_dotenv

load_dotenv()

# ✅ Server
PORT = int(os.getenv("PORT", "5001"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]

# ✅ Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# ✅ Generation service
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

# ✅ Rate limiting (generation routes)
RATE_LIMIT_MAX_REQUESTS = int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "30"))
RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))
# Only honour X-Forwarded-For when deployed behind a proxy that sets it
TRUST_PROXY_HEADERS = os.getenv("TRUST_PROXY_HEADERS", "false").lower() in ("1", "true", "yes")


def settings_snapshot() -> dict:
    """Current settings, including secrets; sanitize before logging."""
    return {
        "port": PORT,
        "cors_origins": CORS_ORIGINS,
        "log_level": LOG_LEVEL,
        "log_dir": LOG_DIR,
        "llm_provider": LLM_PROVIDER,
        "openai_model": OPENAI_MODEL,
        "openai_api_key": OPENAI_API_KEY,
        "gemini_model": GEMINI_MODEL,
        "gemini_api_key": GEMINI_API_KEY,
        "rate_limit_max_requests": RATE_LIMIT_MAX_REQUESTS,
        "rate_limit_window_seconds": RATE_LIMIT_WINDOW_SECONDS,
        "trust_proxy_headers": TRUST_PROXY_HEADERS,
    }
