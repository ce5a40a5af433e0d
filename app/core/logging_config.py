"""
Logging setup: stdout plus a size-rotated file under LOG_DIR.
"""
import logging
import logging.config
from pathlib import Path

from app.core.config import LOG_DIR

REDACTED = "***REDACTED***"
SENSITIVE_MARKERS = ("password", "token", "secret", "api_key")
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "httpx", "openai", "google_genai")


def setup_logging(log_level: str = "INFO", log_dir: str = LOG_DIR):
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "short": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "short",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": str(log_path / "resume_assist.log"),
                "maxBytes": 10 * 1024 * 1024,
                "backupCount": 5,
                "formatter": "detailed",
            },
        },
        "root": {"level": level, "handlers": ["console", "file"]},
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
    })


def sanitize_log_data(data: dict) -> dict:
    """Copy of `data` with credential-looking values (at any depth) replaced."""
    sanitized = {}
    for key, value in data.items():
        if value and any(marker in key.lower() for marker in SENSITIVE_MARKERS):
            sanitized[key] = REDACTED
        elif isinstance(value, dict):
            sanitized[key] = sanitize_log_data(value)
        else:
            sanitized[key] = value
    return sanitized
