"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    # App settings
    DEBUG = _env_flag("DEBUG")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))
    CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Persistence: "memory" (process-local) or "prisma" (PostgreSQL)
    MESSAGE_STORE: str = os.getenv("MESSAGE_STORE", "memory").lower()

    # Postgresql Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
