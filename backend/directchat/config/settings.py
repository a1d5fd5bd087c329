"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    DEBUG = _flag("DEBUG", "false")

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "2022"))
    APP_ENV = os.getenv("APP_ENV", "development")

    # Postgresql Database settings (read by Prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Auth
    JWT_SECRET = os.getenv("JWT_SECRET", "directchat-development-secret-change-me")
    JWT_ISSUER = os.getenv("JWT_ISSUER", "directchat")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "directchat-clients")
    TOKEN_TTL_HOURS: int = int(os.getenv("TOKEN_TTL_HOURS", "24"))
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))
    PASSWORD_MIN_LENGTH: int = int(os.getenv("PASSWORD_MIN_LENGTH", "8"))

    # File upload
    UPLOAD_BASE = os.getenv("UPLOAD_BASE", "uploads")
    MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "50"))

    # Listing defaults
    MESSAGE_PAGE_SIZE: int = int(os.getenv("MESSAGE_PAGE_SIZE", "50"))
    USER_SEARCH_LIMIT: int = int(os.getenv("USER_SEARCH_LIMIT", "100"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )
