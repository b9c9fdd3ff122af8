"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

# Used only when JWT_SECRET is unset outside production
DEV_JWT_SECRET = "careerion-dev-secret-change-me"
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"


class Settings(BaseSettings):
    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "careerion"

    # Google Gemini
    gemini_api_key: str = ""
    gemini_model: str = ""

    # JWT Auth
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7

    # Google OAuth verification endpoints
    google_userinfo_url: str = "https://www.googleapis.com/oauth2/v3/userinfo"
    google_tokeninfo_url: str = "https://oauth2.googleapis.com/tokeninfo"
    google_timeout_seconds: float = 10.0

    # App
    environment: str = "development"
    port: int = 5001
    debug: bool = False
    seed_sample_data: bool = True
    cors_origins: List[str] = ["*"]

    @property
    def model_name(self) -> str:
        """Gemini model id with any leading 'models/' prefix stripped."""
        name = self.gemini_model.strip()
        if name.startswith("models/"):
            name = name[len("models/"):]
        return name or DEFAULT_GEMINI_MODEL

    @property
    def signing_secret(self) -> str:
        return self.jwt_secret or DEV_JWT_SECRET

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def mask_key(key: str) -> str:
    """Mask a secret for logging, keeping a short prefix and suffix."""
    if not key:
        return ""
    if len(key) <= 8:
        return "*" * (len(key) - 2) + key[-2:] if len(key) > 2 else key
    return key[:6] + "*" * (len(key) - 8) + key[-2:]
