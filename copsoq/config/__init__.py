"""
Application Settings
Load from environment variables
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ======================
    # Scoring display
    # ======================
    SCORE_DECIMALS: int = 1

    # ======================
    # Laudo issuer
    # ======================
    REPORT_CITY: str = "São Paulo"
    ISSUER_NAME: str = "Dr. Marcelo Oliveira"
    ISSUER_TITLE: str = "Psicólogo"
    ISSUER_REGISTRY: str = "CRP 06/123456"
    ISSUER_ORGANIZATION: str = "Responsável Técnico – BPS Brasil"

    # ======================
    # Guidance
    # ======================
    GUIDANCE_FILE: Optional[str] = None

    # ======================
    # Logging
    # ======================
    LOG_REDACT_IDENTIFIERS: bool = True

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )


settings = Settings()
