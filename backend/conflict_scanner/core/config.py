"""
Conflict Scanner
Application Configuration
"""
from pydantic_settings import BaseSettings
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Conflict Scanner"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # NewsAPI
    NEWS_API_KEY: Optional[str] = None
    NEWS_API_URL: str = "https://newsapi.org/v2/everything"
    NEWS_LANGUAGE: str = "en"
    NEWS_SORT_BY: str = "relevancy"
    NEWS_DEFAULT_PAGE_SIZE: int = 20
    NEWS_MAX_PAGE_SIZE: int = 100

    # OpenAI
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    ANALYSIS_TEMPERATURE: float = 0.3
    ANALYSIS_MAX_TOKENS: int = 2000
    EXTRACTION_TEMPERATURE: float = 0.1
    EXTRACTION_MAX_TOKENS: int = 1000
    MAX_CONFLICTS: int = 10

    # Document handling
    MAX_DOCUMENT_CHARS: int = 15000
    MIN_EXTRACTED_TEXT_CHARS: int = 20
    MAX_UPLOAD_SIZE_MB: int = 20

    # External party-extraction workflow (n8n webhook)
    PARTY_EXTRACTION_WEBHOOK_URL: Optional[str] = None

    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # CORS Origins
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def max_upload_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024


settings = Settings()
