from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Storage
    STORE_BACKEND: str = "memory"  # "memory" or "redis"
    REDIS_URL: str = "redis://localhost:6379"

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Tool-call protocol
    SERVER_NAME: str = "mcpolice"
    SERVER_VERSION: str = "1.0.0"
    SERVER_DESCRIPTION: str = "International AI Compliance Monitoring System"
    DEFAULT_PROTOCOL_VERSION: str = "2024-11-05"
    DISCOVERY_PROTOCOL_VERSION: str = "2025-03-26"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 1000

    class Config:
        env_file = ".env"
        extra = "allow"  # Allow extra environment variables


settings = Settings()
