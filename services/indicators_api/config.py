"""
Indicators API Service Configuration
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="INDICATORS_API_",
        env_file=".env",
        extra="ignore",
    )

    # Service
    service_name: str = "indicators_api"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False

    # API
    api_prefix: str = "/api/v1"
    ingest_path: str = "/dados/sgs"

    # Query
    open_end_lookahead_days: int = 365  # open dataFinal = today + 1 year

    # CORS
    cors_origins: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
