"""
SGS Collector Configuration
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Dict

from shared.config.settings import settings as shared_settings


# SGS series codes collected by default
SGS_SERIES: Dict[str, str] = {
    "433": "IPCA - monthly inflation",
    "1178": "SELIC - daily annualized rate",
    "1": "USD/BRL - daily selling rate",
}


def _default_ingest_url() -> str:
    return f"{shared_settings.get_service_url('indicators_api')}/dados/sgs"


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="SGS_COLLECTOR_",
        env_file=".env",
        extra="ignore",
    )

    # Service
    service_name: str = "sgs_collector"

    # SGS API
    sgs_base_url: str = "https://api.bcb.gov.br/dados/serie"
    series: Dict[str, str] = SGS_SERIES
    lookback_days: int = 365 * 5  # 5 years
    request_timeout: float = 30.0
    max_parallel_downloads: int = 3

    # Indicators API
    ingest_url: str = ""

    def get_ingest_url(self) -> str:
        return self.ingest_url or _default_ingest_url()


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
