"""
Centralized configuration using Pydantic Settings
Loads from environment variables and .env file
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings
    All settings can be overridden by environment variables
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow"
    )

    # =============================================
    # SERVICES
    # =============================================
    indicators_api_host: str = Field(default="indicators_api", description="Indicators API host")
    indicators_api_port: int = Field(default=8080, description="Indicators API port")

    # =============================================
    # LOGGING
    # =============================================
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    # =============================================
    # DEVELOPMENT
    # =============================================
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="production", description="Environment")

    # =============================================
    # HELPER METHODS
    # =============================================

    def get_service_url(self, service_name: str) -> Optional[str]:
        """Get full URL for a service"""
        service_map = {
            "indicators_api": f"http://{self.indicators_api_host}:{self.indicators_api_port}",
        }
        return service_map.get(service_name)


# Global settings instance
settings = Settings()
