"""Response schemas"""

from pydantic import BaseModel, Field
from typing import Dict, Any


class IngestResponse(BaseModel):
    """Result of an ingest request"""

    status: str = Field(default="ok", description="'ok' when every series was replaced")
    series_updated: int = Field(..., description="Number of series replaced")
    observations: int = Field(..., description="Total observations received")


class SeriesInfo(BaseModel):
    """Summary of one stored series"""

    observations: int
    updated_at: str = Field(..., description="UTC time of the last replace (ISO 8601)")


class SeriesCatalogResponse(BaseModel):
    """Stored series without their data"""

    series_count: int
    observation_count: int
    series: Dict[str, SeriesInfo] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health check payload"""

    status: str
    service: str
    version: str
    stats: Dict[str, Any]
