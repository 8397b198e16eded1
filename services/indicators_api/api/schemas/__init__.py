"""Pydantic schemas for API"""

from .responses import IngestResponse, SeriesInfo, SeriesCatalogResponse, HealthResponse

__all__ = [
    "IngestResponse",
    "SeriesInfo",
    "SeriesCatalogResponse",
    "HealthResponse",
]
