"""API routes"""

from .ingest import router as ingest_router
from .indicators import router as indicators_router

__all__ = ["ingest_router", "indicators_router"]
