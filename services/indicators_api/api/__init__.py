"""HTTP layer of the indicators API"""

from .dependencies import get_store, set_store
from .routes import ingest_router, indicators_router

__all__ = ["get_store", "set_store", "ingest_router", "indicators_router"]
