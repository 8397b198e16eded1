"""
Shared route dependencies
"""

from typing import Optional

from fastapi import HTTPException

from ..core.store import TimeSeriesStore

# Store instance (initialized in main.py lifespan)
_store: Optional[TimeSeriesStore] = None


def get_store() -> TimeSeriesStore:
    """Dependency to get the time series store"""
    if _store is None:
        raise HTTPException(status_code=503, detail="Time series store not initialized")
    return _store


def set_store(store: Optional[TimeSeriesStore]) -> None:
    """Set the store instance (called from main.py)"""
    global _store
    _store = store
