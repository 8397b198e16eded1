"""
Indicators API Service
Receives SGS indicator series from the collector and serves them,
filtered by date range, to frontend consumers
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from shared.utils.logger import get_logger, configure_logging

from .config import settings
from .core.store import TimeSeriesStore
from .api import ingest_router, indicators_router, get_store, set_store
from .api.schemas import HealthResponse

# Configure logging
configure_logging(service_name=settings.service_name)
logger = get_logger(__name__)


# =============================================
# LIFECYCLE
# =============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for the service"""
    logger.info("starting_indicators_api", port=settings.port)

    # The store lives for the whole process; nothing is persisted
    set_store(TimeSeriesStore())

    logger.info("indicators_api_ready")

    yield

    set_store(None)
    logger.info("indicators_api_stopped")


app = FastAPI(
    title="Indicators API",
    description="In-memory relay for SGS financial indicator series",
    version=settings.version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(ingest_router)
app.include_router(indicators_router, prefix=settings.api_prefix)


# =============================================
# API ENDPOINTS
# =============================================

@app.get("/health", response_model=HealthResponse)
def health_check(store: TimeSeriesStore = Depends(get_store)):
    """Health check endpoint"""
    # one snapshot so both counts come from the same store state
    stats = store.stats()
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=settings.version,
        stats={
            "series_count": stats["series_count"],
            "observation_count": stats["observation_count"],
        },
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Indicators API",
        "version": settings.version,
        "docs": "/docs",
        "health": "/health",
    }


# =============================================
# ENTRY POINT
# =============================================

def run() -> None:
    uvicorn.run(
        "services.indicators_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
