"""
Indicators API routes
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from shared.utils.logger import get_logger

from ..schemas import SeriesCatalogResponse
from ..dependencies import get_store
from ...config import settings
from ...core.exceptions import InvalidDateFormatError, StoreEmptyError
from ...core.range_filter import DateRange
from ...core.store import TimeSeriesStore

logger = get_logger(__name__)

router = APIRouter(tags=["indicators"])


@router.get("/indicadores")
def get_indicators(
    data_inicial: Optional[str] = Query(None, alias="dataInicial", description="Start date DD/MM/YYYY (inclusive)"),
    data_final: Optional[str] = Query(None, alias="dataFinal", description="End date DD/MM/YYYY (inclusive)"),
    store: TimeSeriesStore = Depends(get_store),
) -> Dict[str, List[Dict[str, str]]]:
    """
    Get every stored series filtered to [dataInicial, dataFinal]

    Both bounds are optional. Without dataFinal the window runs one
    year past today. Series with nothing in the window are omitted;
    an empty object is a valid answer. Returns 404 only when no data
    was ever ingested.
    """
    try:
        date_range = DateRange.from_query(
            data_inicial,
            data_final,
            lookahead_days=settings.open_end_lookahead_days,
        )
    except InvalidDateFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        filtered = store.query_range(date_range)
    except StoreEmptyError as e:
        logger.warning("indicators_query_store_empty")
        raise HTTPException(status_code=404, detail=str(e))

    logger.info(
        "indicators_query",
        start=date_range.start.isoformat() if date_range.start else None,
        end=date_range.end.isoformat(),
        series_returned=len(filtered),
    )

    return {
        series_id: [observation.to_wire() for observation in observations]
        for series_id, observations in filtered.items()
    }


@router.get("/series", response_model=SeriesCatalogResponse)
def list_series(store: TimeSeriesStore = Depends(get_store)):
    """List stored series with observation counts and last update time"""
    return SeriesCatalogResponse(**store.stats())
