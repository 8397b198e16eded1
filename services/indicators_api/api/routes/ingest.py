"""
Ingest API routes

The producer pushes whole series here; each series in the payload
replaces the stored one. The body is fully validated before the
store is touched, so a malformed payload never applies partially.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from shared.models.sgs import SeriesPayload, decode_series_payload
from shared.utils.logger import get_logger

from ..schemas import IngestResponse
from ..dependencies import get_store
from ...config import settings
from ...core.exceptions import MalformedPayloadError
from ...core.store import TimeSeriesStore

logger = get_logger(__name__)

router = APIRouter(tags=["ingest"])


def parse_ingest_payload(body: bytes) -> SeriesPayload:
    """
    Decode a raw ingest body into series id -> observations

    Raises:
        MalformedPayloadError: if the body is not valid JSON of that shape
    """
    try:
        return decode_series_payload(body)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        ]
        raise MalformedPayloadError("Invalid ingest payload", errors) from e


@router.post(settings.ingest_path, response_model=IngestResponse)
async def ingest_series(
    request: Request,
    store: TimeSeriesStore = Depends(get_store),
):
    """
    Replace one or more series

    Body: `{"433": [{"data": "01/01/2024", "valor": "5.25"}, ...], ...}`
    """
    body = await request.body()

    try:
        payload = parse_ingest_payload(body)
    except MalformedPayloadError as e:
        logger.warning("ingest_payload_rejected", errors=e.errors[:10])
        raise HTTPException(
            status_code=400,
            detail={"message": str(e), "errors": e.errors},
        )

    # Replacing takes the store's write lock; keep it off the event loop
    series_updated = await run_in_threadpool(store.replace_many, payload)
    observations = sum(len(obs) for obs in payload.values())

    logger.info("ingest_completed", series_updated=series_updated, observations=observations)

    return IngestResponse(series_updated=series_updated, observations=observations)
