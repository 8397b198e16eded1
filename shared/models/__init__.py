"""
Pydantic models for data validation and serialization
"""

from .sgs import *

__all__ = [
    # SGS models
    "Observation",
    "SeriesPayload",
    "series_payload_adapter",
    "IngestBody",
    "ingest_body_adapter",
    "decode_series_payload",
    "observation_list_adapter",
    "parse_sgs_date",
    "format_sgs_date",
    "SGS_DATE_FORMAT",
]
