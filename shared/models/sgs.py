"""
Pydantic models for Banco Central do Brasil SGS time series
Documentation: https://dadosabertos.bcb.gov.br/dataset/sgs
"""

import re
from datetime import datetime
from datetime import date as date_type
from typing import Optional, List, Dict
from pydantic import BaseModel, Field, ConfigDict, PrivateAttr, TypeAdapter


# SGS publishes dates as DD/MM/YYYY
SGS_DATE_FORMAT = "%d/%m/%Y"

_SGS_DATE_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}")


def parse_sgs_date(raw: str) -> date_type:
    """
    Parse a DD/MM/YYYY string into a calendar date

    Raises:
        ValueError: if the string is not a valid DD/MM/YYYY date
    """
    if not _SGS_DATE_PATTERN.fullmatch(raw):
        raise ValueError(f"'{raw}' does not match DD/MM/YYYY")
    return datetime.strptime(raw, SGS_DATE_FORMAT).date()


def format_sgs_date(value: date_type) -> str:
    """Format a calendar date as DD/MM/YYYY"""
    return value.strftime(SGS_DATE_FORMAT)


# =============================================
# OBSERVATION
# =============================================

class Observation(BaseModel):
    """
    Single (date, value) pair of an indicator series

    Serialized with the SGS field names ("data", "valor"); the
    english names are accepted on input as well. The value is opaque
    and never interpreted as a number.
    A missing field decodes as an empty string.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str = Field("", alias="data", description="Observation date (DD/MM/YYYY)")
    value: str = Field("", alias="valor", description="Observation value, kept verbatim")

    _parsed_date: Optional[date_type] = PrivateAttr(default=None)

    def model_post_init(self, __context) -> None:
        try:
            self._parsed_date = parse_sgs_date(self.date)
        except ValueError:
            self._parsed_date = None

    @property
    def parsed_date(self) -> Optional[date_type]:
        """Calendar date, or None when the raw date does not parse"""
        return self._parsed_date

    def to_wire(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


# =============================================
# PAYLOADS
# =============================================

# Ingest payload: series id -> observations, in the order received
SeriesPayload = Dict[str, List[Observation]]

series_payload_adapter: TypeAdapter[SeriesPayload] = TypeAdapter(SeriesPayload)
observation_list_adapter: TypeAdapter[List[Observation]] = TypeAdapter(List[Observation])

# Producer body: JSON null is accepted for the whole body and for a series
IngestBody = Optional[Dict[str, Optional[List[Observation]]]]

ingest_body_adapter: TypeAdapter[IngestBody] = TypeAdapter(IngestBody)


def decode_series_payload(body: bytes) -> SeriesPayload:
    """
    Decode a raw producer body; a null body is an empty payload and a
    null series is an empty series

    Raises:
        pydantic.ValidationError: if the body is not JSON of that shape
    """
    raw = ingest_body_adapter.validate_json(body)
    return {series_id: observations or [] for series_id, observations in (raw or {}).items()}
