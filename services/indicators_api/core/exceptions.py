"""
Indicators API errors
"""

from typing import List, Optional


class IndicatorsError(Exception):
    """Base error for the indicators service"""


class MalformedPayloadError(IndicatorsError):
    """Ingest payload cannot be decoded into series -> observations"""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class InvalidDateFormatError(IndicatorsError):
    """A query bound is not a DD/MM/YYYY date"""

    def __init__(self, field: str, raw: str):
        super().__init__(f"Invalid {field} '{raw}'. Use DD/MM/YYYY")
        self.field = field
        self.raw = raw


class StoreEmptyError(IndicatorsError):
    """No series have been ingested yet"""

    def __init__(self):
        super().__init__("No indicator data available")
