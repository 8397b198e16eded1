"""Time series store and date range filtering"""

from .exceptions import (
    IndicatorsError,
    MalformedPayloadError,
    InvalidDateFormatError,
    StoreEmptyError,
)
from .range_filter import DateRange, filter_observations, parse_query_date
from .rwlock import ReadWriteLock
from .store import TimeSeriesStore

__all__ = [
    "IndicatorsError",
    "MalformedPayloadError",
    "InvalidDateFormatError",
    "StoreEmptyError",
    "DateRange",
    "filter_observations",
    "parse_query_date",
    "ReadWriteLock",
    "TimeSeriesStore",
]
