"""
In-memory time series store

Holds the latest series pushed by the producer, keyed by series id.
A write replaces the whole series under that key; there is no merge,
append or dedup. All access goes through a single store-wide
readers-writer lock: queries share it, ingests take it exclusively.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Mapping, Sequence, Tuple, Any

from shared.models.sgs import Observation
from shared.utils.logger import get_logger

from .exceptions import StoreEmptyError
from .range_filter import DateRange, filter_observations
from .rwlock import ReadWriteLock

logger = get_logger(__name__)


@dataclass(frozen=True)
class _StoredSeries:
    observations: Tuple[Observation, ...]
    updated_at: datetime


class TimeSeriesStore:
    """
    Thread-safe mapping of series id -> ordered observations

    Example:
        store = TimeSeriesStore()
        store.replace("433", observations)
        result = store.query_range(DateRange.build(start=date(2024, 1, 1)))
    """

    def __init__(self):
        self._series: Dict[str, _StoredSeries] = {}
        self._lock = ReadWriteLock()

    # =============================================
    # WRITES
    # =============================================

    def replace(self, series_id: str, observations: Sequence[Observation]) -> None:
        """Store observations under series_id, discarding whatever was there"""
        stored = _StoredSeries(tuple(observations), datetime.utcnow())
        with self._lock.write_locked():
            self._series[series_id] = stored
        logger.info("series_replaced", series_id=series_id, observations=len(stored.observations))

    def replace_many(self, payload: Mapping[str, Sequence[Observation]]) -> int:
        """
        Replace every series of an ingest payload under one lock acquisition

        Returns:
            Number of series replaced
        """
        updated_at = datetime.utcnow()
        staged = {
            series_id: _StoredSeries(tuple(observations), updated_at)
            for series_id, observations in payload.items()
        }
        with self._lock.write_locked():
            self._series.update(staged)

        for series_id, stored in staged.items():
            logger.info("series_replaced", series_id=series_id, observations=len(stored.observations))
        return len(staged)

    # =============================================
    # READS
    # =============================================

    def query_range(self, date_range: DateRange) -> Dict[str, List[Observation]]:
        """
        Filter every stored series by date_range

        Series with no observation inside the range are left out, so an
        empty dict means "data exists but nothing matches".

        Raises:
            StoreEmptyError: if no series has ever been stored
        """
        with self._lock.read_locked():
            if not self._series:
                raise StoreEmptyError()

            result: Dict[str, List[Observation]] = {}
            for series_id, stored in self._series.items():
                filtered = filter_observations(series_id, stored.observations, date_range)
                if filtered:
                    result[series_id] = filtered
        return result

    def get_series(self, series_id: str) -> List[Observation]:
        """Full stored series, or an empty list for an unknown id"""
        with self._lock.read_locked():
            stored = self._series.get(series_id)
        return list(stored.observations) if stored else []

    def is_empty(self) -> bool:
        with self._lock.read_locked():
            return not self._series

    @property
    def series_count(self) -> int:
        with self._lock.read_locked():
            return len(self._series)

    @property
    def observation_count(self) -> int:
        with self._lock.read_locked():
            return sum(len(s.observations) for s in self._series.values())

    def stats(self) -> Dict[str, Any]:
        """Store statistics for health and catalog endpoints"""
        with self._lock.read_locked():
            series = {
                series_id: {
                    "observations": len(stored.observations),
                    "updated_at": stored.updated_at.isoformat(),
                }
                for series_id, stored in self._series.items()
            }
        return {
            "series_count": len(series),
            "observation_count": sum(s["observations"] for s in series.values()),
            "series": series,
        }
