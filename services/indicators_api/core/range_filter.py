"""
Date range filtering for indicator series

Filtering is pure: the same observations and range always give the
same result. Observations keep their original relative order and
are never sorted or deduplicated.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional

from shared.models.sgs import Observation, parse_sgs_date
from shared.utils.logger import get_logger

from .exceptions import InvalidDateFormatError

logger = get_logger(__name__)

DEFAULT_OPEN_END_LOOKAHEAD_DAYS = 365


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive date window [start, end]

    start=None means no lower bound. An open upper bound is resolved
    when the range is built, to a date far enough ahead to cover all
    published data.
    """

    start: Optional[date]
    end: date

    @classmethod
    def build(
        cls,
        start: Optional[date] = None,
        end: Optional[date] = None,
        today: Optional[date] = None,
        lookahead_days: int = DEFAULT_OPEN_END_LOOKAHEAD_DAYS,
    ) -> "DateRange":
        if end is None:
            end = (today or date.today()) + timedelta(days=lookahead_days)
        return cls(start=start, end=end)

    @classmethod
    def from_query(
        cls,
        start_raw: Optional[str],
        end_raw: Optional[str],
        today: Optional[date] = None,
        lookahead_days: int = DEFAULT_OPEN_END_LOOKAHEAD_DAYS,
    ) -> "DateRange":
        """
        Build a range from the raw query strings

        Raises:
            InvalidDateFormatError: if a non-empty bound is not DD/MM/YYYY
        """
        return cls.build(
            start=parse_query_date(start_raw, "dataInicial"),
            end=parse_query_date(end_raw, "dataFinal"),
            today=today,
            lookahead_days=lookahead_days,
        )

    def contains(self, value: date) -> bool:
        if self.start is not None and value < self.start:
            return False
        return value <= self.end


def parse_query_date(raw: Optional[str], field: str) -> Optional[date]:
    """Parse an optional DD/MM/YYYY query bound; empty means absent"""
    if raw is None or not raw.strip():
        return None
    try:
        return parse_sgs_date(raw.strip())
    except ValueError:
        logger.warning("query_date_invalid", field=field, raw=raw)
        raise InvalidDateFormatError(field, raw)


def filter_observations(
    series_id: str,
    observations: Iterable[Observation],
    date_range: DateRange,
) -> List[Observation]:
    """
    Return the observations of one series that fall inside date_range

    Observations whose date does not parse are dropped with a warning;
    they never fail the query.
    """
    selected: List[Observation] = []
    for observation in observations:
        observed_on = observation.parsed_date
        if observed_on is None:
            logger.warning(
                "observation_date_unparseable",
                series_id=series_id,
                date=observation.date,
            )
            continue
        if date_range.contains(observed_on):
            selected.append(observation)
    return selected
