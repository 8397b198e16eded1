"""
SGS Collector

Downloads indicator series from the SGS API and pushes them, in a
single ingest request, to the Indicators API. Each push carries the
full lookback window so the API can replace its series wholesale.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from shared.models.sgs import Observation
from shared.utils.logger import LoggerMixin

from .config import Settings, settings as default_settings
from .http_clients import SGSClient, IndicatorsAPIClient


@dataclass
class CollectionResult:
    """Outcome of one collector run"""

    collected: Dict[str, List[Observation]] = field(default_factory=dict)
    empty: List[str] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)
    pushed: bool = False

    @property
    def observation_count(self) -> int:
        return sum(len(obs) for obs in self.collected.values())


class SGSCollector(LoggerMixin):
    """
    Collects configured SGS series and forwards them to the Indicators API

    Example:
        async with SGSCollector() as collector:
            result = await collector.run()
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        sgs_client: Optional[SGSClient] = None,
        api_client: Optional[IndicatorsAPIClient] = None,
    ):
        self.settings = settings or default_settings
        self.logger = self.get_logger()
        self.sgs = sgs_client or SGSClient(
            self.settings.sgs_base_url,
            timeout=self.settings.request_timeout,
        )
        self.api = api_client or IndicatorsAPIClient(
            self.settings.get_ingest_url(),
            timeout=self.settings.request_timeout,
        )

    async def __aenter__(self) -> "SGSCollector":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        await self.sgs.close()
        await self.api.close()

    async def collect(
        self,
        codes: Optional[Iterable[str]] = None,
        today: Optional[date] = None,
    ) -> CollectionResult:
        """
        Download every requested series over the lookback window

        Failures and empty series are recorded and skipped; they do not
        stop the other downloads.
        """
        end = today or date.today()
        start = end - timedelta(days=self.settings.lookback_days)
        codes = list(codes) if codes is not None else list(self.settings.series)

        result = CollectionResult()
        semaphore = asyncio.Semaphore(self.settings.max_parallel_downloads)

        async def download(code: str) -> None:
            async with semaphore:
                name = self.settings.series.get(code, code)
                self.logger.info("sgs_series_fetching", code=code, name=name,
                                 start=start.isoformat(), end=end.isoformat())
                try:
                    observations = await self.sgs.fetch_series(code, start, end)
                except Exception as e:
                    self.logger.error("sgs_series_fetch_failed", code=code, error=str(e))
                    result.errors[code] = str(e)
                    return

                if not observations:
                    self.logger.warning("sgs_series_empty", code=code,
                                        start=start.isoformat(), end=end.isoformat())
                    result.empty.append(code)
                    return

                self.logger.info(
                    "sgs_series_fetched",
                    code=code,
                    count=len(observations),
                    first=observations[0].to_wire(),
                    last=observations[-1].to_wire(),
                )
                result.collected[code] = observations

        await asyncio.gather(*(download(code) for code in codes))

        if result.errors:
            self.logger.warning("sgs_collection_partial", failed=sorted(result.errors))

        return result

    async def run(
        self,
        codes: Optional[Iterable[str]] = None,
        today: Optional[date] = None,
        dry_run: bool = False,
    ) -> CollectionResult:
        """
        Collect, then push everything collected in one ingest request

        Raises:
            httpx.HTTPError: if the push to the Indicators API fails
        """
        result = await self.collect(codes=codes, today=today)

        if not result.collected:
            self.logger.info("sgs_nothing_to_push")
            return result

        if dry_run:
            self.logger.info("sgs_dry_run", series=sorted(result.collected),
                             observations=result.observation_count)
            return result

        await self.api.push(result.collected)
        result.pushed = True
        self.logger.info("sgs_push_completed", series=len(result.collected),
                         observations=result.observation_count)
        return result
