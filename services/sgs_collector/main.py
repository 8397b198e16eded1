"""
SGS Collector - entry point

Usage:
    python -m services.sgs_collector.main
    python -m services.sgs_collector.main --series 433 1178 --lookback-days 90
    python -m services.sgs_collector.main --dry-run
"""

import argparse
import asyncio
import sys
from typing import List, Optional

import httpx

from shared.utils.logger import configure_logging, get_logger

from .collector import SGSCollector
from .config import settings

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Collect SGS series and push them to the Indicators API")
    parser.add_argument(
        "--series",
        nargs="+",
        metavar="CODE",
        help="SGS series codes to collect (default: all configured)",
    )
    parser.add_argument(
        "--lookback-days",
        type=int,
        help=f"Days of history to collect (default: {settings.lookback_days})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Collect but do not push",
    )
    return parser


async def run_collector(
    codes: Optional[List[str]] = None,
    lookback_days: Optional[int] = None,
    dry_run: bool = False,
) -> int:
    collector_settings = settings
    if lookback_days is not None:
        collector_settings = settings.model_copy(update={"lookback_days": lookback_days})

    async with SGSCollector(settings=collector_settings) as collector:
        try:
            result = await collector.run(codes=codes, dry_run=dry_run)
        except httpx.HTTPStatusError as e:
            logger.error("indicators_api_push_failed",
                         status=e.response.status_code, body=e.response.text)
            return 1
        except httpx.HTTPError as e:
            logger.error("indicators_api_unreachable", error=str(e))
            return 1

    logger.info(
        "sgs_collector_finished",
        collected=sorted(result.collected),
        empty=result.empty,
        failed=sorted(result.errors),
        pushed=result.pushed,
    )
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point"""
    configure_logging(service_name=settings.service_name)
    args = build_parser().parse_args(argv)

    exit_code = asyncio.run(
        run_collector(codes=args.series, lookback_days=args.lookback_days, dry_run=args.dry_run)
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
