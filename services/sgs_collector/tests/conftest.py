"""
Pytest configuration and fixtures for SGS Collector tests.
"""

import pytest

from services.sgs_collector.config import Settings

SGS_BASE_URL = "https://sgs.test/dados/serie"
INGEST_URL = "http://indicators.test/dados/sgs"


@pytest.fixture
def collector_settings() -> Settings:
    """Settings pointing at mocked endpoints."""
    return Settings(
        sgs_base_url=SGS_BASE_URL,
        ingest_url=INGEST_URL,
        series={"433": "IPCA", "1178": "SELIC"},
        lookback_days=30,
        max_parallel_downloads=2,
    )


@pytest.fixture
def ipca_rows() -> list:
    return [
        {"data": "01/05/2024", "valor": "0.46"},
        {"data": "01/06/2024", "valor": "0.21"},
    ]
