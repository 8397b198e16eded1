"""
Pytest configuration and fixtures for Indicators API tests.
"""

import pytest
from typing import Dict, List

from fastapi.testclient import TestClient

from shared.models.sgs import Observation
from services.indicators_api.api import get_store
from services.indicators_api.core.store import TimeSeriesStore
from services.indicators_api.main import app


def make_obs(date: str, value: str = "1.00") -> Observation:
    """Helper to create an Observation from SGS wire fields."""
    return Observation(data=date, valor=value)


@pytest.fixture
def ipca_series() -> List[Observation]:
    """IPCA-like series with one malformed date."""
    return [
        make_obs("01/01/2024", "5.25"),
        make_obs("15/06/2024", "5.50"),
        make_obs("bad-date", "9.99"),
    ]


@pytest.fixture
def sample_payload() -> Dict[str, list]:
    """Raw ingest body as the collector sends it."""
    return {
        "433": [
            {"data": "01/01/2024", "valor": "5.25"},
            {"data": "15/06/2024", "valor": "5.50"},
            {"data": "bad-date", "valor": "9.99"},
        ],
        "1178": [
            {"data": "02/01/2024", "valor": "11.65"},
            {"data": "03/01/2024", "valor": "11.65"},
        ],
    }


@pytest.fixture
def store() -> TimeSeriesStore:
    """Create a fresh, empty store."""
    return TimeSeriesStore()


@pytest.fixture
def client(store):
    """TestClient wired to the store fixture."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
