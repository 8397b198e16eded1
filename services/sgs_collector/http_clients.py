"""
HTTP Clients - Clientes HTTP para SGS Collector

APIs utilizadas:
- SGS (Banco Central do Brasil): series de indicadores
- Indicators API: destino de los datos recolectados
"""

from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from shared.models.sgs import Observation, format_sgs_date, observation_list_adapter
from shared.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# Configuración
# ============================================================================

SGS_LIMITS = httpx.Limits(
    max_keepalive_connections=5,
    max_connections=10,
    keepalive_expiry=60.0
)


# ============================================================================
# Cliente para SGS API
# ============================================================================

class SGSClient:
    """
    Cliente HTTP para la API SGS del Banco Central do Brasil

    Endpoints:
    - /bcdata.sgs.{code}/dados (observaciones de una serie)
    """

    def __init__(self, base_url: str, timeout: float = 30.0):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            limits=SGS_LIMITS,
        )
        logger.info("sgs_client_initialized", base_url=base_url)

    async def fetch_series(self, code: str, start: date, end: date) -> List[Observation]:
        """
        Download observations of one series between start and end

        Raises:
            httpx.HTTPError: on transport errors or non-2xx responses
            pydantic.ValidationError: if the body is not a list of observations
        """
        params = {
            "formato": "json",
            "dataInicial": format_sgs_date(start),
            "dataFinal": format_sgs_date(end),
        }

        response = await self._client.get(f"/bcdata.sgs.{code}/dados", params=params)
        response.raise_for_status()

        return observation_list_adapter.validate_python(response.json())

    async def close(self):
        await self._client.aclose()
        logger.info("sgs_client_closed")


# ============================================================================
# Cliente para Indicators API
# ============================================================================

class IndicatorsAPIClient:
    """
    Cliente HTTP para el endpoint de ingesta de Indicators API
    """

    def __init__(self, ingest_url: str, timeout: float = 30.0):
        self.ingest_url = ingest_url
        self._client = httpx.AsyncClient(timeout=timeout)

    async def push(self, payload: Mapping[str, Sequence[Observation]]) -> Optional[Dict[str, Any]]:
        """
        Send collected series to the ingest endpoint

        Raises:
            httpx.HTTPError: on transport errors or non-2xx responses
        """
        body = {
            code: [observation.to_wire() for observation in observations]
            for code, observations in payload.items()
        }

        response = await self._client.post(self.ingest_url, json=body)
        response.raise_for_status()

        logger.info("indicators_api_push_ok", status=response.status_code, series=len(body))

        if response.headers.get("content-type", "").startswith("application/json"):
            return response.json()
        return None

    async def close(self):
        await self._client.aclose()
