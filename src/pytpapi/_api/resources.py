"""Authenticated read endpoints.

Endpoints:
  - GET <api_base>/api/v2/pois/<language>
  - GET <api_base>/api/v2/waitingtimes
  - GET <api_base>/api/v2/seasons/<language>

Each call takes a bearer token obtained by the caller; field shapes are
only interpreted by the ingestion layer.
"""

from __future__ import annotations

import logging
from typing import Any

from pytpapi._api.login import api_url
from pytpapi._constants import AUTH_HEADER, POIS_PATH, SEASONS_PATH, WAITING_TIMES_PATH
from pytpapi._transport import Transport
from pytpapi.config import ParkConfig
from pytpapi.exceptions import UpstreamFetchError

_logger = logging.getLogger(__name__)


async def _get_list(
    config: ParkConfig,
    transport: Transport,
    token: str,
    path: str,
    field: str,
) -> list[dict[str, Any]]:
    url = api_url(config, path)
    response = await transport.request_json("GET", url, headers={AUTH_HEADER: token})
    items = response.get(field) if isinstance(response, dict) else None
    if not isinstance(items, list):
        raise UpstreamFetchError(f"Response from {url} has no {field!r} list", url=url)
    _logger.debug("GET %s returned %d %s", url, len(items), field)
    return [item for item in items if isinstance(item, dict)]


async def fetch_pois(config: ParkConfig, transport: Transport, token: str) -> list[dict[str, Any]]:
    """Fetch every raw POI entity of the vendor (all parks, all kinds)."""
    return await _get_list(config, transport, token, POIS_PATH.format(language=config.language), "pois")


async def fetch_waiting_times(config: ParkConfig, transport: Transport, token: str) -> list[dict[str, Any]]:
    return await _get_list(config, transport, token, WAITING_TIMES_PATH, "waitingtimes")


async def fetch_seasons(config: ParkConfig, transport: Transport, token: str) -> list[dict[str, Any]]:
    return await _get_list(config, transport, token, SEASONS_PATH.format(language=config.language), "seasons")
