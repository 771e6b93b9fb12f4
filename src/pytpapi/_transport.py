"""HTTP transport for the vendor and remote config endpoints."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pytpapi._constants import USER_AGENT
from pytpapi._redact import redact_for_log
from pytpapi.exceptions import UpstreamFetchError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Endpoint modules only depend on this protocol so tests can pass a
    fake backend while production uses :class:`HttpTransport`.
    """

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        ...


class HttpTransport:
    """aiohttp transport returning decoded JSON bodies.

    Every request is bounded by ``timeout`` seconds in total.
    """

    def __init__(self, http_session: aiohttp.ClientSession, *, timeout: float) -> None:
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        """Send a request and decode the JSON reply.

        Raises
        ------
        UpstreamFetchError
            On network failure, timeout, a non-2xx status or a body that is
            not JSON.
        """
        merged: dict[str, str] = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }
        if json_body is not None:
            merged["content-type"] = "application/json; charset=UTF-8"
        if headers:
            merged.update(headers)

        _logger.debug("%s %s headers=%s", method, url, redact_for_log(merged))

        data = json.dumps(json_body, separators=(",", ":")) if json_body is not None else None
        try:
            async with self._http.request(
                method,
                url,
                data=data,
                headers=merged,
                timeout=self._timeout,
            ) as resp:
                body = await resp.read()
                status = resp.status
                if not 200 <= status < 300:
                    snippet = body[:200].decode("utf-8", errors="replace")
                    raise UpstreamFetchError(
                        f"HTTP {status} from {url}: {snippet}",
                        status_code=status,
                        url=url,
                    )
        except UpstreamFetchError:
            raise
        except asyncio.TimeoutError as exc:
            raise UpstreamFetchError(f"Request to {url} timed out", url=url) from exc
        except aiohttp.ClientError as exc:
            raise UpstreamFetchError(f"Request to {url} failed: {exc}", url=url) from exc

        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            snippet = body[:200].decode("utf-8", errors="replace")
            raise UpstreamFetchError(
                f"Invalid JSON from {url}: {snippet}",
                status_code=status,
                url=url,
            ) from exc
